import uuid
from datetime import datetime, timedelta, timezone

import pytest

from gainz.errors import ActiveSessionExistsError
from gainz.models import Workout, WorkoutSession, WorkoutSet
from gainz.repositories import SessionRepository, SetRepository, WorkoutRepository

T0 = datetime(2025, 12, 17, 9, 0, tzinfo=timezone.utc)


def naive(dt):
    return dt.replace(tzinfo=None)


def test_create_session_is_active_and_empty(db):
    sess = SessionRepository(db).create()
    assert sess.id and isinstance(sess.uid, uuid.UUID)
    assert sess.started_at is not None
    assert sess.ended_at is None
    assert sess.is_active
    assert WorkoutRepository(db).list_by_session(sess.id) == []


def test_create_with_explicit_start(db):
    sess = SessionRepository(db).create(started_at=T0)
    assert naive(sess.started_at) == naive(T0)


def test_end_session_and_end_again(db):
    repo = SessionRepository(db)
    sess = repo.create(started_at=T0)

    ended = repo.end(sess.uid, ended_at=T0 + timedelta(hours=1))
    assert naive(ended.ended_at) == naive(T0 + timedelta(hours=1))
    assert not ended.is_active

    # second call just overwrites the end timestamp
    again = repo.end(sess.uid, ended_at=T0 + timedelta(hours=2))
    assert naive(again.ended_at) == naive(T0 + timedelta(hours=2))


def test_end_unknown_session(db):
    assert SessionRepository(db).end(uuid.uuid4()) is None


def test_history_newest_first(db):
    repo = SessionRepository(db)
    old = repo.create(started_at=T0)
    new = repo.create(started_at=T0 + timedelta(days=2))
    mid = repo.create(started_at=T0 + timedelta(days=1))
    assert [s.uid for s in repo.list_history()] == [new.uid, mid.uid, old.uid]
    assert [s.uid for s in repo.list_history(limit=1, offset=1)] == [mid.uid]


def test_active_sessions_only(db):
    repo = SessionRepository(db)
    done = repo.create(started_at=T0)
    repo.end(done.uid)
    live = repo.create(started_at=T0 + timedelta(hours=3))
    assert [s.uid for s in repo.list_active()] == [live.uid]


def test_multiple_active_sessions_allowed_by_default(db):
    repo = SessionRepository(db, single_active=False)
    repo.create()
    repo.create()
    assert len(repo.list_active()) == 2


def test_single_active_session_enforced_when_configured(db):
    repo = SessionRepository(db, single_active=True)
    first = repo.create()
    with pytest.raises(ActiveSessionExistsError):
        repo.create()
    repo.end(first.uid)
    assert repo.create().is_active


def test_workout_counts(db, make_session):
    a = make_session("Bench", "Squat")
    b = make_session()
    counts = SessionRepository(db).workout_counts([a.id, b.id])
    assert counts == {a.id: 2, b.id: 0}
    assert SessionRepository(db).workout_counts([]) == {}


def test_delete_session_cascades(db, make_session):
    doomed = make_session("Bench", "Squat")
    keep = make_session("Row")
    for w in WorkoutRepository(db).list_by_session(doomed.id):
        SetRepository(db).add(w.uid, "5", "100")
    row = WorkoutRepository(db).list_by_session(keep.id)[0]
    SetRepository(db).add(row.uid, "12", "90")

    assert SessionRepository(db).delete(doomed.uid) is True

    assert db.query(WorkoutSession).count() == 1
    assert [w.name for w in db.query(Workout).all()] == ["Row"]
    assert [s.reps for s in db.query(WorkoutSet).all()] == [12]


def test_delete_unknown_session(db):
    assert SessionRepository(db).delete(uuid.uuid4()) is False


def test_delete_many_sessions(db, make_session):
    a = make_session("A")
    b = make_session("B")
    c = make_session("C")
    assert SessionRepository(db).delete_many([a.uid, c.uid, uuid.uuid4()]) == 2
    assert [s.uid for s in SessionRepository(db).list_history()] == [b.uid]
    assert SessionRepository(db).delete_many([]) == 0
