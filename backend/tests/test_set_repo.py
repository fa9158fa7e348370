import uuid

import pytest

from gainz.repositories import SetRepository, WorkoutRepository


@pytest.fixture
def bench(db, make_session):
    sess = make_session("Bench Press")
    return WorkoutRepository(db).list_by_session(sess.id)[0]


def sets_of(db, workout):
    return [(s.reps, s.weight, s.order) for s in SetRepository(db).list_by_workout(workout.id)]


def test_add_sets_in_order(db, bench):
    repo = SetRepository(db)
    first = repo.add(bench.uid, "8", "225.0")
    second = repo.add(bench.uid, "6", "225.0")
    assert (first.order, second.order) == (0, 1)
    assert sets_of(db, bench) == [(8, 225.0, 0), (6, 225.0, 1)]


@pytest.mark.parametrize("reps,weight", [
    ("", "135"),
    ("10", ""),
    ("10", "abc"),
    ("ten", "135"),
    ("8.5", "135"),
    ("10", "-5"),
])
def test_bad_input_is_silently_ignored(db, bench, reps, weight):
    assert SetRepository(db).add(bench.uid, reps, weight) is None
    assert sets_of(db, bench) == []


def test_add_to_unknown_workout(db):
    assert SetRepository(db).add(uuid.uuid4(), "8", "225") is None


def test_delete_leaves_gap(db, bench):
    repo = SetRepository(db)
    first = repo.add(bench.uid, "8", "225.0")
    repo.add(bench.uid, "6", "225.0")

    assert repo.delete(first.uid) is True

    # no compaction for sets
    assert sets_of(db, bench) == [(6, 225.0, 1)]


def test_append_after_gap_duplicates_order_and_keeps_insertion_sequence(db, bench):
    repo = SetRepository(db)
    first = repo.add(bench.uid, "8", "225.0")
    repo.add(bench.uid, "6", "225.0")
    repo.delete(first.uid)

    repo.add(bench.uid, "5", "245.0")

    assert sets_of(db, bench) == [(6, 225.0, 1), (5, 245.0, 1)]


def test_delete_unknown_set(db):
    assert SetRepository(db).delete(uuid.uuid4()) is False
