from __future__ import annotations
import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from gainz.errors import ActiveSessionExistsError
from gainz.models import WorkoutSession, Workout
from gainz.models.session import utcnow
from gainz.repositories.base import BaseRepository
from gainz.settings import get_settings

log = logging.getLogger(__name__)

def _as_utc(dt: datetime | None) -> datetime | None:
    # stored without offset, so everything goes in as UTC
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc)

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    def __init__(self, db: Session, *, single_active: bool | None = None):
        super().__init__(db)
        if single_active is None:
            single_active = get_settings().ENFORCE_SINGLE_ACTIVE_SESSION
        self.single_active = single_active

    # READS
    def list_history(self, *, limit: int | None = None, offset: int = 0) -> list[WorkoutSession]:
        stmt = select(WorkoutSession)\
            .order_by(WorkoutSession.started_at.desc(), WorkoutSession.id.desc())\
            .offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def list_active(self) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.ended_at.is_(None))\
            .order_by(WorkoutSession.started_at.desc(), WorkoutSession.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def workout_counts(self, session_ids: Iterable[int]) -> dict[int, int]:
        ids = list(session_ids)
        if not ids:
            return {}
        stmt = select(Workout.session_id, func.count(Workout.id))\
            .where(Workout.session_id.in_(ids))\
            .group_by(Workout.session_id)
        counts = dict(self.db.execute(stmt).all())
        return {sid: counts.get(sid, 0) for sid in ids}

    # WRITES
    def create(self, *, started_at: datetime | None = None) -> WorkoutSession:
        if self.single_active and self.list_active():
            raise ActiveSessionExistsError("a session is already in progress")
        sess = WorkoutSession(uid=uuid.uuid4(), started_at=_as_utc(started_at) or utcnow())
        sess = self.add_and_commit(sess, "create session")
        log.info("session %s started", sess.uid)
        return sess

    def end(self, uid: uuid.UUID, *, ended_at: datetime | None = None) -> Optional[WorkoutSession]:
        """Ending twice just moves the end timestamp."""
        sess = self.get(uid)
        if not sess:
            return None
        sess.ended_at = _as_utc(ended_at) or utcnow()
        self.commit("end session")
        self.db.refresh(sess)
        return sess

    def delete(self, uid: uuid.UUID) -> bool:
        sess = self.get(uid)
        if not sess:
            return False
        # ORM cascade removes workouts and their sets in the same flush
        self.db.delete(sess)
        self.commit("delete session")
        return True

    def delete_many(self, uids: Iterable[uuid.UUID]) -> int:
        wanted = list(uids)
        if not wanted:
            return 0
        stmt = select(WorkoutSession).where(WorkoutSession.uid.in_(wanted))
        doomed = self.db.execute(stmt).scalars().all()
        for sess in doomed:
            self.db.delete(sess)
        if doomed:
            self.commit("delete sessions")
        return len(doomed)
