# gainz/repositories/workout_repo.py
from __future__ import annotations
import uuid
from typing import Iterable, Optional
from sqlalchemy import select
from gainz.inputs import clean_name
from gainz.models import Workout
from gainz.ordering import close_gap, move, renumber
from gainz.repositories.base import BaseRepository
from gainz.repositories.session_repo import SessionRepository

class WorkoutRepository(BaseRepository[Workout]):
    """
    Workouts of a session, kept densely ordered: after every mutation the orders
    within one session are exactly 0..n-1.
    """
    model = Workout

    def list_by_session(self, session_id: int) -> list[Workout]:
        stmt = select(Workout).where(Workout.session_id == session_id)\
                              .order_by(Workout.order.asc(), Workout.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def _session(self, session_uid: uuid.UUID):
        return SessionRepository(self.db, single_active=False).get(session_uid)

    def add(self, session_uid: uuid.UUID, name: str) -> Optional[Workout]:
        """Append a workout. Blank names are ignored and return None."""
        clean = clean_name(name)
        if clean is None:
            return None
        sess = self._session(session_uid)
        if not sess:
            return None
        workout = Workout(
            uid=uuid.uuid4(),
            session_id=sess.id,
            name=clean,
            order=self.count_where(Workout.session_id == sess.id),
        )
        return self.add_and_commit(workout, "add workout")

    def reorder(self, session_uid: uuid.UUID, source: int, destination: int) -> Optional[list[Workout]]:
        """
        Move the workout at sorted index ``source`` so it lands at ``destination``,
        then renumber the whole session. Raises InvalidMoveError for bad indices.
        """
        sess = self._session(session_uid)
        if not sess:
            return None
        workouts = self.list_by_session(sess.id)
        reordered = move(workouts, source, destination)
        if source == destination:
            return workouts
        renumber(reordered)
        self.commit("reorder workouts")
        return reordered

    def delete(self, uid: uuid.UUID) -> bool:
        workout = self.get(uid)
        if not workout:
            return False
        siblings = [w for w in self.list_by_session(workout.session_id) if w.id != workout.id]
        close_gap(siblings, workout.order)
        self.db.delete(workout)
        self.commit("delete workout")
        return True

    def delete_many(self, session_uid: uuid.UUID, uids: Iterable[uuid.UUID]) -> Optional[list[Workout]]:
        """
        Batch delete. Survivors are always renumbered to 0..n-1 in their current
        sorted sequence; uids that are not in this session are skipped.
        """
        sess = self._session(session_uid)
        if not sess:
            return None
        targets = set(uids)
        workouts = self.list_by_session(sess.id)
        survivors = [w for w in workouts if w.uid not in targets]
        doomed = [w for w in workouts if w.uid in targets]
        if not doomed:
            return workouts
        for w in doomed:
            self.db.delete(w)
        renumber(survivors)
        self.commit("delete workouts")
        return survivors
