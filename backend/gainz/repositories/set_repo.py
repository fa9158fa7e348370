from __future__ import annotations
import uuid
from typing import Optional
from sqlalchemy import select
from gainz.inputs import parse_reps, parse_weight
from gainz.models import Workout, WorkoutSet
from gainz.repositories.base import BaseRepository

class SetRepository(BaseRepository[WorkoutSet]):
    model = WorkoutSet

    def list_by_workout(self, workout_id: int) -> list[WorkoutSet]:
        stmt = select(WorkoutSet).where(WorkoutSet.workout_id == workout_id)\
                                 .order_by(WorkoutSet.order.asc(), WorkoutSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def add(self, workout_uid: uuid.UUID, reps: str, weight: str) -> Optional[WorkoutSet]:
        """
        Append a set from raw text. Returns None (and stores nothing) when either
        field is empty or does not parse.

        The new order is the current set count, not max+1. After a delete this can
        repeat an existing order; listing falls back to insertion order then.
        """
        reps_val = parse_reps(reps)
        weight_val = parse_weight(weight)
        if reps_val is None or weight_val is None:
            return None
        workout = self.db.execute(select(Workout).where(Workout.uid == workout_uid)).scalar_one_or_none()
        if not workout:
            return None
        new_set = WorkoutSet(
            uid=uuid.uuid4(),
            workout_id=workout.id,
            reps=reps_val,
            weight=weight_val,
            order=self.count_where(WorkoutSet.workout_id == workout.id),
        )
        return self.add_and_commit(new_set, "add set")

    def delete(self, uid: uuid.UUID) -> bool:
        # Siblings keep their orders; gaps are left in place unlike workout deletes.
        s = self.get(uid)
        if not s:
            return False
        self.db.delete(s)
        self.commit("delete set")
        return True
