# gainz/fixtures.py
"""Deterministic sample data for previews and tests."""
from __future__ import annotations
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from gainz.models import WorkoutSession, Workout, WorkoutSet
from gainz.repositories import SessionRepository

log = logging.getLogger(__name__)

PREVIEW_WORKOUTS = [
    ("Bench Press", [(8, 225.0), (6, 225.0)]),
    ("Incline Dumbbell Press", [(10, 80.0)]),
]


def store_is_empty(db: Session) -> bool:
    return db.execute(select(func.count()).select_from(WorkoutSession)).scalar_one() == 0


def seed_preview(db: Session, *, now: Optional[datetime] = None) -> WorkoutSession:
    """One active session that started an hour ago, with two workouts."""
    now = now or datetime.now(timezone.utc)
    sess = WorkoutSession(uid=uuid.uuid4(), started_at=now - timedelta(hours=1), ended_at=None)
    for w_order, (name, sets) in enumerate(PREVIEW_WORKOUTS):
        workout = Workout(uid=uuid.uuid4(), name=name, order=w_order)
        for s_order, (reps, weight) in enumerate(sets):
            workout.sets.append(WorkoutSet(uid=uuid.uuid4(), reps=reps, weight=weight, order=s_order))
        sess.workouts.append(workout)
    # PersistenceError on failure, with the unit of work rolled back
    sess = SessionRepository(db, single_active=False).add_and_commit(sess, "seed preview")
    log.info("seeded preview session %s", sess.uid)
    return sess
