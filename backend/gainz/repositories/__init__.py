from gainz.repositories.session_repo import SessionRepository
from gainz.repositories.workout_repo import WorkoutRepository
from gainz.repositories.set_repo import SetRepository

__all__ = ["SessionRepository", "WorkoutRepository", "SetRepository"]
