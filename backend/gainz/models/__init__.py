from gainz.models.session import WorkoutSession
from gainz.models.workout import Workout
from gainz.models.workout_set import WorkoutSet

__all__ = ["WorkoutSession", "Workout", "WorkoutSet"]
