from datetime import datetime
import uuid
from pydantic import BaseModel
from gainz.schemas.workout import WorkoutWithSets

class SessionCreate(BaseModel):
    started_at: datetime | None = None

class SessionRead(BaseModel):
    uid: uuid.UUID
    started_at: datetime
    ended_at: datetime | None = None

    model_config = {"from_attributes": True}

class SessionSummary(SessionRead):
    """One row of the history list."""
    status: str
    workout_count: int
    duration: str | None = None

class SessionDetail(SessionRead):
    status: str
    duration: str | None = None
    workouts: list[WorkoutWithSets] = []

class SessionBatchDelete(BaseModel):
    session_ids: list[uuid.UUID]
