from typing import Annotated
import uuid
from pydantic import BaseModel, Field, field_validator
from gainz.formatting import display_name
from gainz.schemas.workout_set import SetRead

Position = Annotated[int, Field(ge=0)]

class WorkoutCreate(BaseModel):
    # blank names are not a validation error, the store just ignores them
    name: Annotated[str, Field(max_length=120)]

class WorkoutRead(BaseModel):
    uid: uuid.UUID
    name: str
    order: int

    model_config = {"from_attributes": True}

    @field_validator("name", mode="before")
    @classmethod
    def name_or_placeholder(cls, v: str | None) -> str:
        return display_name(v)

class WorkoutWithSets(WorkoutRead):
    sets: list[SetRead] = []

class WorkoutMove(BaseModel):
    source: Position
    destination: Position

class WorkoutBatchDelete(BaseModel):
    workout_ids: list[uuid.UUID]
