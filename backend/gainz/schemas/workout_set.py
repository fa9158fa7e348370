from typing import Annotated
import uuid
from pydantic import BaseModel, Field, computed_field
from gainz.formatting import set_summary

# Raw text as typed; parsing (and silent rejection) happens in the repository
RawNumber = Annotated[str, Field(max_length=32)]

class SetCreate(BaseModel):
    reps: RawNumber
    weight: RawNumber

class SetRead(BaseModel):
    uid: uuid.UUID
    reps: int
    weight: float
    order: int

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def summary(self) -> str:
        return set_summary(self.reps, self.weight)
