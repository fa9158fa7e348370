import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Float, ForeignKey, Index, Uuid
from gainz.db import Base

class WorkoutSet(Base):
    __tablename__ = "workout_sets"
    __table_args__ = (Index("ix_workout_sets_workout_order", "workout_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, unique=True, index=True, default=uuid.uuid4)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # pounds
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    workout = relationship("Workout", back_populates="sets")
