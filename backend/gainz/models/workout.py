import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Index, String, Uuid
from gainz.db import Base

class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_session_order", "session_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, unique=True, index=True, default=uuid.uuid4)
    session_id: Mapped[int] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    session = relationship("WorkoutSession", back_populates="workouts")
    sets = relationship("WorkoutSet", back_populates="workout", cascade="all, delete-orphan")
