import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from gainz.db import get_db
from gainz.schemas.workout_set import SetCreate, SetRead
from gainz.repositories import WorkoutRepository, SetRepository

router = APIRouter(tags=["sets"])

@router.post("/workouts/{workout_uid}/sets", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def add_set(workout_uid: uuid.UUID, payload: SetCreate, db: Session = Depends(get_db)):
    if not WorkoutRepository(db).get(workout_uid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

    new_set = SetRepository(db).add(workout_uid, payload.reps, payload.weight)
    if new_set is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return new_set

@router.get("/workouts/{workout_uid}/sets", response_model=list[SetRead])
def list_sets(workout_uid: uuid.UUID, db: Session = Depends(get_db)):
    workout = WorkoutRepository(db).get(workout_uid)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return SetRepository(db).list_by_workout(workout.id)

@router.delete("/sets/{set_uid}", status_code=status.HTTP_204_NO_CONTENT)
def delete_set(set_uid: uuid.UUID, db: Session = Depends(get_db)):
    if not SetRepository(db).delete(set_uid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
