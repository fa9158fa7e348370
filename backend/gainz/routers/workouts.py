import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from gainz.db import get_db
from gainz.errors import InvalidMoveError
from gainz.repositories import SessionRepository, WorkoutRepository
from gainz.schemas.workout import WorkoutBatchDelete, WorkoutCreate, WorkoutMove, WorkoutRead

router = APIRouter(tags=["workouts"])

def _session_or_404(db: Session, session_uid: uuid.UUID):
    sess = SessionRepository(db).get(session_uid)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.post("/sessions/{session_uid}/workouts", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def add_workout(session_uid: uuid.UUID, payload: WorkoutCreate, db: Session = Depends(get_db)):
    _session_or_404(db, session_uid)
    workout = WorkoutRepository(db).add(session_uid, payload.name)
    if workout is None:
        # blank name: nothing stored, nothing to report
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return workout

@router.get("/sessions/{session_uid}/workouts", response_model=list[WorkoutRead])
def list_workouts(session_uid: uuid.UUID, db: Session = Depends(get_db)):
    sess = _session_or_404(db, session_uid)
    return WorkoutRepository(db).list_by_session(sess.id)

@router.post("/sessions/{session_uid}/workouts/move", response_model=list[WorkoutRead])
def move_workout(session_uid: uuid.UUID, payload: WorkoutMove, db: Session = Depends(get_db)):
    _session_or_404(db, session_uid)
    try:
        return WorkoutRepository(db).reorder(session_uid, payload.source, payload.destination)
    except InvalidMoveError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.post("/sessions/{session_uid}/workouts/delete", response_model=list[WorkoutRead])
def delete_workouts(session_uid: uuid.UUID, payload: WorkoutBatchDelete, db: Session = Depends(get_db)):
    _session_or_404(db, session_uid)
    return WorkoutRepository(db).delete_many(session_uid, payload.workout_ids)

@router.delete("/workouts/{workout_uid}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_uid: uuid.UUID, db: Session = Depends(get_db)):
    if not WorkoutRepository(db).delete(workout_uid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
