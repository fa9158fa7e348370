import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from gainz.db import get_db
from gainz.errors import ActiveSessionExistsError
from gainz.formatting import session_duration, session_status
from gainz.ordering import sorted_by_order
from gainz.repositories import SessionRepository
from gainz.schemas.session import (
    SessionBatchDelete, SessionCreate, SessionDetail, SessionRead, SessionSummary,
)
from gainz.schemas.workout import WorkoutWithSets
from gainz.schemas.workout_set import SetRead

router = APIRouter(prefix="/sessions", tags=["sessions"])

def _get_or_404(repo: SessionRepository, session_uid: uuid.UUID):
    sess = repo.get(session_uid)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def start_session(payload: SessionCreate | None = None, db: Session = Depends(get_db)):
    started_at = payload.started_at if payload else None
    try:
        return SessionRepository(db).create(started_at=started_at)
    except ActiveSessionExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.get("", response_model=list[SessionSummary])
def session_history(
    db: Session = Depends(get_db),
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    """Newest first. Without ``limit`` every session is returned."""
    repo = SessionRepository(db)
    sessions = repo.list_history(limit=limit, offset=offset)
    counts = repo.workout_counts(s.id for s in sessions)
    return [
        SessionSummary(
            uid=s.uid,
            started_at=s.started_at,
            ended_at=s.ended_at,
            status=session_status(s.ended_at),
            workout_count=counts[s.id],
            duration=session_duration(s.started_at, s.ended_at),
        )
        for s in sessions
    ]

@router.get("/active", response_model=list[SessionRead])
def active_sessions(db: Session = Depends(get_db)):
    return SessionRepository(db).list_active()

@router.post("/delete")
def delete_sessions(payload: SessionBatchDelete, db: Session = Depends(get_db)):
    return {"deleted": SessionRepository(db).delete_many(payload.session_ids)}

@router.get("/{session_uid}", response_model=SessionDetail)
def session_detail(session_uid: uuid.UUID, db: Session = Depends(get_db)):
    sess = _get_or_404(SessionRepository(db), session_uid)
    # relationship collections come back unordered
    workouts = [
        WorkoutWithSets(
            uid=w.uid, name=w.name, order=w.order,
            sets=[SetRead.model_validate(s) for s in sorted_by_order(w.sets)],
        )
        for w in sorted_by_order(sess.workouts)
    ]
    return SessionDetail(
        uid=sess.uid,
        started_at=sess.started_at,
        ended_at=sess.ended_at,
        status=session_status(sess.ended_at),
        duration=session_duration(sess.started_at, sess.ended_at),
        workouts=workouts,
    )

@router.post("/{session_uid}/end", response_model=SessionRead)
def end_session(session_uid: uuid.UUID, db: Session = Depends(get_db)):
    sess = SessionRepository(db).end(session_uid)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.delete("/{session_uid}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_uid: uuid.UUID, db: Session = Depends(get_db)):
    if not SessionRepository(db).delete(session_uid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
