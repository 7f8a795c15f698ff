"""Activity log API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.activity import ActivityCreate, ActivityOut, ActivityRecord
from app.services.activity_service import append_activity, recent_activities

router = APIRouter(prefix="/users", tags=["activities"])


@router.post("/{user_id}/activities", response_model=ActivityRecord, status_code=status.HTTP_201_CREATED)
def create_activity(user_id: int, data: ActivityCreate, db: Session = Depends(get_db)):
    activity = append_activity(db, user_id, data.type, data.title)
    if not activity:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return activity


@router.get("/{user_id}/activities", response_model=list[ActivityOut])
def get_recent_activities(user_id: int, db: Session = Depends(get_db)):
    """Most recent activities, newest first, with relative age labels."""
    return recent_activities(db, user_id)
