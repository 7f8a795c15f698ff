"""Survey submission API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.survey import ProfileOut, SurveyCreate
from app.services.profile_service import submit_survey

router = APIRouter(tags=["survey"])


@router.post("/survey", response_model=ProfileOut, status_code=status.HTTP_201_CREATED)
def create_survey(data: SurveyCreate, db: Session = Depends(get_db)):
    """Store survey answers as the default user's profile, replacing any previous one."""
    return submit_survey(db, data)
