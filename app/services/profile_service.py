"""Survey profile store."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.user_profile import UserProfile
from app.schemas.survey import SurveyCreate
from app.services.user_service import ensure_default_user

logger = logging.getLogger(__name__)


def submit_survey(db: Session, survey: SurveyCreate, user_id: int | None = None) -> UserProfile:
    """Replace the user's profile with the submitted survey.

    The user row, the delete of the old profile and the insert of the new one
    commit together or not at all.
    """
    user_id = user_id or settings.default_user_id
    try:
        user = ensure_default_user(db, user_id)
        user.display_name = survey.name
        user.email = survey.email
        if survey.avatar:
            user.avatar = survey.avatar

        db.execute(delete(UserProfile).where(UserProfile.user_id == user_id))
        profile = UserProfile(
            user_id=user_id,
            subjects=list(survey.subjects),
            interests=survey.interests,
            skills=survey.skills,
            goal=survey.goal,
            thinking_style=survey.thinking_style,
            extra_info=survey.extra_info or "",
        )
        db.add(profile)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("survey_submit_failed user_id=%s", user_id)
        raise

    db.refresh(profile)
    logger.info("survey_submitted user_id=%s subjects=%s", user_id, len(profile.subjects))
    return profile


def get_profile(db: Session, user_id: int) -> UserProfile | None:
    """The user's profile, or None when the survey has not been completed."""
    return db.execute(select(UserProfile).where(UserProfile.user_id == user_id)).scalar_one_or_none()
