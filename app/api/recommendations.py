"""Generated recommendations API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user_profile import UserProfile
from app.schemas.recommendation import (
    CourseRecommendationOut,
    LearningRecommendationsOut,
    PersonalizedRecommendationsOut,
    Trend,
)
from app.services.profile_service import get_profile
from app.services.recommendation_service import (
    get_career_trends,
    get_course_recommendation,
    get_learning_recommendations,
    get_video_recommendation,
)

router = APIRouter(tags=["recommendations"])


def _require_profile(db: Session, user_id: int) -> UserProfile:
    profile = get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile data is required")
    return profile


@router.get("/users/{user_id}/course-recommendation", response_model=CourseRecommendationOut)
def course_recommendation(user_id: int, db: Session = Depends(get_db)):
    profile = _require_profile(db, user_id)
    return CourseRecommendationOut(course=get_course_recommendation(profile))


@router.get("/users/{user_id}/recommendations", response_model=LearningRecommendationsOut)
def learning_recommendations(user_id: int, db: Session = Depends(get_db)):
    profile = _require_profile(db, user_id)
    return LearningRecommendationsOut(recommendations=get_learning_recommendations(profile))


@router.get("/personalized-recommendations/{user_id}", response_model=PersonalizedRecommendationsOut)
def personalized_recommendations(user_id: int, db: Session = Depends(get_db)):
    """Course and video for the "what's next" card. Either may be null."""
    profile = _require_profile(db, user_id)
    return PersonalizedRecommendationsOut(
        course=get_course_recommendation(profile),
        video=get_video_recommendation(profile),
    )


@router.get("/career-trends/{subject}", response_model=list[Trend])
def career_trends(subject: str):
    return get_career_trends(subject)
