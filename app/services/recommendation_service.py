"""Suggestions generated from a user's profile.

Everything here is optional enrichment for the dashboard, so a failing or
slow provider degrades to an empty result instead of an error.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from app.models.user_profile import UserProfile
from app.schemas.recommendation import (
    CourseRecommendation,
    GoalIdeas,
    LearningIdeas,
    Trend,
    TrendDrafts,
    VideoRecommendation,
)
from app.services.ai_service import AIServiceError, generate_structured

logger = logging.getLogger(__name__)

MAX_SUGGESTED_GOALS = 5
TREND_TYPES = {"article", "post"}

ModelT = TypeVar("ModelT", bound=BaseModel)


def profile_payload(profile: UserProfile) -> dict[str, Any]:
    """The slice of a profile the provider sees."""
    return {
        "subjects": list(profile.subjects),
        "interests": profile.interests,
        "skills": profile.skills,
        "goal": profile.goal,
        "thinking_style": profile.thinking_style,
    }


def suggest_goals(profile: UserProfile, count: int = 1) -> list[str]:
    """Short, actionable career development goals (each 1-2 hours of work)."""
    count = min(max(count, 1), MAX_SUGGESTED_GOALS)
    subjects = ", ".join(profile.subjects) or "career development"
    first_subject = profile.subjects[0] if profile.subjects else "career development"
    task = (
        f"Suggest {count} specific and actionable career development goal(s) focused on the subjects: {subjects}. "
        "Vary between industry research, skill-building exercises, portfolio work, networking, "
        "personal branding, technical learning and career exploration. "
        "Each goal must be achievable in 1-2 hours, specific and measurable, and help the user understand "
        f"career paths in the field. Example: \"Research 2 companies hiring {first_subject} professionals "
        "and list their requirements\". Return them under 'goals'."
    )
    data = _generate("suggest_goals", task, profile_payload(profile), GoalIdeas)
    if data is None:
        return []

    goals = [goal.strip() for goal in data.goals if goal.strip()]
    return goals[:count]


def get_course_recommendation(profile: UserProfile) -> CourseRecommendation | None:
    task = (
        "Suggest one specific online course for this user. Give its title, a 1-2 sentence description, "
        "an estimated duration (e.g. '2 weeks') and a level: Beginner, Intermediate or Advanced."
    )
    return _generate("course_recommendation", task, profile_payload(profile), CourseRecommendation)


def get_learning_recommendations(profile: UserProfile) -> list[str]:
    task = "Suggest 3 learning recommendations for this user, one sentence each, under 'recommendations'."
    data = _generate("learning_recommendations", task, profile_payload(profile), LearningIdeas)
    if data is None:
        return []
    return [item.strip() for item in data.recommendations if item.strip()][:3]


def get_video_recommendation(profile: UserProfile) -> VideoRecommendation | None:
    task = (
        "Recommend one publicly available video that would help this user take the next step in their career "
        "exploration. Give its title, a one sentence description, and the channel and url when known."
    )
    return _generate("video_recommendation", task, profile_payload(profile), VideoRecommendation)


def get_career_trends(subject: str, limit: int = 4) -> list[Trend]:
    """Current articles or posts about careers in ``subject``."""
    task = (
        f"List up to {limit} current trending topics for careers related to '{subject}'. "
        "Each needs a title, a one sentence description, a url to read more and a type: 'article' or 'post'."
    )
    data = _generate("career_trends", task, {"subject": subject}, TrendDrafts)
    if data is None:
        return []

    return [
        Trend(
            id=str(idx),
            title=draft.title,
            description=draft.description,
            url=draft.url,
            type=draft.type if draft.type in TREND_TYPES else "article",
        )
        for idx, draft in enumerate(data.trends[:limit], start=1)
    ]


def _generate(label: str, task: str, payload: dict[str, Any], response_model: type[ModelT]) -> ModelT | None:
    try:
        return generate_structured(task=task, payload=payload, response_model=response_model)
    except AIServiceError as exc:
        logger.warning("recommendation_unavailable kind=%s error=%s", label, exc)
        return None
