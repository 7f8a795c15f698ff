"""Aggregated per-user view for the dashboard."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.dashboard import DashboardOut, DashboardUser
from app.schemas.goal import GoalOut
from app.schemas.survey import ProfileOut
from app.services.activity_service import recent_activities
from app.services.goal_service import list_goals
from app.services.profile_service import get_profile


def build_dashboard(db: Session, user_id: int, now: datetime | None = None) -> DashboardOut | None:
    """Profile, goals, recent activity and progress. None until the survey is done."""
    user = db.get(User, user_id)
    profile = get_profile(db, user_id)
    if not user or not profile:
        return None

    return DashboardOut(
        user=DashboardUser(
            id=user.id,
            name=user.display_name or user.username,
            progress=user.progress,
        ),
        profile=ProfileOut.model_validate(profile),
        goals=[GoalOut.model_validate(goal) for goal in list_goals(db, user_id)],
        activities=recent_activities(db, user_id, now=now),
    )
