"""SQLAlchemy models."""

from __future__ import annotations

from app.models.activity import Activity
from app.models.goal import Goal
from app.models.user import User
from app.models.user_profile import UserProfile

__all__ = [
    "User",
    "UserProfile",
    "Goal",
    "Activity",
]
