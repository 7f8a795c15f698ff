"""Dashboard read model schemas."""

from __future__ import annotations

from pydantic import BaseModel

from app.schemas.activity import ActivityOut
from app.schemas.goal import GoalOut
from app.schemas.survey import ProfileOut


class DashboardUser(BaseModel):
    id: int
    name: str
    progress: int


class DashboardOut(BaseModel):
    user: DashboardUser
    profile: ProfileOut
    goals: list[GoalOut]
    activities: list[ActivityOut]
