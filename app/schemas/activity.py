"""Activity log schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ActivityType = Literal["lesson", "badge", "course"]


class ActivityCreate(BaseModel):
    type: ActivityType
    title: str = Field(min_length=1, max_length=255)


class ActivityRecord(BaseModel):
    id: int
    user_id: int
    type: str
    title: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ActivityOut(BaseModel):
    """An activity with its age rendered relative to the time of the read."""

    id: int
    type: str
    title: str
    time: str
    is_recent: bool
