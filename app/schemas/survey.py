"""Survey and profile schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

ThinkingStyle = Literal["Plan", "Flow"]


class SurveyCreate(BaseModel):
    name: str = Field(min_length=2)
    email: EmailStr
    avatar: str | None = None
    subjects: list[str] = Field(min_length=1)
    interests: str = Field(min_length=2)
    skills: str = Field(min_length=2)
    goal: str = Field(min_length=2)
    thinking_style: ThinkingStyle
    extra_info: str | None = None


class ProfileOut(BaseModel):
    user_id: int
    subjects: list[str]
    interests: str
    skills: str
    goal: str
    thinking_style: str
    extra_info: str
    created_at: datetime

    model_config = {"from_attributes": True}
