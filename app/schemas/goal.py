"""Goal schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config import settings


class GoalCreate(BaseModel):
    task: str = Field(min_length=2)
    user_id: int = Field(default=settings.default_user_id, ge=1)


class GoalUpdate(BaseModel):
    completed: bool


class GoalOut(BaseModel):
    id: int
    task: str
    completed: bool
    user_id: int

    model_config = {"from_attributes": True}


class GoalSuggestionsOut(BaseModel):
    goals: list[str] = Field(default_factory=list)
