"""Schemas for generated suggestions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CourseRecommendation(BaseModel):
    title: str
    description: str
    duration: str
    level: str


class VideoRecommendation(BaseModel):
    title: str
    description: str
    channel: str | None = None
    url: str | None = None


class Trend(BaseModel):
    id: str
    title: str
    description: str
    url: str
    type: Literal["article", "post"] = "article"


class CourseRecommendationOut(BaseModel):
    course: CourseRecommendation | None = None


class LearningRecommendationsOut(BaseModel):
    recommendations: list[str] = Field(default_factory=list)


class PersonalizedRecommendationsOut(BaseModel):
    course: CourseRecommendation | None = None
    video: VideoRecommendation | None = None


# Shapes requested from the text generation provider.


class GoalIdeas(BaseModel):
    goals: list[str]


class LearningIdeas(BaseModel):
    recommendations: list[str]


class TrendDraft(BaseModel):
    title: str
    description: str
    url: str
    type: str = "article"


class TrendDrafts(BaseModel):
    trends: list[TrendDraft]
