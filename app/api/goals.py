"""Goals API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.goal import GoalCreate, GoalOut, GoalSuggestionsOut, GoalUpdate
from app.services.goal_service import create_goal, delete_goal, list_goals, set_goal_completed
from app.services.profile_service import get_profile
from app.services.recommendation_service import suggest_goals

router = APIRouter(tags=["goals"])
logger = logging.getLogger(__name__)


@router.get("/users/{user_id}/goals", response_model=list[GoalOut])
def get_goals(user_id: int, db: Session = Depends(get_db)):
    return list_goals(db, user_id)


@router.post("/goals", response_model=GoalOut, status_code=status.HTTP_201_CREATED)
def add_goal(data: GoalCreate, db: Session = Depends(get_db)):
    goal = create_goal(db, data.user_id, data.task)
    if not goal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return goal


@router.patch("/goals/{goal_id}", response_model=GoalOut)
def update_goal(goal_id: int, data: GoalUpdate, db: Session = Depends(get_db)):
    """Mark a goal done or not done; the owner's progress is refreshed before responding."""
    goal = set_goal_completed(db, goal_id, data.completed)
    if not goal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return goal


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_goal(goal_id: int, db: Session = Depends(get_db)):
    if not delete_goal(db, goal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/users/{user_id}/goals/suggestions", response_model=GoalSuggestionsOut)
def get_goal_suggestions(
    user_id: int,
    count: int = Query(default=1, ge=1, le=5),
    db: Session = Depends(get_db),
):
    """Generated goal ideas. Empty when the provider is unavailable."""
    profile = get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    goals = suggest_goals(profile, count=count)
    logger.info("goal_suggestions user_id=%s count=%s", user_id, len(goals))
    return GoalSuggestionsOut(goals=goals)
