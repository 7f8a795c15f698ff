"""Goal store. Every change to a user's goal set refreshes their progress."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.goal import Goal
from app.models.user import User
from app.services.progress_service import recalculate_user_progress

logger = logging.getLogger(__name__)


def create_goal(db: Session, user_id: int, task: str) -> Goal | None:
    """Create an incomplete goal. Returns None when the user does not exist."""
    if not db.get(User, user_id):
        return None

    goal = Goal(user_id=user_id, task=task, completed=False)
    db.add(goal)
    progress = _commit_with_progress(db, user_id, "goal_create_failed")
    db.refresh(goal)
    logger.info("goal_created goal_id=%s user_id=%s progress=%s", goal.id, user_id, progress)
    return goal


def list_goals(db: Session, user_id: int) -> list[Goal]:
    """All goals for a user in storage order."""
    result = db.execute(select(Goal).where(Goal.user_id == user_id).order_by(Goal.id))
    return list(result.scalars().all())


def set_goal_completed(db: Session, goal_id: int, completed: bool) -> Goal | None:
    """Set the completed flag and recompute the owner's progress in the same commit."""
    goal = db.get(Goal, goal_id)
    if not goal:
        return None

    user_id = goal.user_id
    goal.completed = completed
    progress = _commit_with_progress(db, user_id, "goal_update_failed")
    db.refresh(goal)
    logger.info(
        "goal_completed_set goal_id=%s user_id=%s completed=%s progress=%s",
        goal_id,
        user_id,
        goal.completed,
        progress,
    )
    return goal


def delete_goal(db: Session, goal_id: int) -> bool:
    """Delete a goal and recompute the owner's progress. False when absent."""
    goal = db.get(Goal, goal_id)
    if not goal:
        return False

    user_id = goal.user_id
    db.delete(goal)
    progress = _commit_with_progress(db, user_id, "goal_delete_failed")
    logger.info("goal_deleted goal_id=%s user_id=%s progress=%s", goal_id, user_id, progress)
    return True


def _commit_with_progress(db: Session, user_id: int, failure_event: str) -> int:
    """Flush the pending goal change, refresh progress, commit both or neither."""
    try:
        db.flush()
        progress = recalculate_user_progress(db, user_id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("%s user_id=%s", failure_event, user_id)
        raise
    return progress
