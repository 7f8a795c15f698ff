"""Goal completion percentage, cached on the user row."""

from __future__ import annotations

import logging

from sqlalchemy import case, func, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.util import identity_key

from app.models.goal import Goal
from app.models.user import User

logger = logging.getLogger(__name__)


def calculate_progress(completed: int, total: int) -> int:
    """Percentage of completed goals, rounded half up. Zero goals is 0%."""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def recalculate_user_progress(db: Session, user_id: int) -> int:
    """Recompute ``users.progress`` from the full goal list inside the caller's transaction.

    Counting and writing happen in one UPDATE statement, so concurrent goal
    changes for the same user cannot interleave between the read and the write.
    Integer arithmetic keeps the SQL result identical to ``calculate_progress``.
    Does not commit; the caller commits it together with the goal change.
    """
    total = (
        select(func.count(Goal.id))
        .where(Goal.user_id == user_id)
        .scalar_subquery()
    )
    completed = (
        select(func.count(Goal.id))
        .where(Goal.user_id == user_id, Goal.completed.is_(True))
        .scalar_subquery()
    )
    stmt = (
        update(User)
        .where(User.id == user_id)
        .values(progress=case((total == 0, 0), else_=(200 * completed + total) // (2 * total)))
        .execution_options(synchronize_session=False)
    )
    db.execute(stmt)

    cached = db.identity_map.get(identity_key(User, user_id))
    if cached is not None:
        db.expire(cached, ["progress"])

    progress = db.execute(select(User.progress).where(User.id == user_id)).scalar_one_or_none() or 0
    logger.debug("progress_recalculated user_id=%s progress=%s", user_id, progress)
    return progress
