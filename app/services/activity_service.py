"""Append-only activity log with read-time age labels."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.activity import Activity
from app.models.user import User
from app.schemas.activity import ActivityOut

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=2)


def append_activity(db: Session, user_id: int, activity_type: str, title: str) -> Activity | None:
    """Record an activity with a server-assigned timestamp. None when the user does not exist."""
    if not db.get(User, user_id):
        return None

    activity = Activity(user_id=user_id, type=activity_type, title=title)
    db.add(activity)
    db.commit()
    db.refresh(activity)
    logger.info("activity_appended activity_id=%s user_id=%s type=%s", activity.id, user_id, activity_type)
    return activity


def recent_activities(db: Session, user_id: int, now: datetime | None = None) -> list[ActivityOut]:
    """Newest activities first, decorated with labels relative to ``now``."""
    now = _as_utc(now or datetime.now(timezone.utc))
    stmt = (
        select(Activity)
        .where(Activity.user_id == user_id)
        .order_by(desc(Activity.created_at), desc(Activity.id))
        .limit(settings.recent_activity_limit)
    )
    rows = db.execute(stmt).scalars().all()
    return [
        ActivityOut(
            id=row.id,
            type=row.type,
            title=row.title,
            time=format_time_ago(row.created_at, now),
            is_recent=is_recent(row.created_at, now),
        )
        for row in rows
    ]


def format_time_ago(created_at: datetime, now: datetime) -> str:
    """Human readable age: Today, Yesterday, N days ago, N weeks ago."""
    days = max((_as_utc(now) - _as_utc(created_at)) // timedelta(days=1), 0)
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return f"{days // 7} weeks ago"


def is_recent(created_at: datetime, now: datetime) -> bool:
    return _as_utc(now) - _as_utc(created_at) < RECENT_WINDOW


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
