"""User lookups and the seeded default user."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.user import User

logger = logging.getLogger(__name__)

# progress is owned by progress_service
_UPDATABLE_FIELDS = {"username", "password", "display_name", "email", "avatar"}


def get_user(db: Session, user_id: int) -> User | None:
    """Get user by id."""
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get user by username."""
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def ensure_default_user(db: Session, user_id: int | None = None) -> User:
    """Return the implicit dashboard user, creating it if missing.

    Flushes but does not commit, so callers can fold it into their own transaction.
    """
    user_id = user_id or settings.default_user_id
    user = db.get(User, user_id)
    if user:
        return user

    username = settings.default_username if user_id == settings.default_user_id else f"user{user_id}"
    user = User(id=user_id, username=username, password=username, progress=0)
    db.add(user)
    try:
        db.flush()
    except IntegrityError:
        # Another request seeded the row first.
        db.rollback()
        existing = db.get(User, user_id)
        if existing:
            return existing
        raise
    logger.info("default_user_created user_id=%s", user_id)
    return user


def update_user(db: Session, user_id: int, updates: dict[str, Any]) -> User | None:
    """Apply a partial update to a user. ``id`` and ``progress`` are ignored."""
    user = db.get(User, user_id)
    if not user:
        return None
    for key, value in updates.items():
        if key in _UPDATABLE_FIELDS:
            setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user
