"""User schemas."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class UserOut(BaseModel):
    id: int
    username: str
    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    progress: int
    has_profile: bool = False
    subjects: list[str] = Field(default_factory=list)


class UserUpdate(BaseModel):
    """Editable account fields. Progress is derived from goals and cannot be set here."""

    display_name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    avatar: str | None = None
