"""User and profile API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.survey import ProfileOut
from app.schemas.user import UserOut, UserUpdate
from app.services.profile_service import get_profile
from app.services.user_service import get_user, get_user_by_username, update_user

router = APIRouter(tags=["users"])


def _user_out(db: Session, user: User | None) -> UserOut:
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    profile = get_profile(db, user.id)
    return UserOut(
        id=user.id,
        username=user.username,
        name=user.display_name,
        email=user.email,
        avatar=user.avatar,
        progress=user.progress,
        has_profile=profile is not None,
        subjects=profile.subjects if profile else [],
    )


@router.get("/users/{user_id}", response_model=UserOut)
@router.get("/user/{user_id}", response_model=UserOut, include_in_schema=False)
def read_user(user_id: int, db: Session = Depends(get_db)):
    """User summary. ``/user/{id}`` is the path the dashboard client calls."""
    return _user_out(db, get_user(db, user_id))


@router.get("/users/by-username/{username}", response_model=UserOut)
def read_user_by_username(username: str, db: Session = Depends(get_db)):
    return _user_out(db, get_user_by_username(db, username))


@router.patch("/users/{user_id}", response_model=UserOut)
def patch_user(user_id: int, data: UserUpdate, db: Session = Depends(get_db)):
    return _user_out(db, update_user(db, user_id, data.model_dump(exclude_unset=True)))


@router.get("/users/{user_id}/profile", response_model=ProfileOut)
def read_profile(user_id: int, db: Session = Depends(get_db)):
    """Survey answers; 404 means the survey has not been completed."""
    profile = get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile
