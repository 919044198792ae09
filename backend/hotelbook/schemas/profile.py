"""Pydantic schemas for Profile model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ProfileBase(BaseModel):
    """Editable profile fields."""

    username: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    home_city: str | None = None


class ProfileCreate(ProfileBase):
    """Fields for creating a profile. The id is supplied separately."""


class ProfileUpdate(ProfileBase):
    """Sparse patch.

    Only fields that were explicitly provided are written, so
    ``ProfileUpdate(bio=None)`` clears the bio while ``ProfileUpdate()``
    changes nothing. Read the patch with ``model_dump(exclude_unset=True)``.
    """


class ProfileRead(ProfileBase):
    """Full profile output."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime


class ProfileSummary(BaseModel):
    """Public subset of a profile, embedded in reviews and feed items."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None


class ProfileWithStats(ProfileRead):
    """Profile with review, follow and saved-hotel counts."""

    review_count: int = 0
    follower_count: int = 0
    following_count: int = 0
    saved_count: int = 0
