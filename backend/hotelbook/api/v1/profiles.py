"""Profile API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.feed import FeedItem
from hotelbook.schemas.profile import (
    ProfileCreate,
    ProfileRead,
    ProfileUpdate,
    ProfileWithStats,
)
from hotelbook.schemas.review import ReviewWithDetails
from hotelbook.schemas.saved_list import ListWithCount
from hotelbook.services import feed_service, list_store, profile_store, review_store

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/{profile_id}", response_model=ProfileRead)
async def get_profile(profile_id: str, db: AsyncSession = Depends(get_db)):
    profile = await profile_store.get_profile(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.put("/{profile_id}", response_model=ProfileRead, status_code=201)
async def create_profile(
    profile_id: str,
    data: ProfileCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create the profile for a newly registered account."""
    return await profile_store.create_profile(db, profile_id, data)


@router.patch("/{profile_id}", response_model=ProfileRead)
async def update_profile(
    profile_id: str,
    patch: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update only the fields present in the request body."""
    return await profile_store.update_profile(db, profile_id, patch)


@router.get("/{profile_id}/stats", response_model=ProfileWithStats)
async def get_profile_stats(profile_id: str, db: AsyncSession = Depends(get_db)):
    profile = await profile_store.get_profile_with_stats(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/{profile_id}/reviews", response_model=list[ReviewWithDetails])
async def get_profile_reviews(profile_id: str, db: AsyncSession = Depends(get_db)):
    return await review_store.get_user_reviews(db, profile_id)


@router.get("/{profile_id}/lists", response_model=list[ListWithCount])
async def get_profile_lists(profile_id: str, db: AsyncSession = Depends(get_db)):
    return await list_store.get_user_lists(db, profile_id)


@router.get("/{profile_id}/saved/{hotel_id}")
async def get_saved_state(profile_id: str, hotel_id: str, db: AsyncSession = Depends(get_db)):
    return {"is_saved": await list_store.is_hotel_saved(db, profile_id, hotel_id)}


@router.get("/{profile_id}/feed", response_model=list[FeedItem])
async def get_feed(profile_id: str, db: AsyncSession = Depends(get_db)):
    """Latest reviews from the people this profile follows."""
    return await feed_service.get_feed(db, profile_id)
