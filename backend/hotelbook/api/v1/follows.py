"""Follow API endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.profile import ProfileRead
from hotelbook.services import follow_store

router = APIRouter(prefix="/profiles", tags=["follows"])


@router.get("/{profile_id}/followers", response_model=list[ProfileRead])
async def get_followers(profile_id: str, db: AsyncSession = Depends(get_db)):
    return await follow_store.get_followers(db, profile_id)


@router.get("/{profile_id}/following", response_model=list[ProfileRead])
async def get_following(profile_id: str, db: AsyncSession = Depends(get_db)):
    return await follow_store.get_following(db, profile_id)


@router.get("/{profile_id}/following/{target_id}")
async def is_following(profile_id: str, target_id: str, db: AsyncSession = Depends(get_db)):
    return {"is_following": await follow_store.is_following(db, profile_id, target_id)}


@router.put("/{profile_id}/following/{target_id}", status_code=204)
async def follow(profile_id: str, target_id: str, db: AsyncSession = Depends(get_db)):
    """Follow ``target_id``. Repeating the call is harmless."""
    await follow_store.follow_user(db, profile_id, target_id)
    return Response(status_code=204)


@router.delete("/{profile_id}/following/{target_id}", status_code=204)
async def unfollow(profile_id: str, target_id: str, db: AsyncSession = Depends(get_db)):
    await follow_store.unfollow_user(db, profile_id, target_id)
    return Response(status_code=204)
