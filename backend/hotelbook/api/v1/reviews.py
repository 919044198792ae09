"""Review API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.review import (
    ReviewCreate,
    ReviewPhotoRead,
    ReviewPhotoUpload,
    ReviewRead,
    ReviewWithDetails,
)
from hotelbook.services import review_store

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=201)
async def create_review(review: ReviewCreate, db: AsyncSession = Depends(get_db)):
    """Create a review. One review per user per hotel."""
    return await review_store.create_review(db, review)


@router.get("/{review_id}", response_model=ReviewWithDetails)
async def get_review(review_id: str, db: AsyncSession = Depends(get_db)):
    review = await review_store.get_review(db, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.post("/{review_id}/photos", response_model=list[ReviewPhotoRead], status_code=201)
async def add_review_photos(
    review_id: str,
    upload: ReviewPhotoUpload,
    db: AsyncSession = Depends(get_db),
):
    return await review_store.add_review_photos(db, review_id, upload.urls)
