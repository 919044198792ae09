"""Hotel and tag API endpoints.

Hotel responses are personalised with ``viewer_id``: without it every
``is_saved`` flag is false.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.hotel import (
    Bounds,
    HotelCreate,
    HotelFilters,
    HotelTagRead,
    HotelWithDetails,
)
from hotelbook.schemas.review import ReviewWithDetails
from hotelbook.services import hotel_store, review_store

router = APIRouter(prefix="/hotels", tags=["hotels"])
tags_router = APIRouter(prefix="/tags", tags=["hotels"])


@router.get("", response_model=list[HotelWithDetails])
async def list_hotels(
    db: AsyncSession = Depends(get_db),
    q: str | None = Query(None, min_length=1, description="Search name, city or country"),
    north: float | None = Query(None, ge=-90, le=90),
    south: float | None = Query(None, ge=-90, le=90),
    east: float | None = Query(None, ge=-180, le=180),
    west: float | None = Query(None, ge=-180, le=180),
    price_tier: list[str] = Query([], description="Price tiers to include, e.g. $$"),
    tag: list[str] = Query([], description="Tag names; any match"),
    min_rating: float | None = Query(None, ge=1, le=5),
    viewer_id: str | None = Query(None, description="Profile whose saved state to attach"),
):
    """Search hotels. Results are ordered by name."""
    edges = (north, south, east, west)
    if any(edge is not None for edge in edges) and not all(edge is not None for edge in edges):
        raise HTTPException(status_code=400, detail="Bounds need north, south, east and west")

    filters = HotelFilters(
        query=q,
        bounds=Bounds(north=north, south=south, east=east, west=west) if north is not None else None,
        price_tiers=price_tier,
        tags=tag,
        min_rating=min_rating,
    )
    hotels = await hotel_store.get_hotels(db, filters)
    return await hotel_store.mark_saved(db, hotels, viewer_id)


@router.post("", response_model=HotelWithDetails, status_code=201)
async def create_hotel(data: HotelCreate, db: AsyncSession = Depends(get_db)):
    hotel = await hotel_store.create_hotel(db, data)
    # A new hotel is in nobody's lists yet
    [hotel] = await hotel_store.mark_saved(db, [hotel], None)
    return hotel


@router.get("/{hotel_id}", response_model=HotelWithDetails)
async def get_hotel(
    hotel_id: str,
    viewer_id: str | None = Query(None, description="Profile whose saved state to attach"),
    db: AsyncSession = Depends(get_db),
):
    hotel = await hotel_store.get_hotel(db, hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    [hotel] = await hotel_store.mark_saved(db, [hotel], viewer_id)
    return hotel


@router.get("/{hotel_id}/reviews", response_model=list[ReviewWithDetails])
async def get_hotel_reviews(hotel_id: str, db: AsyncSession = Depends(get_db)):
    return await review_store.get_hotel_reviews(db, hotel_id)


@tags_router.get("", response_model=list[HotelTagRead])
async def list_tags(db: AsyncSession = Depends(get_db)):
    return await hotel_store.get_all_tags(db)
