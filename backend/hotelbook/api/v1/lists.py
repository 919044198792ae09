"""Saved list API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.saved_list import ListCreate, ListRead, ListWithHotels
from hotelbook.services import list_store

router = APIRouter(prefix="/lists", tags=["lists"])


@router.post("", response_model=ListRead, status_code=201)
async def create_list(data: ListCreate, db: AsyncSession = Depends(get_db)):
    return await list_store.create_list(db, data.user_id, data.name)


@router.post("/default", response_model=ListRead)
async def get_or_create_default_list(
    user_id: str = Query(..., description="Owner of the default list"),
    db: AsyncSession = Depends(get_db),
):
    """The user's default list, created on first call."""
    return await list_store.get_or_create_default_list(db, user_id)


@router.get("/{list_id}", response_model=ListWithHotels)
async def get_list(list_id: str, db: AsyncSession = Depends(get_db)):
    saved_list = await list_store.get_list_with_hotels(db, list_id)
    if not saved_list:
        raise HTTPException(status_code=404, detail="List not found")
    return saved_list


@router.put("/{list_id}/hotels/{hotel_id}", status_code=204)
async def save_hotel(list_id: str, hotel_id: str, db: AsyncSession = Depends(get_db)):
    await list_store.save_hotel_to_list(db, list_id, hotel_id)
    return Response(status_code=204)


@router.delete("/{list_id}/hotels/{hotel_id}", status_code=204)
async def remove_hotel(list_id: str, hotel_id: str, db: AsyncSession = Depends(get_db)):
    await list_store.remove_hotel_from_list(db, list_id, hotel_id)
    return Response(status_code=204)
