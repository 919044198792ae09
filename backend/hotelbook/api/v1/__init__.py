"""API v1 router aggregation."""

from fastapi import APIRouter

from hotelbook.api.v1.profiles import router as profiles_router
from hotelbook.api.v1.follows import router as follows_router
from hotelbook.api.v1.hotels import router as hotels_router, tags_router
from hotelbook.api.v1.reviews import router as reviews_router
from hotelbook.api.v1.lists import router as lists_router
from hotelbook.api.v1.events import router as events_router

router = APIRouter(prefix="/api/v1")

router.include_router(profiles_router)
router.include_router(follows_router)
router.include_router(hotels_router)
router.include_router(tags_router)
router.include_router(reviews_router)
router.include_router(lists_router)
router.include_router(events_router)
