from fastapi import APIRouter

from app.api.endpoints.about import router as about_router
from app.api.endpoints.bookings import router as bookings_router
from app.api.endpoints.health import router as health_router
from app.api.endpoints.party_types import router as party_types_router


router = APIRouter()
router.include_router(about_router, tags=["about"])
router.include_router(health_router, tags=["health"])
router.include_router(party_types_router, tags=["party types"])
router.include_router(bookings_router, tags=["bookings"])
