from fastapi import APIRouter, Depends, Request

from app.schemas.common import ErrorResponse
from app.schemas.party import BookingOut
from app.services.booking import book_party
from app.services.failure_injector import fail_sometimes
from app.services.party_catalog import PartyCatalog, get_catalog

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}}


@router.post("/bookparty", response_model=BookingOut, responses=_ERROR_RESPONSES)
async def book(request: Request, catalog: PartyCatalog = Depends(get_catalog)) -> BookingOut:
    """
    Validate a party submission ({"party_type": ..., "data": {...}}) and return a booking id.
    The body is read as JSON regardless of content-type. Nothing is stored.
    """
    confirmation = book_party(catalog, await request.body())
    return BookingOut(booking_id=confirmation.booking_id)


@router.post(
    "/bookpartyprod",
    response_model=BookingOut,
    responses={**_ERROR_RESPONSES, 500: {"model": ErrorResponse}},
    dependencies=[Depends(fail_sometimes)],
)
async def book_prod(request: Request, catalog: PartyCatalog = Depends(get_catalog)) -> BookingOut:
    """
    Same as /bookparty, but fails a configurable fraction of requests with a 500.
    """
    confirmation = book_party(catalog, await request.body())
    return BookingOut(booking_id=confirmation.booking_id)
