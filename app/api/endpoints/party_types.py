from fastapi import APIRouter, Depends

from app.schemas.common import ErrorResponse
from app.schemas.party import FieldSpec
from app.services.party_catalog import PartyCatalog, get_catalog

router = APIRouter()

@router.get("/partytypes", response_model=list[str])
async def list_party_types(catalog: PartyCatalog = Depends(get_catalog)):
    return catalog.type_names()


@router.get(
    "/partytype/{type_name}",
    response_model=dict[str, FieldSpec],
    responses={404: {"model": ErrorResponse}},
)
async def get_party_type_spec(type_name: str, catalog: PartyCatalog = Depends(get_catalog)):
    # Served verbatim from the startup-built catalog
    return dict(catalog.spec_for(type_name))
