from app.partytypes.fields import PartyType
from app.partytypes.v1.dinner import DinnerPartyV1
from app.partytypes.v1.movie import MoviePartyV1
from app.partytypes.v1.pool import PoolPartyV1

# Party types this deployment accepts. Names are case-sensitive and are what
# clients send as `party_type`.
PARTY_TYPES: tuple[PartyType, ...] = (
    MoviePartyV1,
    PoolPartyV1,
    DinnerPartyV1,
)
