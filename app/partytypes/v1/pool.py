from app.partytypes.fields import REQUIRED, FieldDef, Kind, PartyType
from app.partytypes.v1.common import PartyV1


PoolPartyV1 = PartyType(
    name="PoolParty",
    embeds=(PartyV1,),
    fields=(
        FieldDef("water_temperature", "water_temp", Kind.INT, checks=(REQUIRED,)),
    ),
)
