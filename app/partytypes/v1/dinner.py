from app.partytypes.fields import REQUIRED, FieldDef, Kind, PartyType
from app.partytypes.v1.common import PartyV1


DinnerPartyV1 = PartyType(
    name="DinnerParty",
    embeds=(PartyV1,),
    fields=(
        FieldDef("dinner", "dinner", Kind.STRING, checks=(REQUIRED,)),
        FieldDef("dessert", "dessert", Kind.STRING),
    ),
)
