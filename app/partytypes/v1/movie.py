from app.partytypes.fields import REQUIRED, FieldDef, Kind, PartyType, gt, oneof
from app.partytypes.v1.common import PartyV1


MPAA_RATINGS = ("G", "PG", "PG-13", "R", "NC-17")

MoviePartyV1 = PartyType(
    name="MovieParty",
    embeds=(PartyV1,),
    fields=(
        FieldDef("movie", "movie", Kind.STRING, checks=(REQUIRED,)),
        FieldDef("rating", "rating", Kind.STRING, checks=(REQUIRED, oneof(*MPAA_RATINGS))),
        # minutes
        FieldDef("runtime_minutes", "runtime", Kind.INT, checks=(REQUIRED, gt(30))),
    ),
)
