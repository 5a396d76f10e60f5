from app.partytypes.fields import REQUIRED, FieldDef, FieldGroup, Kind, gt, gtfield


# Fields every party type has.
PartyV1 = FieldGroup(
    name="Party",
    fields=(
        FieldDef("starts_at", "start_time", Kind.TIMESTAMP, checks=(REQUIRED,)),
        FieldDef("ends_at", "end_time", Kind.TIMESTAMP, checks=(REQUIRED, gtfield("starts_at"))),
        FieldDef("attendees", "attendees", Kind.STRING, is_list=True, checks=(REQUIRED, gt(0))),
    ),
)
