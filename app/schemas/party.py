from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class FieldSpec(BaseModel):
    """
    Client-facing description of one party field:
    {"type": ..., "checks": [...] | null, "required": bool, "list": bool}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type_name: str = Field(alias="type")
    # null (not []) when the field has no checks besides `required`
    checks: tuple[str, ...] | None = None
    required: bool = False
    is_list: bool = Field(default=False, alias="list")


class PartySubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    party_type: str = ""
    # Decoded later against the party type's own schema
    data: Any = None


class BookingOut(BaseModel):
    booking_id: str
