from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Optional, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt, StrictStr, ValidationError, create_model

from app.core.errors import MalformedPayload
from app.partytypes.fields import FieldDef, Kind, PartyType
from app.services.introspect import flatten_fields


# RFC 3339 date-time; fromisoformat alone also takes other ISO 8601 forms on 3.11+
_RFC3339_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def _parse_rfc3339(v: Any) -> Any:
    if isinstance(v, datetime):
        return v
    if not isinstance(v, str):
        raise ValueError("must be an RFC 3339 timestamp string")
    m = _RFC3339_RE.fullmatch(v)
    if not m:
        raise ValueError("must be an RFC 3339 timestamp (e.g. 2020-03-19T06:48:34+00:00)")

    date, time, frac, offset = m.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    # microsecond precision; older fromisoformat only takes 3 or 6 fraction digits
    frac = "." + frac[:6].ljust(6, "0") if frac else ""
    return datetime.fromisoformat(f"{date}T{time}{frac}{offset}")


Rfc3339 = Annotated[datetime, BeforeValidator(_parse_rfc3339)]

_SCALARS: dict[Kind, Any] = {
    Kind.STRING: StrictStr,
    Kind.INT: StrictInt,
    Kind.TIMESTAMP: Rfc3339,
}


def _annotation(f: FieldDef) -> Any:
    scalar = _SCALARS[f.kind]
    return list[scalar] if f.is_list else scalar


def build_decoder(record: PartyType) -> Type[BaseModel]:
    """
    Strict pydantic model for one party type.

    - attributes are internal identifiers, JSON keys are external names (aliases)
    - unknown keys are rejected
    - every field may be absent or null; presence is checked by the validator (`required`)
    """
    definitions: dict[str, Any] = {
        f.internal_name: (Optional[_annotation(f)], Field(default=None, alias=f.name))
        for f in flatten_fields(record)
    }
    return create_model(
        record.name,
        __config__=ConfigDict(extra="forbid", frozen=True),
        **definitions,
    )


def decode_party(decoder: Type[BaseModel], data: Any) -> BaseModel:
    """
    Decode submitted `data` into a record instance.
    Raises MalformedPayload (with pydantic's structured errors) on any shape problem.
    """
    if not isinstance(data, dict):
        raise MalformedPayload(
            f"error decoding {decoder.__name__}: data must be a JSON object",
            details=[{"type": "object_type", "loc": ["data"], "msg": "data must be a JSON object"}],
        )
    try:
        return decoder.model_validate(data)
    except ValidationError as e:
        raise MalformedPayload(
            f"error decoding {decoder.__name__}: {e.error_count()} invalid field(s)",
            details=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e
