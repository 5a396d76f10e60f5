from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Kind(str, Enum):
    """
    Field kinds. Values are the names clients see in the `type` key of a field spec.
    """
    STRING = "string"
    INT = "int"
    TIMESTAMP = "RFC 3339"


# --- Checks ---

@dataclass(frozen=True)
class Constraint:
    """
    One declarative validation rule attached to a field.
    Serialized as "<name>=<value>" (e.g. "gt=0", "gtfield=start_time", "oneof=day night").
    """
    name: ClassVar[str] = ""

    @property
    def value(self) -> str:
        return ""

    def render(self, value: str | None = None) -> str:
        return f"{self.name}={self.value if value is None else value}"


@dataclass(frozen=True)
class Required(Constraint):
    name: ClassVar[str] = "required"

    def render(self, value: str | None = None) -> str:
        return self.name


@dataclass(frozen=True)
class GreaterThan(Constraint):
    """Integers: value > n. Strings and lists: length > n."""
    n: int
    name: ClassVar[str] = "gt"

    @property
    def value(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class GreaterThanField(Constraint):
    """This field must exceed another field of the same record (referenced by internal name)."""
    other: str
    name: ClassVar[str] = "gtfield"

    @property
    def value(self) -> str:
        return self.other


@dataclass(frozen=True)
class OneOf(Constraint):
    """Case-sensitive enum of accepted string values."""
    values: tuple[str, ...]
    name: ClassVar[str] = "oneof"

    @property
    def value(self) -> str:
        return " ".join(self.values)


REQUIRED = Required()


def gt(n: int) -> GreaterThan:
    return GreaterThan(n)


def gtfield(other: str) -> GreaterThanField:
    return GreaterThanField(other)


def oneof(*values: str) -> OneOf:
    return OneOf(tuple(values))


# --- Definitions ---

@dataclass(frozen=True)
class FieldDef:
    """
    A single record field.

    - internal_name: python-side identifier (attribute on decoded records, target of gtfield)
    - name: external JSON key clients send and see in specs
    """
    internal_name: str
    name: str
    kind: Kind
    is_list: bool = False
    checks: tuple[Constraint, ...] = ()

    @property
    def required(self) -> bool:
        return any(isinstance(c, Required) for c in self.checks)


@dataclass(frozen=True)
class FieldGroup:
    """
    Reusable set of fields merged (flattened) into every record type that embeds it.
    A group may embed other groups.
    """
    name: str
    fields: tuple[FieldDef, ...] = ()
    embeds: tuple[FieldGroup, ...] = ()


@dataclass(frozen=True)
class PartyType:
    """
    A bookable record type (MovieParty, PoolParty, ...).
    Its field set is its embedded groups' fields plus its own.
    """
    name: str
    fields: tuple[FieldDef, ...] = ()
    embeds: tuple[FieldGroup, ...] = ()
