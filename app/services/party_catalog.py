from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Type

from fastapi import Request
from pydantic import BaseModel

from app.core.errors import PartyTypeNotFound, SchemaDefinitionError, UnknownPartyType
from app.partytypes.fields import FieldDef, PartyType
from app.schemas.party import FieldSpec
from app.services.introspect import field_spec, flatten_fields, name_table
from app.services.party_decode import build_decoder


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    party_type: PartyType
    # flattened field set and its internal -> external name table
    fields: tuple[FieldDef, ...]
    names: Mapping[str, str]
    spec: Mapping[str, FieldSpec]
    decoder: Type[BaseModel]


@dataclass(frozen=True)
class PartyCatalog:
    """
    Read-only view of every bookable party type, computed once at startup.

    Shared by all requests; nothing in it is mutated after construction.
    """
    entries: Mapping[str, CatalogEntry]

    def type_names(self) -> list[str]:
        return list(self.entries)

    def spec_for(self, name: str) -> Mapping[str, FieldSpec]:
        entry = self.entries.get(name)
        if entry is None:
            raise PartyTypeNotFound("party type not found", details=[{"party_type": name}])
        return entry.spec

    def entry_for(self, name: str) -> CatalogEntry:
        entry = self.entries.get(name)
        if entry is None:
            raise UnknownPartyType(f"Unknown Party Type: {name!r}", details=[{"party_type": name}])
        return entry


def build_catalog(party_types: Iterable[PartyType]) -> PartyCatalog:
    """
    Introspect every party type and build its decoder.
    Any SchemaDefinitionError propagates: a broken definition must stop the service from starting.
    """
    entries: dict[str, CatalogEntry] = {}
    for t in party_types:
        if t.name in entries:
            raise SchemaDefinitionError(f"party type registered twice: {t.name}")
        fields = tuple(flatten_fields(t))
        entries[t.name] = CatalogEntry(
            party_type=t,
            fields=fields,
            names=MappingProxyType(name_table(fields)),
            spec=MappingProxyType(field_spec(t)),
            decoder=build_decoder(t),
        )
        log.debug("catalog: %s has %d fields", t.name, len(entries[t.name].spec))

    log.info("catalog: built %d party types: %s", len(entries), ", ".join(entries))
    return PartyCatalog(entries=MappingProxyType(entries))


def get_catalog(request: Request) -> PartyCatalog:
    return request.app.state.catalog
