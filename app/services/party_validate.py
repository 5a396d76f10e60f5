from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from app.partytypes.fields import Constraint, FieldDef, GreaterThan, GreaterThanField, OneOf, Required
from app.services.party_catalog import CatalogEntry


@dataclass(frozen=True)
class PartyValidationResult:
    ok: bool
    errors: list[dict[str, Any]]


def _is_empty(v: Any) -> bool:
    # Mirrors "zero value" semantics: absent, "", 0 and [] all count as missing.
    return v is None or v == "" or v == 0 or v == []


def _passes(check: Constraint, value: Any, record: BaseModel) -> bool:
    if isinstance(check, Required):
        return not _is_empty(value)
    if isinstance(check, GreaterThan):
        if isinstance(value, (str, list)):
            return len(value) > check.n
        return value > check.n
    if isinstance(check, GreaterThanField):
        other = getattr(record, check.other)
        if other is None:
            # the referenced field reports its own absence
            return True
        return value > other
    if isinstance(check, OneOf):
        return value in check.values
    raise TypeError(f"Unsupported check: {check!r}")


def _ordered_checks(f: FieldDef) -> list[Constraint]:
    # presence first, wherever it was declared; the rest keep declaration order
    return sorted(f.checks, key=lambda c: not isinstance(c, Required))


def validate_party(entry: CatalogEntry, record: BaseModel) -> PartyValidationResult:
    """
    Check a decoded record against every constraint of its party type (embedded groups included).

    All fields are checked, in flattened order. Per field, `required` runs first, then the other
    checks in declaration order; only the first failing one is reported. Values are compared on
    internal attributes; errors are reported with external names.
    """
    errors: list[dict[str, Any]] = []
    for f in entry.fields:
        value = getattr(record, f.internal_name)
        if value is None and not f.required:
            continue

        for check in _ordered_checks(f):
            if _passes(check, value, record):
                continue
            rendered = check.render(entry.names.get(check.value)) if isinstance(check, GreaterThanField) else check.render()
            errors.append({
                "field": f.name,
                "check": rendered,
                "message": f"{entry.party_type.name}.{f.name} failed on the '{check.name}' check ({rendered})",
            })
            break

    return PartyValidationResult(ok=not errors, errors=errors)
