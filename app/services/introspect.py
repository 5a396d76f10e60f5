from __future__ import annotations

from typing import Iterable

from app.core.errors import SchemaDefinitionError
from app.partytypes.fields import FieldDef, FieldGroup, PartyType, Required
from app.schemas.party import FieldSpec


def _walk(owner: PartyType | FieldGroup) -> list[FieldDef]:
    out: list[FieldDef] = []
    for group in owner.embeds:
        out.extend(_walk(group))
    out.extend(owner.fields)
    return out


def flatten_fields(record: PartyType | FieldGroup) -> list[FieldDef]:
    """
    Full field set of a record: embedded groups first (recursively, in declaration order),
    then the record's own fields.

    External names and internal identifiers must both be unique across the flattened set;
    a collision is a definition error rather than a silent overwrite.
    """
    fields = _walk(record)

    seen_names: set[str] = set()
    seen_internal: set[str] = set()
    for f in fields:
        if f.name in seen_names:
            raise SchemaDefinitionError(f"{record.name}: duplicate field name '{f.name}'")
        if f.internal_name in seen_internal:
            raise SchemaDefinitionError(f"{record.name}: duplicate internal field '{f.internal_name}'")
        seen_names.add(f.name)
        seen_internal.add(f.internal_name)
    return fields


def name_table(fields: Iterable[FieldDef]) -> dict[str, str]:
    """
    internal identifier -> external (JSON) name, over a flattened field set.
    """
    return {f.internal_name: f.name for f in fields}


def _render_checks(record_name: str, f: FieldDef, names: dict[str, str]) -> tuple[str, ...] | None:
    rendered: list[str] = []
    for check in f.checks:
        if isinstance(check, Required):
            continue
        value = check.value
        # Checks that reference another field are published with the external name;
        # clients never see internal identifiers.
        if check.name.endswith("field"):
            if value not in names:
                raise SchemaDefinitionError(
                    f"{record_name}.{f.name}: check '{check.name}' references unknown field '{value}'"
                )
            value = names[value]
        rendered.append(check.render(value))
    return tuple(rendered) or None


def field_spec(record: PartyType) -> dict[str, FieldSpec]:
    """
    Derive the client-facing spec of a party type: external field name -> FieldSpec.

    Pure function of the definition; raises SchemaDefinitionError on duplicate names
    or dangling cross-field references.
    """
    fields = flatten_fields(record)
    names = name_table(fields)

    out: dict[str, FieldSpec] = {}
    for f in fields:
        out[f.name] = FieldSpec(
            type_name=f.kind.value,
            checks=_render_checks(record.name, f, names),
            required=f.required,
            is_list=f.is_list,
        )
    return out
