"""Render enum variants, as a list, as declarations and as a table."""

from typing import Any

from docmd.md_table import md_table
from docmd.render_documentation import summary
from docmd.render_fields import field_type
from docmd.render_type import Subst, render_generic_arg, render_type
from docmd.type_model import CrateIndex, Item

NO_PAYLOAD = "N/A"


def variant_items(enum_item: Item, crate: CrateIndex) -> list[Item]:
    """Return the variant items of an enum in declaration order."""
    found = []
    for variant_id in enum_item.inner.get("variants") or []:
        variant = crate.get(variant_id)
        if variant is not None and variant.kind == "variant":
            found.append(variant)
    return found


def variant_kind(variant: Item) -> tuple[str, Any]:
    """Split a variant payload into ``plain``/``tuple``/``struct`` and its data."""
    kind = variant.inner.get("kind", "plain")
    if isinstance(kind, str):
        return kind, None
    return next(iter(kind.items()))


def _field_types(field_ids: list[Any], crate: CrateIndex, subst: Subst) -> list[str | None]:
    types: list[str | None] = []
    for field_id in field_ids:
        field = crate.get(field_id) if field_id is not None else None
        types.append(render_type(field_type(field), subst) if field is not None else None)
    return types


def _named_fields(field_ids: list[Any], crate: CrateIndex, subst: Subst) -> list[str]:
    fields = []
    for field_id in field_ids:
        field = crate.get(field_id)
        if field is not None and field.name:
            fields.append(f"{field.name}: {render_type(field_type(field), subst)}")
    return fields


def render_variant_signature(variant: Item, crate: CrateIndex, subst: Subst = None) -> str:
    """Render ``Name``, ``Name(T1, T2)`` or ``Name { f: T }``."""
    name = variant.display_name
    shape, data = variant_kind(variant)
    if shape == "tuple":
        types = [t if t is not None else "_" for t in _field_types(data or [], crate, subst)]
        return f"{name}({', '.join(types)})" if types else name
    if shape == "struct":
        fields = _named_fields((data or {}).get("fields") or [], crate, subst)
        return f"{name} {{ {', '.join(fields)} }}" if fields else name
    return name


def render_discriminant(variant: Item) -> str:
    """Render `` = expr`` for a variant with an explicit discriminant."""
    discriminant = variant.inner.get("discriminant")
    if not discriminant:
        return ""
    return f" = {discriminant.get('expr') or discriminant.get('value')}"


def render_variant_lines(enum_item: Item, crate: CrateIndex) -> list[str]:
    """Render ``- `Name(T)` = 1 - docs`` lines."""
    lines = []
    for variant in variant_items(enum_item, crate):
        line = f"- `{render_variant_signature(variant, crate)}`{render_discriminant(variant)}"
        docs = summary(variant.docs)
        if docs:
            line += f" - {docs}"
        lines.append(line)
    return lines


def render_variant_declarations(enum_item: Item, crate: CrateIndex, subst: Subst = None) -> list[str]:
    """Render ``    Name(T),`` lines for an enum declaration body."""
    lines = [
        f"    {render_variant_signature(v, crate, subst)}{render_discriminant(v)},"
        for v in variant_items(enum_item, crate)
    ]
    if enum_item.inner.get("has_stripped_variants"):
        lines.append("    // some variants omitted")
    return lines


def _table_type(
    variant: Item, index: int, crate: CrateIndex, subst: Subst, alias_args: list[Any]
) -> str:
    shape, data = variant_kind(variant)
    if shape == "tuple":
        types = _field_types(data or [], crate, subst)
        if types and all(t is not None for t in types):
            return f"`{', '.join(types)}`"
        # Field items of foreign enums are often absent from the dump; fall
        # back to the alias argument in the variant's position.
        if index < len(alias_args):
            return f"`{render_generic_arg(alias_args[index])}`"
        return "`T`"
    if shape == "struct":
        fields = _named_fields((data or {}).get("fields") or [], crate, subst)
        return f"`{', '.join(fields)}`" if fields else NO_PAYLOAD
    return NO_PAYLOAD


def render_variants_table(
    enum_item: Item, crate: CrateIndex, subst: Subst = None, alias_args: list[Any] | None = None
) -> str:
    """Render one table row per variant with its substituted payload type."""
    rows = []
    for index, variant in enumerate(variant_items(enum_item, crate)):
        rows.append(
            [
                f"`{variant.display_name}`",
                _table_type(variant, index, crate, subst, alias_args or []),
                summary(variant.docs).replace("|", "\\|"),
            ]
        )
    return md_table(["Variant", "Type", "Description"], rows)
