"""Render struct and union fields."""

import logging
from typing import Any

from docmd.md_sections import render_inline_code
from docmd.render_documentation import summary
from docmd.render_type import Subst, render_type
from docmd.type_model import CrateIndex, Item

logger = logging.getLogger(__name__)

VISIBILITY_LABELS = {
    "public": "(pub)",
    "crate": "(pub(crate))",
    "restricted": "(pub restricted)",
    "default": "",
}

HIDDEN_FIELD = "Hidden field"


def visibility_label(visibility: str) -> str:
    """Return the annotation shown after a field name."""
    return VISIBILITY_LABELS.get(visibility, "")


def visibility_keyword(visibility: str) -> str:
    """Return the declaration prefix (``pub ``) for a visibility."""
    if visibility == "public":
        return "pub "
    if visibility == "crate":
        return "pub(crate) "
    return ""


def _field_item(crate: CrateIndex, field_id: Any) -> Item | None:
    field = crate.get(field_id)
    if field is None or field.kind != "struct_field":
        logger.debug("Field %s missing from crate index", field_id)
        return None
    return field


def field_type(field: Item) -> Any:
    """Return the type expression of a ``struct_field`` item."""
    # Non-mapping payloads such as "infer" are wrapped as {"value": ...}.
    return field.inner["value"] if "value" in field.inner else field.inner


def render_named_fields(field_ids: list[Any], crate: CrateIndex, subst: Subst = None) -> list[str]:
    """Render ``- `T` name (pub) - docs`` lines."""
    lines = []
    for field_id in field_ids:
        field = _field_item(crate, field_id)
        if field is None:
            continue
        line = f"- {render_inline_code(render_type(field_type(field), subst))} {field.name or 'Unnamed'}"
        label = visibility_label(field.visibility)
        if label:
            line += f" {label}"
        docs = summary(field.docs)
        if docs:
            line += f" - {docs}"
        lines.append(line)
    return lines


def render_tuple_fields(field_ids: list[Any], crate: CrateIndex, subst: Subst = None) -> list[str]:
    """Render ``- 0: `T``` lines; stripped positions render as hidden."""
    lines = []
    for index, field_id in enumerate(field_ids):
        if field_id is None:
            lines.append(f"- {index}: {HIDDEN_FIELD}")
            continue
        field = _field_item(crate, field_id)
        if field is None:
            continue
        line = f"- {index}: {render_inline_code(render_type(field_type(field), subst))}"
        docs = summary(field.docs)
        if docs:
            line += f" - {docs}"
        lines.append(line)
    return lines


def struct_kind(inner: dict[str, Any]) -> tuple[str, Any]:
    """Split a struct payload into ``plain``/``tuple``/``unit`` and its data."""
    kind = inner.get("kind", "unit")
    if isinstance(kind, str):
        return kind, None
    return next(iter(kind.items()))


def render_struct_field_lines(inner: dict[str, Any], crate: CrateIndex, subst: Subst = None) -> list[str]:
    """Render the field list of any struct shape; unit structs have none."""
    shape, data = struct_kind(inner)
    if shape == "plain":
        return render_named_fields(data.get("fields") or [], crate, subst)
    if shape == "tuple":
        return render_tuple_fields(data or [], crate, subst)
    return []


def render_field_declarations(
    field_ids: list[Any], crate: CrateIndex, subst: Subst = None, *, stripped: bool = False
) -> list[str]:
    """Render ``    pub name: T,`` lines for a braced declaration body."""
    lines = []
    for field_id in field_ids:
        field = _field_item(crate, field_id)
        if field is None:
            continue
        lines.append(
            f"    {visibility_keyword(field.visibility)}{field.name}: {render_type(field_type(field), subst)},"
        )
    if stripped:
        lines.append("    /* private fields */")
    return lines


def render_tuple_declaration(field_ids: list[Any], crate: CrateIndex, subst: Subst = None) -> str:
    """Render the ``(pub T, _)`` body of a tuple struct declaration."""
    parts = []
    for field_id in field_ids:
        field = _field_item(crate, field_id) if field_id is not None else None
        if field is None:
            parts.append("_")
        else:
            parts.append(f"{visibility_keyword(field.visibility)}{render_type(field_type(field), subst)}")
    return f"({', '.join(parts)})"
