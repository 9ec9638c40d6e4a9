"""Render union pages from the type model."""

from docmd.errors import KindMismatch
from docmd.page_sections import (
    join_page,
    render_definition,
    render_description,
    render_namespace,
    render_next_actions_for,
    render_section,
    render_title,
)
from docmd.render_fields import render_field_declarations, render_named_fields, visibility_keyword
from docmd.render_generics import render_generic_param_lines
from docmd.render_implementations import render_implementations
from docmd.render_type import render_generic_params, render_where_clause
from docmd.type_model import CrateIndex, Item

SAFETY_NOTE = (
    "**Important**: Accessing union fields requires unsafe code. "
    "Only access the field that was most recently written to. "
    "Reading from a different field results in undefined behavior."
)


def union_declaration(item: Item, crate: CrateIndex) -> str:
    """Render the Rust declaration of a union."""
    generics = item.inner.get("generics") or {}
    head = (
        f"{visibility_keyword(item.visibility)}union {item.display_name}"
        f"{render_generic_params(generics.get('params') or [])}{render_where_clause(generics)}"
    )
    body = render_field_declarations(
        item.inner.get("fields") or [], crate, stripped=bool(item.inner.get("has_stripped_fields"))
    )
    return "\n".join([f"{head} {{", *body, "}"])


def render_union_page(item: Item, crate: CrateIndex) -> str:
    """Render a union page; the safety note directly follows the description."""
    if item.kind != "union":
        raise KindMismatch("union", item.kind)

    parts = render_title(item)
    parts += render_namespace(item, crate)
    parts += render_definition(union_declaration(item, crate))
    parts += render_description(item)
    parts += render_section("Safety", [SAFETY_NOTE])
    parts += render_section("Fields", render_named_fields(item.inner.get("fields") or [], crate))
    parts += render_section("Generic Parameters", render_generic_param_lines(item.inner.get("generics")))
    parts += render_implementations(item, crate)
    parts += render_next_actions_for(item, crate)
    return join_page(parts)
