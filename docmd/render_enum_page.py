"""Render enum pages from the type model."""

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
from docmd.render_fields import visibility_keyword
from docmd.render_generics import render_generic_param_lines
from docmd.render_implementations import render_implementations
from docmd.render_type import Subst, render_generic_params, render_where_clause
from docmd.render_variants import render_variant_declarations, render_variant_lines
from docmd.type_model import CrateIndex, Item


def enum_declaration(
    item: Item, crate: CrateIndex, subst: Subst = None, params: str | None = None
) -> str:
    """Render the Rust declaration of an enum, variants included."""
    generics = item.inner.get("generics") or {}
    if params is None:
        params = render_generic_params(generics.get("params") or [])
    head = (
        f"{visibility_keyword(item.visibility)}enum {item.display_name}{params}"
        f"{render_where_clause(generics, subst)}"
    )
    body = render_variant_declarations(item, crate, subst)
    if not body:
        return f"{head} {{}}"
    return "\n".join([f"{head} {{", *body, "}"])


def render_enum_page(item: Item, crate: CrateIndex) -> str:
    """Render an enum page: variants, generic parameters and implementations."""
    if item.kind != "enum":
        raise KindMismatch("enum", item.kind)

    parts = render_title(item)
    parts += render_namespace(item, crate)
    parts += render_definition(enum_declaration(item, crate))
    parts += render_description(item)
    parts += render_section("Variants", render_variant_lines(item, crate))
    parts += render_section("Generic Parameters", render_generic_param_lines(item.inner.get("generics")))
    parts += render_implementations(item, crate)
    parts += render_next_actions_for(item, crate)
    return join_page(parts)
