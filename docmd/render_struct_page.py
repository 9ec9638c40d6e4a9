"""Render struct pages from the type model."""

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
from docmd.render_fields import (
    render_field_declarations,
    render_struct_field_lines,
    render_tuple_declaration,
    struct_kind,
    visibility_keyword,
)
from docmd.render_generics import render_generic_param_lines
from docmd.render_implementations import render_implementations
from docmd.render_type import Subst, render_generic_params, render_where_clause
from docmd.type_model import CrateIndex, Item


def struct_declaration(
    item: Item, crate: CrateIndex, subst: Subst = None, params: str | None = None
) -> str:
    """Render the Rust declaration of a struct.

    ``params`` replaces the struct's own generic parameter list, which lets a
    type alias show the struct in terms of its own parameters.
    """
    generics = item.inner.get("generics") or {}
    if params is None:
        params = render_generic_params(generics.get("params") or [])
    where = render_where_clause(generics, subst)
    head = f"{visibility_keyword(item.visibility)}struct {item.display_name}{params}"

    shape, data = struct_kind(item.inner)
    if shape == "tuple":
        return f"{head}{render_tuple_declaration(data or [], crate, subst)}{where};"
    if shape == "plain":
        body = render_field_declarations(
            data.get("fields") or [], crate, subst, stripped=bool(data.get("has_stripped_fields"))
        )
        if not body:
            return f"{head}{where} {{}}"
        return "\n".join([f"{head}{where} {{", *body, "}"])
    return f"{head}{where};"


def render_struct_page(item: Item, crate: CrateIndex) -> str:
    """Render a struct page: fields, generic parameters and implementations."""
    if item.kind != "struct":
        raise KindMismatch("struct", item.kind)

    parts = render_title(item)
    parts += render_namespace(item, crate)
    parts += render_definition(struct_declaration(item, crate))
    parts += render_description(item)
    parts += render_section("Fields", render_struct_field_lines(item.inner, crate))
    parts += render_section("Generic Parameters", render_generic_param_lines(item.inner.get("generics")))
    parts += render_implementations(item, crate)
    parts += render_next_actions_for(item, crate)
    return join_page(parts)
