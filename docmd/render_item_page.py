"""Dispatch item rendering by kind."""

import logging
from collections.abc import Callable

from docmd.md_sections import render_inline_code
from docmd.page_sections import (
    join_page,
    render_definition,
    render_description,
    render_namespace,
    render_next_actions_for,
    render_section,
    render_title,
)
from docmd.render_documentation import summary
from docmd.render_enum_page import render_enum_page
from docmd.render_fields import visibility_keyword
from docmd.render_function import render_function_signature
from docmd.render_generics import render_generic_param_lines
from docmd.render_struct_page import render_struct_page
from docmd.render_type import render_bounds, render_generic_params, render_type
from docmd.render_type_alias_page import render_type_alias_page
from docmd.render_union_page import render_union_page
from docmd.type_model import CrateIndex, Item

logger = logging.getLogger(__name__)

PAGE_RENDERERS: dict[str, Callable[[Item, CrateIndex], str]] = {
    "struct": render_struct_page,
    "enum": render_enum_page,
    "union": render_union_page,
    "type_alias": render_type_alias_page,
}


def render_item(item: Item, crate: CrateIndex) -> str:
    """Render the Markdown page of any item."""
    renderer = PAGE_RENDERERS.get(item.kind, render_generic_page)
    logger.debug("Rendering %s %s", item.kind, item.display_name)
    return renderer(item, crate)


def declaration(item: Item) -> str | None:
    """Render a declaration line for kinds without a dedicated page renderer."""
    inner = item.inner
    vis = visibility_keyword(item.visibility)
    name = item.display_name
    generics = inner.get("generics") or {}
    params = render_generic_params(generics.get("params") or [])

    if item.kind == "function":
        return render_function_signature(item)
    if item.kind == "trait":
        unsafe = "unsafe " if inner.get("is_unsafe") else ""
        auto = "auto " if inner.get("is_auto") else ""
        bounds = inner.get("bounds") or []
        supertraits = f": {render_bounds(bounds)}" if bounds else ""
        return f"{vis}{unsafe}{auto}trait {name}{params}{supertraits} {{ ... }}"
    if item.kind == "constant":
        const = inner.get("const") or {}
        return f"{vis}const {name}: {render_type(inner.get('type'))} = {const.get('expr', '...')};"
    if item.kind == "static":
        mutable = "mut " if inner.get("is_mutable") else ""
        return f"{vis}static {mutable}{name}: {render_type(inner.get('type'))};"
    if item.kind == "module":
        return f"{vis}mod {name}"
    if item.kind == "macro":
        return inner.get("value")
    return None


def render_trait_items(item: Item, crate: CrateIndex) -> list[str]:
    """Render one line per associated item of a trait."""
    lines = []
    for member_id in item.inner.get("items") or []:
        member = crate.get(member_id)
        if member is None:
            continue
        if member.kind == "function":
            text = render_function_signature(member, visibility="")
        elif member.kind == "assoc_type":
            text = f"type {member.display_name}"
        elif member.kind == "assoc_const":
            text = f"const {member.display_name}: {render_type(member.inner.get('type'))}"
        else:
            continue
        line = f"- {render_inline_code(text)}"
        docs = summary(member.docs)
        if docs:
            line += f" - {docs}"
        lines.append(line)
    return lines


def render_generic_page(item: Item, crate: CrateIndex) -> str:
    """Render functions, traits, constants and other kinds without a dedicated renderer."""
    parts = render_title(item)
    parts += render_namespace(item, crate)
    code = declaration(item)
    if code:
        parts += render_definition(code)
    parts += render_description(item)
    if item.kind == "trait":
        parts += render_section("Associated Items", render_trait_items(item, crate))
    parts += render_section("Generic Parameters", render_generic_param_lines(item.inner.get("generics")))
    parts += render_next_actions_for(item, crate)
    return join_page(parts)
