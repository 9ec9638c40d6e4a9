"""Render type alias pages from the type model."""

import logging
from typing import Any

from docmd.errors import KindMismatch
from docmd.md_codeblock import md_codeblock
from docmd.md_sections import SECTION_HEADER_LEVEL, render_header
from docmd.page_sections import (
    SECTION_RULE,
    join_page,
    render_definition,
    render_description,
    render_namespace,
    render_next_actions_for,
    render_title,
)
from docmd.render_enum_page import enum_declaration
from docmd.render_fields import visibility_keyword
from docmd.render_implementations import render_inherited_implementations
from docmd.render_struct_page import struct_declaration
from docmd.render_type import (
    alias_type_args,
    generic_param_names,
    render_generic_arg,
    render_generic_params,
    render_path,
    render_type,
    render_where_clause,
    short_path_name,
)
from docmd.render_variants import render_variants_table
from docmd.type_model import CrateIndex, Item

logger = logging.getLogger(__name__)


def aliased_item(item: Item, crate: CrateIndex) -> Item | None:
    """Return the item a type alias points at, when it is in the crate index."""
    target = item.inner.get("type")
    if isinstance(target, dict) and "resolved_path" in target:
        return crate.get(target["resolved_path"].get("id"))
    return None


def substitutions(target: Item, target_type: Any) -> dict[str, str]:
    """Map the target's generic parameter names onto the alias's arguments."""
    params = (target.inner.get("generics") or {}).get("params") or []
    args = alias_type_args(target_type["resolved_path"].get("args"))
    return {
        name: render_generic_arg(arg)
        for name, arg in zip(generic_param_names(params), args, strict=False)
    }


def alias_declaration(item: Item) -> str:
    """Render ``pub type Name<T> = Target<T, Error>;`` with the short target name."""
    target = item.inner.get("type")
    generics = item.inner.get("generics") or {}
    if isinstance(target, dict) and "resolved_path" in target:
        rendered = render_path(target["resolved_path"], short=True)
    else:
        rendered = render_type(target)
    return (
        f"{visibility_keyword(item.visibility)}type {item.display_name}"
        f"{render_generic_params(generics.get('params') or [])}"
        f"{render_where_clause(generics)} = {rendered};"
    )


def _alias_params(item: Item) -> str:
    names = generic_param_names((item.inner.get("generics") or {}).get("params") or [])
    return f"<{', '.join(names)}>" if names else ""


def render_aliased_type(item: Item, target: Item | None, crate: CrateIndex) -> list[str]:
    """Render the aliased type, expanding enums and structs with substituted arguments."""
    target_type = item.inner.get("type")
    if target is not None and target.kind in ("enum", "struct"):
        subst = substitutions(target, target_type)
        declare = enum_declaration if target.kind == "enum" else struct_declaration
        code = declare(target, crate, subst, _alias_params(item))
    else:
        code = render_type(target_type)
    return ["**Aliased Type:**", "", md_codeblock(code, "rust"), ""]


def render_type_alias_page(item: Item, crate: CrateIndex) -> str:
    """Render a type alias page.

    When the alias points at an enum in the crate, a Variants table shows each
    variant with the alias's concrete arguments substituted.
    """
    if item.kind != "type_alias":
        raise KindMismatch("type alias", item.kind)

    target = aliased_item(item, crate)
    target_type = item.inner.get("type")
    if target is None:
        logger.debug("Aliased type of %s is not in the crate index", item.display_name)

    parts = render_title(item)
    parts += render_namespace(item, crate)
    parts += render_definition(alias_declaration(item))
    parts += render_aliased_type(item, target, crate)
    parts += render_description(item)

    if target is not None and target.kind == "enum":
        table = render_variants_table(
            target,
            crate,
            substitutions(target, target_type),
            alias_type_args(target_type["resolved_path"].get("args")),
        )
        if table:
            parts += [SECTION_RULE, "", render_header(SECTION_HEADER_LEVEL, "Variants"), "", table, ""]

    if target is not None:
        target_name = target.display_name
    elif isinstance(target_type, dict) and "resolved_path" in target_type:
        target_name = short_path_name(target_type["resolved_path"])
    else:
        target_name = render_type(target_type)
    parts += render_inherited_implementations(target_name, target, crate)
    parts += render_next_actions_for(item, crate)
    return join_page(parts)
