"""Render the Implementations section of an item page."""

import logging
from typing import Any

from docmd.md_sections import SECTION_HEADER_LEVEL, render_header, render_inline_code
from docmd.page_sections import SECTION_RULE
from docmd.render_documentation import summary
from docmd.render_function import render_function_signature
from docmd.render_type import render_path, render_type
from docmd.type_model import CrateIndex, Item

logger = logging.getLogger(__name__)

NO_IMPLEMENTATIONS = "No implementations found."


def impl_items(item: Item, crate: CrateIndex) -> list[Item]:
    """Return the explicit impl blocks of a type, without auto-trait and blanket impls."""
    found = []
    for impl_id in item.inner.get("impls") or []:
        impl = crate.get(impl_id)
        if impl is None or impl.kind != "impl":
            continue
        if impl.inner.get("is_synthetic") or impl.inner.get("blanket_impl") is not None:
            continue
        found.append(impl)
    return found


def _method_line(method: Item, visibility: str | None) -> str:
    line = f"- {render_inline_code(render_function_signature(method, visibility=visibility))}"
    docs = summary(method.docs)
    if docs:
        line += f" - {docs}"
    return line


def render_impl_lines(impls: list[Item], crate: CrateIndex) -> list[str]:
    """Render inherent methods and implemented traits."""
    methods: list[str] = []
    traits: list[str] = []
    for impl in impls:
        trait: Any = impl.inner.get("trait")
        members = [crate.get(i) for i in impl.inner.get("items") or []]
        if trait is None:
            methods.extend(
                _method_line(m, None)
                for m in members
                if m is not None and m.kind == "function" and m.is_public
            )
            continue
        negative = "!" if impl.inner.get("is_negative") else ""
        traits.append(
            f"- `{negative}{render_path(trait)}` for `{render_type(impl.inner.get('for'))}`"
        )

    lines: list[str] = []
    if methods:
        lines += [render_header(SECTION_HEADER_LEVEL + 1, "Methods"), "", *methods, ""]
    if traits:
        lines += [render_header(SECTION_HEADER_LEVEL + 1, "Trait Implementations"), "", *traits, ""]
    return lines


def render_implementations(item: Item, crate: CrateIndex) -> list[str]:
    """Render the section for a type's own impl blocks; empty when it has none."""
    lines = render_impl_lines(impl_items(item, crate), crate)
    if not lines:
        return []
    return [SECTION_RULE, "", render_header(SECTION_HEADER_LEVEL, "Implementations"), "", *lines]


def render_inherited_implementations(target_name: str, target: Item | None, crate: CrateIndex) -> list[str]:
    """Render the section of a type alias, which inherits the target's impls."""
    parts = [
        SECTION_RULE,
        "",
        render_header(SECTION_HEADER_LEVEL, "Implementations"),
        "",
        f"This type inherits all implementations from `{target_name}`.",
        "",
    ]
    lines = render_impl_lines(impl_items(target, crate), crate) if target else []
    if not lines:
        logger.debug("No implementations recorded for %s", target_name)
        return [*parts, NO_IMPLEMENTATIONS, ""]
    return [*parts, *lines]
