"""Sections shared by every item page rendered from the type model."""

from docmd.md_codeblock import md_codeblock
from docmd.md_sections import ITEM_HEADER_LEVEL, SECTION_HEADER_LEVEL, render_header, render_next_actions
from docmd.render_documentation import render_documentation
from docmd.type_model import CrateIndex, Item, kind_label

SECTION_RULE = "---"


def render_title(item: Item) -> list[str]:
    """Render ``# Struct `Name```."""
    return [render_header(ITEM_HEADER_LEVEL, f"{kind_label(item.kind)} `{item.display_name}`"), ""]


def render_namespace(item: Item, crate: CrateIndex) -> list[str]:
    """Render the enclosing module path, when the item is not at the crate root."""
    namespace = crate.namespace_of(item)
    if not namespace:
        return []
    return [f"**Namespace:** `{namespace}`", ""]


def render_definition(code: str) -> list[str]:
    """Render the Rust declaration of the item."""
    return ["**Definition:**", "", md_codeblock(code, "rust"), ""]


def render_description(item: Item) -> list[str]:
    """Render the item documentation under a Description heading."""
    docs = render_documentation(item.docs)
    if not docs:
        return []
    return ["### Description", "", docs, ""]


def render_section(title: str, lines: list[str]) -> list[str]:
    """Render a level-two section, or nothing when it has no lines."""
    if not lines:
        return []
    return [render_header(SECTION_HEADER_LEVEL, title), "", *lines, ""]


def render_next_actions_for(item: Item, crate: CrateIndex) -> list[str]:
    """Render the commands that lead on from an item page."""
    return render_next_actions(
        [
            f"View this item: `cargo docmd show {crate.qualified_name(item)}`",
            f"Browse all items: `cargo docmd list {crate.name}`",
        ]
    )


def join_page(parts: list[str]) -> str:
    """Join page lines, ending the page with exactly one newline."""
    return "\n".join(parts).rstrip() + "\n"
