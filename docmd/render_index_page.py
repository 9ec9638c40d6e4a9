"""Render the crate overview and the full item listing."""

from collections import defaultdict

from docmd.md_sections import ITEM_HEADER_LEVEL, SECTION_HEADER_LEVEL, render_header, render_next_actions
from docmd.page_sections import join_page
from docmd.render_documentation import render_documentation
from docmd.type_model import CrateIndex, kind_label

# Page-name prefixes rustdoc uses in its HTML output.
FRAGMENT_KIND_LABELS = {
    "struct": "Struct",
    "enum": "Enum",
    "union": "Union",
    "trait": "Trait",
    "traitalias": "Trait Alias",
    "fn": "Function",
    "type": "Type Alias",
    "constant": "Constant",
    "static": "Static",
    "macro": "Macro",
    "derive": "Derive Macro",
    "attr": "Attribute Macro",
    "primitive": "Primitive",
    "keyword": "Keyword",
    "index": "Module",
}

SECTION_PLURALS = {
    "Type Alias": "Type Aliases",
    "Trait Alias": "Trait Aliases",
    "Static": "Statics",
}

LISTING_TITLE = "List of all items"


def render_item_counts(counts: dict[str, int]) -> list[str]:
    """Render the Item Counts section from ``kind label -> count``."""
    parts = [render_header(SECTION_HEADER_LEVEL, "Item Counts"), ""]
    total = sum(counts.values())
    if not total:
        return [*parts, "No public items found.", ""]
    parts += [f"**Total**: {total} public items", ""]
    parts += [f"- **{label}**: {counts[label]}" for label in sorted(counts)]
    parts.append("")
    return parts


def group_public_items(crate: CrateIndex) -> dict[str, list[str]]:
    """Group public item names by kind label, each list sorted."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for item in crate.public_items():
        grouped[kind_label(item.kind)].append(item.display_name)
    return {label: sorted(names) for label, names in sorted(grouped.items())}


def render_index_page(crate: CrateIndex) -> str:
    """Render ``index.md``: crate docs, item counts and per-kind item lists."""
    grouped = group_public_items(crate)
    parts = [render_header(ITEM_HEADER_LEVEL, crate.name), ""]
    root = crate.root_item
    docs = render_documentation(root.docs if root else None)
    if docs:
        parts += [docs, ""]
    if crate.crate_version:
        parts += [f"**Version:** {crate.crate_version}", ""]
    parts += render_item_counts({label: len(names) for label, names in grouped.items()})
    for label, names in grouped.items():
        parts += [render_header(SECTION_HEADER_LEVEL + 1, label), ""]
        parts += [f"- {name}" for name in names]
        parts.append("")
    parts += render_next_actions([f"Browse all items: `cargo docmd list {crate.name}`"])
    return join_page(parts)


def section_title(label: str) -> str:
    """Return the plural section title used in the item listing."""
    return SECTION_PLURALS.get(label, f"{label}s")


def render_all_items(crate: CrateIndex) -> str:
    """Render the item listing in the shape rustdoc's ``all.html`` converts to.

    Entries are paths relative to the crate root; the listing is qualified
    later by :func:`docmd.format_all_md.format_all_md`.
    """
    grouped: dict[str, list[str]] = defaultdict(list)
    for item in crate.public_items():
        path = crate.qualified_name(item).split("::")[1:]
        grouped[kind_label(item.kind)].append("::".join(path) or item.display_name)

    parts = [render_header(ITEM_HEADER_LEVEL, LISTING_TITLE), ""]
    for label in sorted(grouped):
        parts += [render_header(SECTION_HEADER_LEVEL + 1, section_title(label)), ""]
        parts += [f"- {path}" for path in sorted(grouped[label])]
        parts.append("")
    return join_page(parts)
