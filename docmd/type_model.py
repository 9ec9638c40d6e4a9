"""Data model for a rustdoc JSON crate dump."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Item kinds with a dedicated page renderer.
RENDERED_KINDS = frozenset({"struct", "enum", "union", "type_alias"})

# Kinds documented on their parent's page.
MEMBER_KINDS = frozenset(
    {"struct_field", "variant", "impl", "use", "assoc_const", "assoc_type"}
)

KIND_LABELS = {
    "module": "Module",
    "extern_crate": "Extern Crate",
    "use": "Use Statement",
    "union": "Union",
    "struct": "Struct",
    "struct_field": "Struct Field",
    "enum": "Enum",
    "variant": "Variant",
    "function": "Function",
    "trait": "Trait",
    "trait_alias": "Trait Alias",
    "impl": "Impl Block",
    "type_alias": "Type Alias",
    "constant": "Constant",
    "static": "Static",
    "extern_type": "Extern Type",
    "macro": "Macro",
    "proc_macro": "Proc Macro",
    "primitive": "Primitive",
    "assoc_const": "Associated Constant",
    "assoc_type": "Associated Type",
}


def id_key(raw_id: Any) -> str | None:
    """Normalize an item id to a string key.

    Older dumps use strings such as ``"0:12:345"`` and newer ones plain
    integers.
    """
    if raw_id is None:
        return None
    return str(raw_id)


def kind_label(kind: str) -> str:
    """Return the human-readable label of an item kind."""
    return KIND_LABELS.get(kind, kind.replace("_", " ").title())


@dataclass
class Item:
    """One documented unit of a crate."""

    id: str
    name: str | None
    visibility: str  # public/crate/restricted/default
    docs: str | None
    kind: str
    inner: dict[str, Any]  # kind-specific payload, as in the dump
    raw: dict[str, Any] = field(repr=False, default_factory=dict)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Item":
        """Build an item from its entry in the dump's ``index``."""
        inner = data.get("inner") or {}
        if isinstance(inner, str):
            kind, payload = inner, {}
        else:
            kind, payload = next(iter(inner.items()), ("unknown", {}))
        visibility = data.get("visibility", "default")
        if isinstance(visibility, dict):
            visibility = "restricted"
        return cls(
            id=id_key(data.get("id")) or "",
            name=data.get("name"),
            visibility=visibility,
            docs=data.get("docs"),
            kind=kind,
            inner=payload if isinstance(payload, dict) else {"value": payload},
            raw=data,
        )

    @property
    def is_public(self) -> bool:
        """Check whether the item is declared ``pub``."""
        return self.visibility == "public"

    @property
    def display_name(self) -> str:
        """Return the item name, or a placeholder for anonymous items."""
        return self.name or "Anonymous"


@dataclass
class CrateIndex:
    """The complete ``id -> Item`` map of one crate, read-only once loaded."""

    root: str
    items: dict[str, Item]
    paths: dict[str, list[str]] = field(default_factory=dict)
    path_kinds: dict[str, str] = field(default_factory=dict)
    crate_version: str | None = None
    format_version: int | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "CrateIndex":
        """Build the index from a parsed rustdoc JSON document."""
        items = {}
        for raw_id, raw_item in (data.get("index") or {}).items():
            item = Item.from_json(raw_item)
            items[item.id or str(raw_id)] = item
        paths: dict[str, list[str]] = {}
        path_kinds: dict[str, str] = {}
        for raw_id, summary in (data.get("paths") or {}).items():
            paths[str(raw_id)] = list(summary.get("path") or [])
            path_kinds[str(raw_id)] = summary.get("kind", "")
        return cls(
            root=id_key(data.get("root")) or "",
            items=items,
            paths=paths,
            path_kinds=path_kinds,
            crate_version=data.get("crate_version"),
            format_version=data.get("format_version"),
        )

    @property
    def root_item(self) -> Item | None:
        """Return the crate root module."""
        return self.items.get(self.root)

    @property
    def name(self) -> str:
        """Return the crate name."""
        root = self.root_item
        return root.name if root and root.name else "Unknown"

    def get(self, item_id: Any) -> Item | None:
        """Look up an item by raw or normalized id."""
        key = id_key(item_id)
        return self.items.get(key) if key is not None else None

    def path_of(self, item_id: Any) -> list[str] | None:
        """Return the full path segments of an item, when the dump records them."""
        key = id_key(item_id)
        return self.paths.get(key) if key is not None else None

    def qualified_name(self, item: Item) -> str:
        """Return ``crate::module::Name`` for an item."""
        path = self.path_of(item.id)
        if path:
            return "::".join(path)
        return f"{self.name}::{item.display_name}"

    def namespace_of(self, item: Item) -> str | None:
        """Return the enclosing module path of an item."""
        path = self.path_of(item.id)
        if path and len(path) > 1:
            return "::".join(path[:-1])
        return None

    def public_items(self) -> list[Item]:
        """Return the public named top-level items of the crate, sorted by path.

        Fields, variants and associated items are reached through their parent
        and are not listed, nor are functions declared inside an impl or trait.
        When the dump records item paths, only items with a recorded path are
        returned.
        """
        members = {
            id_key(member)
            for it in self.items.values()
            if it.kind in ("impl", "trait")
            for member in it.inner.get("items") or []
        }
        found = [
            it
            for it in self.items.values()
            if it.id != self.root
            and it.name
            and it.is_public
            and it.raw.get("crate_id", 0) == 0
            and it.kind not in MEMBER_KINDS
            and it.id not in members
            and (not self.paths or it.id in self.paths)
        ]
        return sorted(found, key=self.qualified_name)


def load_crate(path: Path) -> CrateIndex:
    """Load a rustdoc JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    crate = CrateIndex.from_json(data)
    logger.debug(
        "Loaded crate %s (%d items, format version %s)",
        crate.name,
        len(crate.items),
        crate.format_version,
    )
    return crate
