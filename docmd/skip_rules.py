"""Data-driven predicate deciding which rustdoc elements never reach the output."""

from dataclasses import dataclass
from typing import Any

from bs4 import Tag

DEFAULT_SKIP_TAGS = frozenset({"wbr", "rustdoc-toolbar", "script"})
DEFAULT_SKIP_IDS = frozenset({"copy-path", "implementors", "implementors-list"})
DEFAULT_SKIP_CLASS_SUBSTRINGS = (
    "src",
    "hideme",
    "anchor",
    "rustdoc-breadcrumbs",
    "tooltip",
)


@dataclass(frozen=True)
class SkipRules:
    """Tag names, ids and class substrings of presentation-only elements.

    Each table is consulted independently; an element matching any one of
    them is dropped together with its content.
    """

    tags: frozenset[str] = DEFAULT_SKIP_TAGS
    ids: frozenset[str] = DEFAULT_SKIP_IDS
    class_substrings: tuple[str, ...] = DEFAULT_SKIP_CLASS_SUBSTRINGS

    def skips_tag(self, name: str) -> bool:
        """Check the tag-name table."""
        return name in self.tags

    def skips_id(self, element_id: str | None) -> bool:
        """Check the id table."""
        return element_id is not None and element_id in self.ids

    def skips_class(self, classes: str | list[str] | None) -> bool:
        """Check the class-substring table against the whole class attribute."""
        if not classes:
            return False
        class_attr = classes if isinstance(classes, str) else " ".join(classes)
        return any(sub in class_attr for sub in self.class_substrings)

    def should_skip(self, element: Tag) -> bool:
        """Return True when ``element`` is navigation or UI chrome."""
        return (
            self.skips_tag(element.name)
            or self.skips_id(element.get("id"))
            or self.skips_class(element.get("class"))
        )

    def extended(self, skip_config: dict[str, Any]) -> "SkipRules":
        """Return a copy with the entries from the ``skip`` config section added."""
        return SkipRules(
            tags=self.tags | frozenset(skip_config.get("tags") or []),
            ids=self.ids | frozenset(skip_config.get("ids") or []),
            class_substrings=tuple(
                dict.fromkeys(
                    [*self.class_substrings, *(skip_config.get("class_substrings") or [])]
                )
            ),
        )


DEFAULT_SKIP_RULES = SkipRules()
