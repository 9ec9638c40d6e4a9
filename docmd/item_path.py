"""Validation and parsing of caller-supplied item paths."""

import logging
import re
from dataclasses import dataclass

from docmd.errors import InputValidationFailed

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "::"
# ``serde.de.Error`` is accepted as a spelling of ``serde::de::Error``.
SEPARATOR_RE = re.compile(r"::|\.")


@dataclass(frozen=True)
class ParsedItemPath:
    """An item path split into its library and item components."""

    raw: str
    library: str
    item: str | None = None

    def qualified(self, library_name: str) -> str:
        """Return the full path with ``library_name`` as the first segment."""
        if self.item is None:
            return library_name
        return f"{library_name}{PATH_SEPARATOR}{self.item}"


def parse_item_path(item_path: str) -> ParsedItemPath:
    """Validate and split ``item_path`` into library and item components.

    Raises InputValidationFailed for empty input, input made only of
    separators, leading or trailing separators, doubled separators and
    segments containing whitespace or a stray colon.
    """
    text = item_path.strip()
    if not text:
        raise InputValidationFailed(item_path, "path is empty")

    segments = SEPARATOR_RE.split(text)
    if not any(segments):
        raise InputValidationFailed(item_path, "path contains only separators")
    if not segments[0]:
        raise InputValidationFailed(item_path, "path starts with a separator")
    if not segments[-1]:
        raise InputValidationFailed(item_path, "path ends with a separator")
    if "" in segments:
        raise InputValidationFailed(item_path, "path contains an empty segment")

    for segment in segments:
        if ":" in segment or any(ch.isspace() for ch in segment):
            raise InputValidationFailed(
                item_path,
                f"segment '{segment}' is not a valid identifier. "
                "Expected format: <library> or <library>::<item> "
                "(e.g., 'serde' or 'serde::Error')",
            )

    library, *rest = segments
    parsed = ParsedItemPath(
        raw=item_path,
        library=library,
        item=PATH_SEPARATOR.join(rest) if rest else None,
    )
    logger.debug("Parsed item path %r: library=%s item=%s", item_path, library, parsed.item)
    return parsed


def validate_library_name(name: str) -> str:
    """Validate a bare library name as accepted by the ``list`` and ``build`` commands."""
    text = name.strip()
    if not text:
        raise InputValidationFailed(name, "library name is empty")
    if PATH_SEPARATOR in text:
        raise InputValidationFailed(
            name,
            "only accepts library names, not item paths. "
            f"Use `cargo docmd show {text}` to view an item",
        )
    parsed = parse_item_path(text)
    if parsed.item is not None:
        raise InputValidationFailed(name, "only accepts library names, not item paths")
    return parsed.library
