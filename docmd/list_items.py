"""The ``list`` command: print every item of a library."""

import logging
from pathlib import Path
from typing import Any

from docmd.item_path import validate_library_name
from docmd.library_identity import LibraryIdentity
from docmd.show_item import ensure_built, resolver_for

logger = logging.getLogger(__name__)


def list_items(library: str, config: dict[str, Any], cwd: Path | None = None) -> str:
    """Return the ``all.md`` listing of ``library``, building it first if needed."""
    name = validate_library_name(library)
    resolver = resolver_for(config, cwd)
    identity = LibraryIdentity.from_name(name)
    ensure_built(resolver, identity, config, cwd)

    all_md = resolver.all_items_path(name)
    logger.debug("Listing %s", all_md)
    return all_md.read_text(encoding="utf-8")
