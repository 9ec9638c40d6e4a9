"""The ``show`` command: print the Markdown page of one item."""

import logging
from pathlib import Path
from typing import Any

from docmd import cargo
from docmd.build_docs import build, output_root
from docmd.errors import MetadataCorrupt
from docmd.item_path import parse_item_path
from docmd.library_identity import LibraryIdentity
from docmd.load_config import compute_config_hash
from docmd.path_resolver import PathResolver

logger = logging.getLogger(__name__)


def resolver_for(config: dict[str, Any], cwd: Path | None = None) -> PathResolver:
    """Create a resolver over the output root of the current cargo project."""
    meta = cargo.metadata(cwd)
    return PathResolver(output_root(meta, config), config["output"]["metadata_file"])


def ensure_built(
    resolver: PathResolver,
    identity: LibraryIdentity,
    config: dict[str, Any],
    cwd: Path | None = None,
) -> bool:
    """Build the library when it has no corpus or was built with another configuration.

    Returns True when a build ran.
    """
    try:
        metadata = resolver.load_metadata(identity)
    except MetadataCorrupt as e:
        logger.warning("%s, rebuilding", e)
        metadata = None
    if metadata is not None and metadata.config_hash == compute_config_hash(config):
        return False
    if metadata is None:
        logger.info("No documentation for %s yet, building", identity.declared_name)
    else:
        logger.info("Configuration changed since %s was built, rebuilding", identity.declared_name)
    build(identity.declared_name, config, cwd)
    resolver.forget(identity)
    return True


def show(item_path: str, config: dict[str, Any], cwd: Path | None = None) -> str:
    """Return the Markdown documenting ``item_path``, building it first if needed."""
    parsed = parse_item_path(item_path)
    resolver = resolver_for(config, cwd)
    identity = LibraryIdentity.from_name(parsed.library)
    ensure_built(resolver, identity, config, cwd)

    markdown_path = resolver.resolve(parsed)
    logger.debug("Resolved markdown path: %s", markdown_path)
    return markdown_path.read_text(encoding="utf-8")
