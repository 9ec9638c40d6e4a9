"""Map caller-supplied item paths to generated Markdown files."""

import logging
from pathlib import Path

from docmd.crate_metadata import METADATA_FILE, CrateDocMetadata
from docmd.errors import PathResolutionFailed
from docmd.item_path import ParsedItemPath, parse_item_path
from docmd.library_identity import LibraryIdentity

logger = logging.getLogger(__name__)

INDEX_FILE = "index.md"
ALL_ITEMS_FILE = "all.md"


class PathResolver:
    """Resolve item paths against the corpora below one output root.

    The output root holds one directory per library, named by its canonical
    spelling, each with a ``metadata.json`` sidecar.
    """

    def __init__(self, output_root: Path, metadata_file: str = METADATA_FILE) -> None:
        """Initialize the resolver for ``output_root``."""
        self.output_root = output_root
        self.metadata_file = metadata_file
        self._metadata: dict[str, CrateDocMetadata] = {}

    def library_dir(self, identity: LibraryIdentity) -> Path:
        """Return the corpus directory of a library."""
        return self.output_root / identity.canonical_name

    def metadata_path(self, identity: LibraryIdentity) -> Path:
        """Return the sidecar path of a library."""
        return self.library_dir(identity) / self.metadata_file

    def load_metadata(self, identity: LibraryIdentity) -> CrateDocMetadata | None:
        """Read a library's sidecar, or None when it has not been built."""
        cached = self._metadata.get(identity.canonical_name)
        if cached is not None:
            return cached
        path = self.metadata_path(identity)
        if not path.exists():
            logger.debug("No metadata at %s", path)
            return None
        metadata = CrateDocMetadata.load(path)
        self._metadata[identity.canonical_name] = metadata
        return metadata

    def forget(self, identity: LibraryIdentity) -> None:
        """Drop cached metadata after a rebuild."""
        self._metadata.pop(identity.canonical_name, None)

    def resolve(self, item_path: str | ParsedItemPath) -> Path:
        """Return the Markdown file documenting ``item_path``.

        A bare library name resolves to the crate overview. Raises
        InputValidationFailed for malformed paths and PathResolutionFailed when
        the library has no corpus or the item has no entry.
        """
        parsed = item_path if isinstance(item_path, ParsedItemPath) else parse_item_path(item_path)
        identity = LibraryIdentity.from_name(parsed.library)

        metadata = self.load_metadata(identity)
        if metadata is None:
            raise PathResolutionFailed(parsed.raw, identity.declared_name)

        library_dir = self.library_dir(identity)
        if parsed.item is None:
            return library_dir / INDEX_FILE

        key = parsed.qualified(identity.canonical_name)
        relative = metadata.item_map.get(key)
        if relative is None:
            logger.debug("No entry for %s among %d items", key, len(metadata.item_map))
            raise PathResolutionFailed(parsed.raw, identity.declared_name)
        return library_dir / relative

    def all_items_path(self, library: str) -> Path:
        """Return the full item listing of a library."""
        identity = LibraryIdentity.from_name(library)
        if self.load_metadata(identity) is None:
            raise PathResolutionFailed(library, identity.declared_name)
        return self.library_dir(identity) / ALL_ITEMS_FILE
