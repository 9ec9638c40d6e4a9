"""The metadata sidecar written next to a generated corpus."""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from docmd.errors import MetadataCorrupt
from docmd.write_corpus import write_file_atomic

logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"


@dataclass
class CrateDocMetadata:
    """Library identity plus the map from full item path to Markdown file.

    ``item_map`` values are paths relative to the corpus directory and always
    end in ``.md``.
    """

    declared_name: str
    canonical_name: str
    item_map: dict[str, str] = field(default_factory=dict)
    format: str = "html"
    config_hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with a sorted item map."""
        data = asdict(self)
        data["item_map"] = dict(sorted(self.item_map.items()))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrateDocMetadata":
        """Deserialize from the JSON form."""
        return cls(
            declared_name=data["declared_name"],
            canonical_name=data["canonical_name"],
            item_map=dict(data.get("item_map") or {}),
            format=data.get("format", "html"),
            config_hash=data.get("config_hash", ""),
        )

    def save(self, path: Path) -> None:
        """Write the sidecar as pretty-printed JSON."""
        write_file_atomic(path, json.dumps(self.to_dict(), indent=2) + "\n")
        logger.debug("Wrote metadata with %d items to %s", len(self.item_map), path)

    @classmethod
    def load(cls, path: Path) -> "CrateDocMetadata":
        """Read a sidecar previously written by :meth:`save`.

        Raises MetadataCorrupt when the file cannot be read or is not a sidecar.
        """
        try:
            return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise MetadataCorrupt(path, str(e)) from e
