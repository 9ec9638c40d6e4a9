"""Collect per-item outcomes of a build and summarize them."""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from docmd.write_corpus import write_file_atomic


@dataclass
class ItemFailure:
    """One item that could not be converted."""

    item_path: str
    source: str
    error: str


class BuildReport:
    """Collects the converted items and the failures of one library build."""

    def __init__(self, library: str, config_hash: str) -> None:
        """Initialize the report for ``library``."""
        self.library = library
        self.config_hash = config_hash
        self.converted: list[str] = []
        self.failures: list[ItemFailure] = []
        self.start_time = time.time()

    def add_converted(self, item_path: str) -> None:
        """Record an item whose page was produced."""
        self.converted.append(item_path)

    def add_failure(self, item_path: str, source: str, error: Exception) -> None:
        """Record an item whose conversion raised."""
        self.failures.append(ItemFailure(item_path, source, str(error)))

    @property
    def ok(self) -> bool:
        """Check whether every item converted."""
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        """Summarize the build as a JSON-compatible dict."""
        return {
            "meta": {
                "library": self.library,
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
            },
            "stats": {
                "converted": len(self.converted),
                "failed": len(self.failures),
            },
            "failures": [
                {"item_path": f.item_path, "source": f.source, "error": f.error}
                for f in self.failures
            ],
        }

    def generate_report(self, path: Path) -> None:
        """Write the summary report to a JSON file."""
        write_file_atomic(path, json.dumps(self.to_dict(), indent=2) + "\n")

    def summary_line(self) -> str:
        """Return a one-line human summary."""
        line = f"Built documentation for {self.library} ({len(self.converted)} items)"
        if self.failures:
            line += f", {len(self.failures)} failed"
        return line
