"""Logic for loading and merging configuration files."""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from docmd.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "docmd.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "dir_name": "docmd",
        "metadata_file": "metadata.json",
        "report_file": "build-report.json",
    },
    "build": {
        "format": "html",
        "fail_fast": False,
    },
    "skip": {
        "tags": [],
        "ids": [],
        "class_substrings": [],
    },
}

# Only these sections change the generated Markdown.
RENDERING_SECTIONS = ("build", "skip")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit path, ``docmd.yml`` in the working directory is used
    when present.
    """
    config = DEFAULT_CONFIG.copy()
    candidate = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    if candidate.exists():
        logger.debug("Loading configuration from %s", candidate)
        user_config = yaml.safe_load(candidate.read_text(encoding="utf-8")) or {}
        config = deep_merge(config, user_config)
    elif path:
        logger.warning("Configuration file %s not found, using defaults", path)
    return config


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the rendering-relevant configuration.

    Uses canonical JSON serialization (sorted keys) so that key order in the
    YAML file does not matter.
    """
    relevant = {k: config.get(k) for k in RENDERING_SECTIONS}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
