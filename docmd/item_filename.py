"""Utility for turning item paths into stable Markdown filenames."""

import re

# Keep letters, digits, underscore and dash.
FILENAME_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def generate_filename(item_path: str) -> str:
    """Make a deterministic filename for an item path.

    Generic parameters are dropped and path separators become hyphens, so
    ``std::collections::HashMap<K, V>`` maps to ``std-collections-HashMap.md``.
    """
    base = item_path.split("<", 1)[0]
    base = base.replace("::", "-")
    base = FILENAME_SAFE_RE.sub("-", base).strip("-")
    # Avoid pathological emptiness
    return f"{base or 'Unknown'}.md"
