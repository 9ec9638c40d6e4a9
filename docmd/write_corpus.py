"""Logic for writing generated files to disk."""

import logging
import os
import tempfile
from pathlib import Path

from docmd.errors import FileWriteFailed

logger = logging.getLogger(__name__)


def write_file_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` in full or not at all.

    The text goes to a temporary file in the destination directory first and
    is then renamed over the target, creating parent directories as needed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise FileWriteFailed(path, str(e)) from e
    logger.debug("Wrote %s", path)


def write_corpus(out_dir: Path, files: dict[str, str]) -> int:
    """Write every ``relative path -> content`` entry below ``out_dir``."""
    written = 0
    for relative_path, content in sorted(files.items()):
        write_file_atomic(out_dir / relative_path, content)
        written += 1
        if written % 200 == 0:
            logger.info("  ... wrote %d/%d files", written, len(files))
    return written
