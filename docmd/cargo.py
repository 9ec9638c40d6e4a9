"""Run cargo to query project metadata and generate documentation."""

import json
import logging
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docmd.errors import CargoExecutionFailed, DependencyNotFound, DocNotGenerated, preview
from docmd.library_identity import LibraryIdentity

logger = logging.getLogger(__name__)

CARGO = "cargo"
OUTPUT_PREVIEW_LIMIT = 500
GENERATED_RE = re.compile(r"^Generated\s+(.+?\.html)\b")


@dataclass
class CargoMetadata:
    """The parts of ``cargo metadata`` output docmd needs."""

    target_directory: Path
    dependencies: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "CargoMetadata":
        """Collect declared dependencies across the workspace packages."""
        deps: list[str] = []
        for package in data.get("packages") or []:
            for dep in package.get("dependencies") or []:
                if dep["name"] not in deps:
                    deps.append(dep["name"])
        return cls(target_directory=Path(data["target_directory"]), dependencies=deps)


def run_cargo(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run a cargo command, raising CargoExecutionFailed on failure."""
    cmd = [CARGO, *args]
    cmd_str = " ".join(cmd)
    logger.debug("Executing: %s", cmd_str)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=cwd)
    except OSError as e:
        raise CargoExecutionFailed(cmd_str, str(e)) from e
    logger.debug("Exit code: %s", result.returncode)
    if result.returncode != 0:
        raise CargoExecutionFailed(cmd_str, result.stderr)
    return result


def metadata(cwd: Path | None = None) -> CargoMetadata:
    """Query the workspace target directory and declared dependencies."""
    result = run_cargo(["metadata", "--no-deps", "--format-version", "1"], cwd)
    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise CargoExecutionFailed("cargo metadata", f"failed to parse cargo metadata JSON: {e}") from e
    meta = CargoMetadata.from_json(data)
    logger.debug("Target directory: %s", meta.target_directory)
    return meta


def validate_dependency(name: str, meta: CargoMetadata) -> LibraryIdentity:
    """Return the identity of ``name`` if it is a declared dependency.

    Either spelling of the name is accepted; the declared spelling from
    Cargo.toml is kept for messages.
    """
    requested = LibraryIdentity.from_name(name)
    for dep in meta.dependencies:
        if requested.matches(dep):
            return LibraryIdentity.from_name(dep)
    raise DependencyNotFound(name, meta.dependencies)


def doc(name: str, cwd: Path | None = None) -> Path:
    """Run ``cargo doc`` for one package and return its HTML output directory."""
    logger.info("Running cargo doc --package %s --no-deps", name)
    result = run_cargo(["doc", "--package", name, "--no-deps"], cwd)
    # cargo reports progress on stderr.
    return doc_output_dir(result.stderr)


def doc_output_dir(output: str) -> Path:
    """Parse the ``Generated <dir>/index.html`` line of ``cargo doc`` output."""
    for line in output.splitlines():
        match = GENERATED_RE.match(line.strip())
        if match:
            return Path(match.group(1)).parent
    raise CargoExecutionFailed(
        "cargo doc",
        "failed to parse cargo doc output - could not find 'Generated' line. "
        f"Output preview:\n{preview(output, OUTPUT_PREVIEW_LIMIT)}",
    )


def rustdoc_json(identity: LibraryIdentity, meta: CargoMetadata, cwd: Path | None = None) -> Path:
    """Generate the rustdoc JSON dump of one package with the nightly toolchain."""
    logger.info("Running cargo +nightly rustdoc for %s", identity.declared_name)
    run_cargo(
        [
            "+nightly",
            "rustdoc",
            "--package",
            identity.declared_name,
            "--lib",
            "--",
            "-Z",
            "unstable-options",
            "--output-format",
            "json",
        ],
        cwd,
    )
    json_path = meta.target_directory / "doc" / f"{identity.canonical_name}.json"
    if not json_path.exists():
        raise DocNotGenerated(identity.declared_name, json_path)
    return json_path
