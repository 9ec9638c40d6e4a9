"""Orchestration logic for building the Markdown corpus of one library."""

import logging
from pathlib import Path
from typing import Any

from docmd import cargo
from docmd.build_item_index import build_item_index, fragment_kind, markdown_path_for
from docmd.build_report import BuildReport
from docmd.crate_metadata import CrateDocMetadata
from docmd.errors import DocmdError, DocNotGenerated, HtmlParseFailed
from docmd.format_all_md import format_all_md
from docmd.html_to_markdown import convert_html
from docmd.item_filename import generate_filename
from docmd.library_identity import LibraryIdentity
from docmd.load_config import compute_config_hash
from docmd.path_resolver import ALL_ITEMS_FILE, INDEX_FILE
from docmd.render_index_page import FRAGMENT_KIND_LABELS, render_all_items, render_index_page, render_item_counts
from docmd.render_item_page import render_item
from docmd.skip_rules import DEFAULT_SKIP_RULES, SkipRules
from docmd.type_model import load_crate
from docmd.write_corpus import write_corpus

logger = logging.getLogger(__name__)


def output_root(meta: cargo.CargoMetadata, config: dict[str, Any]) -> Path:
    """Return the directory holding every generated corpus."""
    return meta.target_directory / config["output"]["dir_name"]


def build(library: str, config: dict[str, Any], cwd: Path | None = None) -> BuildReport:
    """Generate documentation for a dependency with cargo and convert it."""
    meta = cargo.metadata(cwd)
    identity = cargo.validate_dependency(library, meta)
    out_dir = output_root(meta, config) / identity.canonical_name

    if config["build"]["format"] == "json":
        json_path = cargo.rustdoc_json(identity, meta, cwd)
        return build_library_from_json(identity, json_path, out_dir, config)

    doc_dir = cargo.doc(identity.declared_name, cwd)
    logger.debug("Cargo doc output directory: %s", doc_dir)
    return build_library(identity, doc_dir, out_dir, config)


def convert_page(path: Path, skip_rules: SkipRules = DEFAULT_SKIP_RULES) -> str:
    """Read and convert one HTML page, attaching the page path to failures."""
    try:
        html = path.read_text(encoding="utf-8")
        return convert_html(html, skip_rules)
    except (DocmdError, OSError, UnicodeDecodeError) as e:
        raise HtmlParseFailed(path, e) from e


def summarize_fragments(fragments: list[str]) -> list[str]:
    """Render the Item Counts section from rustdoc page names."""
    counts: dict[str, int] = {}
    for fragment in fragments:
        kind = fragment_kind(fragment)
        label = FRAGMENT_KIND_LABELS.get(kind, kind.title() or "Other")
        counts[label] = counts.get(label, 0) + 1
    return render_item_counts(counts)


def build_library(
    identity: LibraryIdentity,
    doc_dir: Path,
    out_dir: Path,
    config: dict[str, Any],
) -> BuildReport:
    """Convert a rustdoc HTML tree into a Markdown corpus.

    A failing item page is recorded in the report and skipped, unless
    ``build.fail_fast`` is set. Failures reading ``index.html`` or
    ``all.html`` always abort the build.
    """
    skip_rules = DEFAULT_SKIP_RULES.extended(config["skip"])
    fail_fast = config["build"]["fail_fast"]
    config_hash = compute_config_hash(config)
    report = BuildReport(identity.declared_name, config_hash)
    library = identity.canonical_name

    index_html = doc_dir / "index.html"
    all_html = doc_dir / "all.html"
    for required in (index_html, all_html):
        if not required.exists():
            raise DocNotGenerated(identity.declared_name, required)

    logger.info("Reading cargo doc output from %s", doc_dir)
    item_index = build_item_index(all_html.read_text(encoding="utf-8"), library)
    logger.info("Found %d items in %s", len(item_index), all_html)

    files: dict[str, str] = {}
    overview = convert_page(index_html, skip_rules).rstrip()
    counts = "\n".join(summarize_fragments(list(item_index.values()))).rstrip()
    files[INDEX_FILE] = f"{overview}\n\n{counts}\n"
    files[ALL_ITEMS_FILE] = format_all_md(library, convert_page(all_html, skip_rules))

    item_map: dict[str, str] = {}
    for full_path, fragment in sorted(item_index.items()):
        logger.debug("Converting item: %s", full_path)
        try:
            markdown = convert_page(doc_dir / fragment, skip_rules)
        except HtmlParseFailed as e:
            if fail_fast:
                raise
            logger.warning("Skipping %s: %s", full_path, e)
            report.add_failure(full_path, fragment, e)
            continue
        md_path = markdown_path_for(fragment)
        files[md_path] = markdown
        item_map[full_path] = md_path
        report.add_converted(full_path)

    _save(identity, out_dir, files, item_map, "html", config, report)
    return report


def build_library_from_json(
    identity: LibraryIdentity,
    json_path: Path,
    out_dir: Path,
    config: dict[str, Any],
) -> BuildReport:
    """Render a rustdoc JSON dump into a Markdown corpus."""
    fail_fast = config["build"]["fail_fast"]
    report = BuildReport(identity.declared_name, compute_config_hash(config))
    library = identity.canonical_name

    crate = load_crate(json_path)
    files = {
        INDEX_FILE: render_index_page(crate),
        ALL_ITEMS_FILE: format_all_md(library, render_all_items(crate)),
    }

    item_map: dict[str, str] = {}
    for item in crate.public_items():
        segments = crate.qualified_name(item).split("::")
        full_path = "::".join([library, *segments[1:]])
        try:
            markdown = render_item(item, crate)
        except (DocmdError, KeyError, TypeError) as e:
            if fail_fast:
                raise
            logger.warning("Skipping %s: %s", full_path, e)
            report.add_failure(full_path, item.id, e)
            continue
        md_path = generate_filename(full_path)
        files[md_path] = markdown
        item_map[full_path] = md_path
        report.add_converted(full_path)

    _save(identity, out_dir, files, item_map, "json", config, report)
    return report


def _save(
    identity: LibraryIdentity,
    out_dir: Path,
    files: dict[str, str],
    item_map: dict[str, str],
    fmt: str,
    config: dict[str, Any],
    report: BuildReport,
) -> None:
    """Write the corpus, the metadata sidecar and, on failures, the build report."""
    output = config["output"]
    written = write_corpus(out_dir, files)
    CrateDocMetadata(
        declared_name=identity.declared_name,
        canonical_name=identity.canonical_name,
        item_map=item_map,
        format=fmt,
        config_hash=report.config_hash,
    ).save(out_dir / output["metadata_file"])
    logger.info("Wrote %d files to %s", written, out_dir)

    report_path = out_dir / output["report_file"]
    if report.failures:
        report.generate_report(report_path)
        logger.warning("%d items failed, see %s", len(report.failures), report_path)
    elif report_path.exists():
        report_path.unlink()
