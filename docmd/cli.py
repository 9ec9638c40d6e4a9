"""Command line entry point for cargo-docmd."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from docmd.build_docs import build
from docmd.errors import DocmdError
from docmd.list_items import list_items
from docmd.load_config import load_config
from docmd.show_item import show

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """Map ``-v``/``-vv`` to INFO/DEBUG; the default level is WARNING."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:  # noqa: PLR2004
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the build, show and list sub-commands."""
    ap = argparse.ArgumentParser(
        prog="cargo-docmd",
        description="Convert rustdoc output of Cargo dependencies into Markdown for coding agents.",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file (default: docmd.yml when present)",
    )
    ap.add_argument(
        "--manifest-dir",
        type=Path,
        default=None,
        help="Directory of the Cargo project (default: current directory)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    build_cmd = sub.add_parser("build", help="Generate Markdown documentation for a dependency")
    build_cmd.add_argument("library", help="Dependency name as declared in Cargo.toml")
    build_cmd.add_argument(
        "--format",
        choices=("html", "json"),
        help="Convert rustdoc HTML (default) or render the nightly rustdoc JSON",
    )
    build_cmd.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort the build on the first item that fails to convert",
    )

    show_cmd = sub.add_parser("show", help="Print the documentation of an item")
    show_cmd.add_argument("item_path", help="Item path, e.g. serde or serde::Deserialize")

    list_cmd = sub.add_parser("list", help="Print every documented item of a dependency")
    list_cmd.add_argument("library", help="Dependency name")
    return ap


def _apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """Fold command line flags into the loaded configuration."""
    if getattr(args, "format", None):
        config["build"] = {**config["build"], "format": args.format}
    if getattr(args, "fail_fast", False):
        config["build"] = {**config["build"], "fail_fast": True}
    return config


def run(args: argparse.Namespace) -> int:
    """Dispatch a parsed command line."""
    config = _apply_overrides(load_config(args.config), args)
    cwd = args.manifest_dir

    if args.command == "build":
        report = build(args.library, config, cwd)
        print(report.summary_line())
        print(f"  Run `cargo docmd list {args.library}` to see all items")
        return 0 if report.ok else 1
    if args.command == "show":
        print(show(args.item_path, config, cwd))
        return 0
    if args.command == "list":
        print(list_items(args.library, config, cwd))
        return 0
    return 2


def main(argv: list[str] | None = None) -> int:
    """Run cargo-docmd."""
    argv = list(sys.argv[1:] if argv is None else argv)
    # Invoked as `cargo docmd ...`, cargo passes the sub-command name first.
    if argv and argv[0] == "docmd":
        argv = argv[1:]
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except DocmdError as e:
        logger.debug("Command failed", exc_info=True)
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
