"""Render the Generic Parameters section of an item page."""

from typing import Any

from docmd.render_type import lifetime

GENERIC_KINDS = ("lifetime", "type", "const")


def generic_kind(param: dict[str, Any]) -> str:
    """Return ``lifetime``, ``type`` or ``const`` for a parameter definition."""
    kind = param.get("kind") or {}
    for name in GENERIC_KINDS:
        if name in kind:
            return name
    return "type"


def render_generic_param_lines(generics: dict[str, Any] | None) -> list[str]:
    """Render one ``- `T`: type`` line per declared parameter."""
    lines = []
    for param in (generics or {}).get("params") or []:
        kind = generic_kind(param)
        if kind == "type" and (param["kind"].get("type") or {}).get("is_synthetic"):
            continue
        name = lifetime(param["name"]) if kind == "lifetime" else param["name"]
        lines.append(f"- `{name}`: {kind}")
    return lines
