"""Normalize item documentation text before it is placed on a page."""


def render_documentation(docs: str | None) -> str:
    """Strip leftover ``///`` and ``//`` comment markers from documentation.

    Lines without a marker keep their indentation so that indented code inside
    the documentation survives.
    """
    if not docs:
        return ""
    lines = []
    for line in docs.splitlines():
        stripped = line.strip()
        if stripped.startswith("///"):
            lines.append(stripped[3:].lstrip())
        elif stripped.startswith("//"):
            lines.append(stripped[2:].lstrip())
        else:
            lines.append(line.rstrip())
    return "\n".join(lines).strip("\n")


def summary(docs: str | None) -> str:
    """Return the first paragraph of the documentation on a single line."""
    lines = []
    for line in render_documentation(docs).splitlines():
        if not line.strip():
            if lines:
                break
            continue
        lines.append(line.strip())
    return " ".join(lines)
