"""Small Markdown building blocks shared by the item renderers."""

ITEM_HEADER_LEVEL = 1
SECTION_HEADER_LEVEL = 2


def render_header(level: int, text: str) -> str:
    """Render a Markdown ATX heading."""
    return f"{'#' * level} {text}"


def render_inline_code(text: str) -> str:
    """Wrap ``text`` in backticks, widening the fence when it contains one."""
    if "`" not in text:
        return f"`{text}`"
    return f"`` {text} ``"


def render_next_actions(actions: list[str]) -> list[str]:
    """Render the trailing "Next Actions" section as page lines."""
    if not actions:
        return []
    parts = [render_header(SECTION_HEADER_LEVEL, "Next Actions"), ""]
    parts.extend(f"- {action}" for action in actions)
    return parts
