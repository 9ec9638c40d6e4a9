"""Utility for generating Markdown tables."""


def md_table(headers: list[str], rows: list[list[str]], *, allow_empty: bool = False) -> str:
    """Generate a Markdown table.

    Without rows the table is omitted entirely unless ``allow_empty`` is set,
    in which case only the header and separator lines are emitted.
    """
    if not rows and not allow_empty:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(r) + " |" for r in rows)
    return "\n".join(out)
