"""Post-processing for the converted "all items" page."""

from docmd.md_codeblock import md_codeblock

LISTING_TITLE = "# List of all items"
MAX_USAGE_EXAMPLES = 3


def format_all_md(library_name: str, content: str) -> str:
    """Qualify the converted item listing and append usage hints.

    The page gets a ``# <library>`` title, the rustdoc listing title becomes a
    plain line and every ``- Item`` entry becomes ``- <library>::Item``. The
    first entry of each of the first three sections is used as a usage
    example.
    """
    parts = [f"# {library_name}", ""]
    lines = content.splitlines()
    if not lines:
        return "\n".join(parts)

    first, *rest = lines
    parts.append(first[2:] if first.startswith(LISTING_TITLE) else first)

    examples: list[str] = []
    in_section = False
    for line in rest:
        if line.startswith("### "):
            in_section = True
            parts.append(line)
        elif line.startswith("- "):
            qualified = f"{library_name}::{line[2:]}"
            parts.append(f"- {qualified}")
            if in_section:
                examples.append(qualified)
                in_section = False
        else:
            parts.append(line)

    while parts and not parts[-1].strip():
        parts.pop()

    usage = [f"cargo docmd show {item}" for item in examples[:MAX_USAGE_EXAMPLES]]
    if not usage:
        usage = [f"cargo docmd show {library_name}::SomeItem"]

    parts += [
        "",
        "## Usage",
        "",
        "To view documentation for a specific item, use the `show` command:",
        "",
        md_codeblock("cargo docmd show <ITEM_PATH>", "shell"),
        "",
        "Examples:",
        "",
        md_codeblock("\n".join(usage), "shell"),
    ]
    return "\n".join(parts) + "\n"
