"""Utility for generating Markdown code blocks."""


def md_codeblock(code: str, lang: str | None = None) -> str:
    """Generate a fenced Markdown code block, optionally tagged with a language."""
    return f"""```{lang or ""}
{code.rstrip()}
```"""
