"""Tests for the shared Markdown helpers."""

from docmd.item_filename import generate_filename
from docmd.md_codeblock import md_codeblock
from docmd.md_sections import render_header, render_inline_code, render_next_actions
from docmd.md_table import md_table
from docmd.render_documentation import render_documentation, summary


def test_generate_filename() -> None:
    """Verify separators become hyphens and generics are dropped."""
    assert generate_filename("std::vec::Vec") == "std-vec-Vec.md"
    assert generate_filename("std::collections::HashMap<K, V>") == "std-collections-HashMap.md"
    assert generate_filename("serde::Serialize::serialize") == "serde-Serialize-serialize.md"
    assert generate_filename("MyStruct") == "MyStruct.md"
    assert generate_filename("<>") == "Unknown.md"


def test_md_codeblock() -> None:
    """Verify fences with and without a language."""
    assert md_codeblock("let x = 42;\n", "rust") == "```rust\nlet x = 42;\n```"
    assert md_codeblock("text") == "```\ntext\n```"


def test_md_table() -> None:
    """Verify table layout and the empty case."""
    assert md_table(["A"], [["1"]]) == "| A |\n| --- |\n| 1 |"
    assert md_table(["A"], []) == ""
    assert md_table(["A"], [], allow_empty=True) == "| A |\n| --- |"


def test_headers_and_inline_code() -> None:
    """Verify heading and inline code helpers."""
    assert render_header(2, "Section") == "## Section"
    assert render_inline_code("Vec<T>") == "`Vec<T>`"
    assert render_inline_code("a`b") == "`` a`b ``"


def test_next_actions() -> None:
    """Verify the section layout and the empty case."""
    assert render_next_actions(["a", "b"]) == ["## Next Actions", "", "- a", "- b"]
    assert render_next_actions([]) == []


def test_render_documentation_strips_comment_markers() -> None:
    """Verify leftover comment markers are removed."""
    assert render_documentation("/// This is documentation.\n/// Second line.") == (
        "This is documentation.\nSecond line."
    )
    assert render_documentation("// Single\n// Another") == "Single\nAnother"
    assert render_documentation(None) == ""


def test_render_documentation_keeps_code_indentation() -> None:
    """Verify indentation of unmarked lines survives."""
    assert render_documentation("Example:\n\n    let x = 1;") == "Example:\n\n    let x = 1;"


def test_summary() -> None:
    """Verify the one-line summary of documentation."""
    docs = "First part\ncontinues here.\n\nSecond paragraph."
    assert summary(docs) == "First part continues here."
    assert summary("") == ""
