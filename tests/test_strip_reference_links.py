"""Tests for reference-link stripping."""

from docmd.strip_reference_links import strip_reference_links


def test_reference_link_becomes_label() -> None:
    """Verify [text][ref] reduces to text."""
    assert strip_reference_links("[foo][bar]") == "foo"


def test_lone_brackets_are_kept() -> None:
    """Verify a bracket group with no reference stays unchanged."""
    assert strip_reference_links("[foo]") == "[foo]"
    assert strip_reference_links("see [foo] and more") == "see [foo] and more"


def test_nested_brackets_in_label() -> None:
    """Verify nesting depth is tracked inside the label."""
    assert strip_reference_links("[a [b] c][ref]") == "a [b] c"


def test_multiple_links() -> None:
    """Verify every reference link in a sentence is rewritten."""
    text = "Derive [tutorial][_derive::_tutorial] and [reference][_derive]"
    assert strip_reference_links(text) == "Derive tutorial and reference"


def test_unclosed_groups_are_kept() -> None:
    """Verify unbalanced brackets are left as written."""
    assert strip_reference_links("[foo") == "[foo"
    assert strip_reference_links("[foo][") == "[foo]["


def test_text_without_brackets() -> None:
    """Verify plain text passes through."""
    assert strip_reference_links("plain text") == "plain text"
