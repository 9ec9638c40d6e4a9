"""Parsing and CSS selection helpers over BeautifulSoup documents."""

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from docmd.errors import ElementNotFound, SelectorParseFailed

PARSER = "lxml"


def parse_html(html: str | BeautifulSoup | Tag) -> BeautifulSoup | Tag:
    """Parse raw markup, passing already-parsed trees through unchanged."""
    if isinstance(html, (BeautifulSoup, Tag)):
        return html
    return BeautifulSoup(html, PARSER)


def select_all(node: BeautifulSoup | Tag, selector: str) -> list[Tag]:
    """Select every element matching ``selector``."""
    try:
        return list(node.select(selector))
    except SelectorSyntaxError as e:
        raise SelectorParseFailed(selector, str(e)) from e


def select_first(node: BeautifulSoup | Tag, selector: str, detail: str = "") -> Tag:
    """Select the first element matching ``selector`` or raise ElementNotFound."""
    try:
        found = node.select_one(selector)
    except SelectorSyntaxError as e:
        raise SelectorParseFailed(selector, str(e)) from e
    if found is None:
        raise ElementNotFound(selector, node.get_text(" ", strip=True), detail)
    return found
