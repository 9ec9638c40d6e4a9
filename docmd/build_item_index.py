"""Build the item path index from rustdoc's "all items" listing page."""

import logging
from pathlib import PurePosixPath

from bs4 import BeautifulSoup, Tag

from docmd.errors import ElementNotFound
from docmd.html_select import parse_html, select_all
from docmd.item_path import PATH_SEPARATOR

logger = logging.getLogger(__name__)

ITEM_LINK_SELECTOR = "ul.all-items li a"
MARKDOWN_SUFFIX = ".md"


def extract_item_mappings(listing_html: str | BeautifulSoup | Tag) -> dict[str, str]:
    """Map each listed item's short name to its page fragment.

    The short name is the anchor's visible text, which may still be module
    qualified (``de::value::Error``). Raises ElementNotFound when the listing
    holds no entries or an entry has no ``href``.
    """
    document = parse_html(listing_html)
    mappings: dict[str, str] = {}
    for anchor in select_all(document, ITEM_LINK_SELECTOR):
        href = anchor.get("href")
        text = anchor.get_text().strip()
        if not href:
            raise ElementNotFound(
                f"{ITEM_LINK_SELECTOR}[href]", text, "item link has no href attribute"
            )
        if text in mappings and mappings[text] != href:
            logger.warning("Duplicate listing entry %s: %s and %s", text, mappings[text], href)
        mappings[text] = href

    if not mappings:
        raise ElementNotFound(
            ITEM_LINK_SELECTOR,
            document.get_text(" ", strip=True),
            "failed to find item mappings in documentation, no items found",
        )
    logger.debug("Extracted %d item mappings", len(mappings))
    return mappings


def build_item_index(
    listing_html: str | BeautifulSoup | Tag, library_prefix: str
) -> dict[str, str]:
    """Map every fully qualified item path to its page fragment."""
    return {
        f"{library_prefix}{PATH_SEPARATOR}{name}": href
        for name, href in extract_item_mappings(listing_html).items()
    }


def markdown_path_for(fragment: str) -> str:
    """Swap a page fragment's extension for the Markdown one."""
    return str(PurePosixPath(fragment).with_suffix(MARKDOWN_SUFFIX))


def fragment_kind(fragment: str) -> str:
    """Return the item kind encoded in a fragment name (``struct.Error.html``)."""
    name = PurePosixPath(fragment).name
    kind, _, rest = name.partition(".")
    return kind if rest else ""
