"""Convert one rustdoc HTML page into Markdown.

Only the ``<main>`` element is rendered. Navigation chrome inside it is
dropped through :mod:`docmd.skip_rules`, and every other element is rendered
through the tag table in :mod:`docmd.render_rules`. Elements without an entry
are flattened: their children are rendered and no markup is added, so text is
never silently lost.
"""

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from docmd.html_select import parse_html, select_first
from docmd.md_table import md_table
from docmd.render_rules import Block, Whitespace, rule_for
from docmd.skip_rules import DEFAULT_SKIP_RULES, SkipRules
from docmd.strip_reference_links import strip_reference_links

logger = logging.getLogger(__name__)

CONTENT_ROOT = "main"
NBSP_ENTITY = "&nbsp;"


def convert_html(
    html: str | BeautifulSoup | Tag,
    skip_rules: SkipRules = DEFAULT_SKIP_RULES,
) -> str:
    """Convert a rustdoc page to Markdown.

    Raises ElementNotFound when the document has no ``<main>`` element, which
    usually means the HTML was not produced by rustdoc.
    """
    document = parse_html(html)
    root = select_first(
        document,
        CONTENT_ROOT,
        "HTML document does not contain a <main> element. "
        "This may indicate invalid rustdoc HTML output.",
    )
    return HtmlToMarkdown(skip_rules).render_children(root)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return " ".join(text.split())


class HtmlToMarkdown:
    """Recursive depth-first renderer over a BeautifulSoup tree."""

    def __init__(self, skip_rules: SkipRules = DEFAULT_SKIP_RULES) -> None:
        """Initialize the renderer with the skip predicate table."""
        self.skip_rules = skip_rules

    def render_node(self, node: Tag, *, verbatim: bool = False, inline: bool = False) -> str:
        """Render a single element, including its wrapping markup.

        ``inline`` marks content that ends up on one normalized line, where
        whitespace between elements is a word separator.
        """
        if self.skip_rules.should_skip(node):
            logger.debug("Skipping <%s> %s", node.name, node.attrs)
            return ""

        rule = rule_for(node.name)
        if rule.skip_children:
            return rule.prefix + rule.suffix

        if rule.block is Block.CODE:
            return self._render_code(node)
        if rule.block in (Block.UNORDERED_LIST, Block.ORDERED_LIST):
            return self._render_list(node, ordered=rule.block is Block.ORDERED_LIST)
        if rule.block is Block.DEFINITION_LIST:
            return self._render_definition_list(node)
        if rule.block is Block.QUOTE:
            return self._render_quote(node)
        if rule.block is Block.TABLE:
            return self._render_table(node)

        inner_verbatim = verbatim or rule.whitespace is Whitespace.VERBATIM
        inner_inline = inline or rule.whitespace is Whitespace.NORMALIZE
        inner = self.render_children(node, verbatim=inner_verbatim, inline=inner_inline)
        if rule.whitespace is Whitespace.NORMALIZE:
            inner = normalize_whitespace(inner)
        return rule.prefix + inner + rule.suffix

    def render_children(
        self, node: Tag, *, verbatim: bool = False, inline: bool = False
    ) -> str:
        """Render every child of ``node`` and concatenate the results."""
        parts: list[str] = []
        for child in node.children:
            if isinstance(child, Tag):
                parts.append(self.render_node(child, verbatim=verbatim, inline=inline))
            elif isinstance(child, NavigableString) and not isinstance(
                child, PreformattedString
            ):
                parts.append(self._render_text(str(child), verbatim=verbatim, inline=inline))
        return "".join(parts)

    def render_normalized(self, node: Tag) -> str:
        """Render the children of ``node`` on one whitespace-normalized line."""
        return normalize_whitespace(self.render_children(node, inline=True))

    def _render_text(self, text: str, *, verbatim: bool, inline: bool) -> str:
        text = text.replace("\xa0", " ").replace(NBSP_ENTITY, " ")
        if verbatim:
            return text
        if not text.strip():
            # Indentation between blocks is dropped. Inside a normalized line
            # any whitespace run separates words.
            if not text or ("\n" in text and not inline):
                return ""
            return " "
        return strip_reference_links(text)

    def _render_code(self, node: Tag) -> str:
        inner = self.render_children(node, verbatim=True)
        parent = node.parent
        if isinstance(parent, Tag) and parent.name == "pre":
            return inner
        return f"`{inner}`"

    def _render_list(self, node: Tag, *, ordered: bool) -> str:
        lines: list[str] = []
        count = 0
        for child in node.children:
            if isinstance(child, Tag) and child.name == "li":
                if self.skip_rules.should_skip(child):
                    continue
                count += 1
                marker = f"{count}." if ordered else "-"
                lines.append(f"{marker} {self.render_normalized(child)}")
            elif isinstance(child, Tag):
                # Stray content between items stays as its own line.
                text = normalize_whitespace(self.render_node(child))
                if text:
                    lines.append(text)
            elif isinstance(child, NavigableString) and not isinstance(
                child, PreformattedString
            ):
                text = normalize_whitespace(
                    self._render_text(str(child), verbatim=False, inline=True)
                )
                if text:
                    lines.append(text)
        if not lines:
            return ""
        return "\n".join(lines) + "\n\n"

    def _render_definition_list(self, node: Tag) -> str:
        entries: list[tuple[str | None, list[str]]] = []
        for child in node.find_all(("dt", "dd"), recursive=False):
            if self.skip_rules.should_skip(child):
                continue
            if child.name == "dt":
                entries.append((self.render_normalized(child), []))
            elif entries:
                entries[-1][1].append(self.render_normalized(child))
            else:
                entries.append((None, [self.render_normalized(child)]))

        lines = []
        for term, descriptions in entries:
            description = " ".join(d for d in descriptions if d)
            if term is None:
                if description:
                    lines.append(f"- {description}")
                continue
            line = f"- **{term}**"
            if description:
                line += f": {description}"
            lines.append(line)
        if not lines:
            return ""
        return "\n".join(lines) + "\n\n"

    def _render_quote(self, node: Tag) -> str:
        inner = self.render_children(node).strip()
        if not inner:
            return ""
        lines = [normalize_whitespace(line) for line in inner.splitlines()]
        quoted = "\n".join(f"> {line}" if line else ">" for line in lines)
        return quoted + "\n\n"

    def _render_table(self, node: Tag) -> str:
        rows: list[list[str]] = []
        for tr in node.find_all("tr"):
            cells = [
                self.render_normalized(cell).replace("|", "\\|")
                for cell in tr.find_all(("th", "td"), recursive=False)
            ]
            if cells:
                rows.append(cells)
        if not rows:
            return ""
        width = max(len(r) for r in rows)
        padded = [r + [""] * (width - len(r)) for r in rows]
        return md_table(padded[0], padded[1:], allow_empty=True) + "\n\n"
