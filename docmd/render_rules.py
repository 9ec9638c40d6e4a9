"""Central table mapping HTML tag names to their Markdown rendering."""

from dataclasses import dataclass
from enum import Enum


class Whitespace(Enum):
    """How text inside an element is treated."""

    INLINE = "inline"  # children emitted as produced
    NORMALIZE = "normalize"  # runs of whitespace collapse to one space
    VERBATIM = "verbatim"  # code: every text node kept, no link rewriting


class Block(Enum):
    """Elements whose children need structural handling."""

    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    DEFINITION_LIST = "dl"
    QUOTE = "blockquote"
    TABLE = "table"
    CODE = "code"


@dataclass(frozen=True)
class RenderRule:
    """Prefix/suffix wrapping and whitespace handling for one tag."""

    prefix: str = ""
    suffix: str = ""
    whitespace: Whitespace = Whitespace.INLINE
    skip_children: bool = False
    block: Block | None = None


def _heading(level: int) -> RenderRule:
    return RenderRule("#" * level + " ", "\n\n", Whitespace.NORMALIZE)


RENDER_RULES: dict[str, RenderRule] = {
    **{f"h{n}": _heading(n) for n in range(1, 7)},
    "p": RenderRule(suffix="\n\n", whitespace=Whitespace.NORMALIZE),
    "li": RenderRule(whitespace=Whitespace.NORMALIZE),
    "dt": RenderRule("- **", "**", Whitespace.NORMALIZE),
    "dd": RenderRule(": ", "\n", Whitespace.NORMALIZE),
    "strong": RenderRule("**", "**"),
    "b": RenderRule("**", "**"),
    "em": RenderRule("_", "_"),
    "i": RenderRule("_", "_"),
    "br": RenderRule("\n\n", skip_children=True),
    "hr": RenderRule("---\n\n", skip_children=True),
    "pre": RenderRule("```\n", "\n```\n\n", Whitespace.VERBATIM),
    "code": RenderRule("`", "`", Whitespace.VERBATIM, block=Block.CODE),
    "ul": RenderRule(block=Block.UNORDERED_LIST),
    "ol": RenderRule(block=Block.ORDERED_LIST),
    "dl": RenderRule(block=Block.DEFINITION_LIST),
    "blockquote": RenderRule(block=Block.QUOTE),
    "table": RenderRule(block=Block.TABLE),
}

# Anchors, spans and structural containers fall through to this rule: the
# children are rendered and the element itself adds nothing, so a link keeps
# its visible text and loses its target.
PASSTHROUGH = RenderRule()


def rule_for(tag_name: str) -> RenderRule:
    """Look up the rendering rule for a tag name."""
    return RENDER_RULES.get(tag_name, PASSTHROUGH)
