"""List flattening: nested list tokens to indented marker blocks."""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from notedoc.formatting.inline import InlineFormatter
from notedoc.formatting.ir import Block
from notedoc.formatting.tokens import (
    ListItemToken,
    ListToken,
    ParagraphToken,
    Token,
    WhitespaceToken,
    token_text,
)

logger = logging.getLogger(__name__)

BULLET_MARKER = "• "
LIST_ITEM_SPACING_AFTER = 40

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class ListContext:
    """Nesting state for one list subtree.

    Attributes:
        ordered: Whether the enclosing list is ordered
        indent: 0 for top-level content, +1 per list level
    """

    ordered: bool = False
    indent: int = 0

    def nested(self, ordered: bool) -> "ListContext":
        """Context for the items of a list opened inside this one."""
        return ListContext(ordered=ordered, indent=self.indent + 1)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def dedupe_item_children(item: ListItemToken) -> list[Token]:
    """Drop the child tokens that only repeat the item's own text.

    The tokenizer copies an item's flattened text into its first nested
    token. Removed:
    - the first child, when its text matches the item text
    - any paragraph child whose text matches the item text
    - every whitespace child
    """
    item_text = normalize_text(item.text)
    kept: list[Token] = []

    for index, child in enumerate(item.children):
        if isinstance(child, WhitespaceToken):
            continue

        child_text = token_text(child)
        if child_text and normalize_text(child_text) == item_text:
            if index == 0 or isinstance(child, ParagraphToken):
                logger.debug("Dropping duplicated list item text: %r", item_text)
                continue

        kept.append(child)

    return kept


def list_marker(token: ListToken, item: ListItemToken, position: int) -> str:
    """Get the marker text for an item at 1-based ``position``.

    Ordered items use their declared ``start`` as authored when present.
    """
    if not token.ordered:
        return BULLET_MARKER
    number = item.start if item.start is not None else position
    return f"{number}. "


Walker = Callable[[Sequence[Token], ListContext, list[Block]], None]


class ListFlattener:
    """Flatten a list token into marker blocks plus nested content.

    Nested content is handed back to ``walk`` (the block dispatcher) so that
    lists inside items, code and paragraphs all go through the same path.
    """

    def __init__(self, formatter: InlineFormatter, walk: Walker) -> None:
        self.formatter = formatter
        self.walk = walk

    def flatten(
        self, token: ListToken, context: ListContext, out: list[Block]
    ) -> None:
        """Append the blocks for ``token`` to ``out``."""
        item_context = context.nested(token.ordered)

        for position, item in enumerate(token.items, start=1):
            marker = self.formatter.base_run(list_marker(token, item, position))
            out.append(
                Block(
                    runs=[marker, *self.formatter.format(item.text)],
                    indent_level=item_context.indent,
                    spacing_after=LIST_ITEM_SPACING_AFTER,
                )
            )

            children = dedupe_item_children(item)
            if children:
                self.walk(children, item_context, out)
