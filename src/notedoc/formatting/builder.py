"""Document builder: Markdown tokens to an ordered list of styled blocks."""

import logging
from typing import Iterable, Optional, Sequence

from notedoc.formatting.inline import InlineFormatter
from notedoc.formatting.ir import (
    DEFAULT_THEME,
    Alignment,
    Block,
    BlockKind,
    Run,
    Theme,
)
from notedoc.formatting.lists import ListContext, ListFlattener
from notedoc.formatting.tokens import (
    BlockquoteToken,
    CodespanToken,
    CodeToken,
    EmToken,
    HeadingToken,
    ListItemToken,
    ListToken,
    OtherToken,
    ParagraphToken,
    RawMarkupToken,
    RuleToken,
    StrongToken,
    TableToken,
    TextToken,
    Token,
    WhitespaceToken,
)

logger = logging.getLogger(__name__)

# Spacing in twips
HEADING_SPACING_BEFORE = 160
HEADING_SPACING_AFTER = 120
PARAGRAPH_SPACING_AFTER = 160
RULE_SPACING = 160
TABLE_ROW_SPACING_AFTER = 40

RULE_TEXT = "―" * 30
TABLE_CELL_SEPARATOR = "    "


class DocumentBuilder:
    """Walk a token tree depth-first and emit styled blocks.

    The builder keeps no per-document state: every call to :meth:`build`
    gets its own output list, so one builder can serve many documents.
    """

    def __init__(self, theme: Optional[Theme] = None) -> None:
        self.theme = theme or DEFAULT_THEME
        self.formatter = InlineFormatter(self.theme)
        self.lists = ListFlattener(self.formatter, self.walk)

    def build(self, tokens: Optional[Iterable[Token]]) -> list[Block]:
        """Convert tokens to blocks in document order.

        Args:
            tokens: Top-level tokens; None or empty gives no blocks

        Returns:
            The ordered block sequence
        """
        blocks: list[Block] = []
        if tokens:
            self.walk(list(tokens), ListContext(), blocks)
        return blocks

    def walk(
        self, tokens: Sequence[Token], context: ListContext, out: list[Block]
    ) -> None:
        """Dispatch each token by kind, appending blocks to ``out``."""
        for token in tokens:
            if isinstance(token, WhitespaceToken):
                continue
            elif isinstance(token, HeadingToken):
                out.append(self._heading(token))
            elif isinstance(token, ParagraphToken):
                out.append(self._paragraph(token.text))
            elif isinstance(token, BlockquoteToken):
                # No visual indent for quotes, the children render as-is
                self.walk(token.children, context, out)
            elif isinstance(token, ListToken):
                self.lists.flatten(token, context, out)
            elif isinstance(token, CodeToken):
                out.append(
                    Block(
                        runs=[self._code_run(token.text)],
                        spacing_after=PARAGRAPH_SPACING_AFTER,
                    )
                )
            elif isinstance(token, CodespanToken):
                out.append(Block(runs=[self._code_run(token.text)]))
            elif isinstance(token, RuleToken):
                out.append(self._rule())
            elif isinstance(token, StrongToken):
                out.append(Block(runs=[self.formatter.base_run(token.text, bold=True)]))
            elif isinstance(token, EmToken):
                out.append(Block(runs=[self.formatter.base_run(token.text, italic=True)]))
            elif isinstance(token, TableToken):
                out.extend(self._table_rows(token))
            elif isinstance(token, RawMarkupToken):
                logger.debug("Skipping raw markup: %r", token.text[:40])
            elif isinstance(token, (TextToken, ListItemToken, OtherToken)):
                if token.text:
                    out.append(self._paragraph(token.text))
                else:
                    logger.debug("Skipping empty %s token", token.kind.value)
            else:
                raise TypeError(f"Unsupported token: {token!r}")

    def _heading(self, token: HeadingToken) -> Block:
        return Block(
            runs=[
                self.formatter.base_run(
                    token.text,
                    bold=True,
                    size=self.theme.heading_size(token.depth),
                )
            ],
            kind=BlockKind.heading(token.depth),
            spacing_before=HEADING_SPACING_BEFORE,
            spacing_after=HEADING_SPACING_AFTER,
        )

    def _paragraph(self, text: str) -> Block:
        return Block(
            runs=self.formatter.format(text),
            spacing_after=PARAGRAPH_SPACING_AFTER,
        )

    def _code_run(self, text: str) -> Run:
        """Code is never interpreted as Markdown."""
        return self.formatter.base_run(
            text, monospace=True, font=self.theme.monospace_font
        )

    def _rule(self) -> Block:
        return Block(
            runs=[self.formatter.base_run(RULE_TEXT, italic=True)],
            kind=BlockKind.RULE,
            alignment=Alignment.CENTER,
            spacing_before=RULE_SPACING,
            spacing_after=RULE_SPACING,
        )

    def _table_rows(self, token: TableToken) -> list[Block]:
        """One block per row; the first row is treated as the header."""
        blocks: list[Block] = []

        for row_index, row in enumerate(token.rows):
            runs = self.formatter.format(TABLE_CELL_SEPARATOR.join(row))
            if row_index == 0:
                runs = [
                    Run(
                        text=run.text,
                        bold=True,
                        size=run.size,
                        font=run.font,
                        color=run.color,
                    )
                    for run in runs
                ]
            blocks.append(Block(runs=runs, spacing_after=TABLE_ROW_SPACING_AFTER))

        return blocks


def build_blocks(
    tokens: Optional[Iterable[Token]], theme: Optional[Theme] = None
) -> list[Block]:
    """Convert tokens to blocks with a one-off builder."""
    return DocumentBuilder(theme).build(tokens)
