"""Markdown lexer: mistune AST to notedoc tokens.

mistune produces a fully parsed AST with inline children. The builder
expects the flatter ``marked`` shape instead, where block tokens keep their
inline Markdown as text. This adapter re-serialises inline children and
mirrors how ``marked`` lays out list items: the item carries its flattened
text and also keeps that text as its first nested token.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

import mistune

from notedoc.formatting.tokens import (
    BlockquoteToken,
    CodeToken,
    HeadingToken,
    ListItemToken,
    ListToken,
    OtherToken,
    ParagraphToken,
    RawMarkupToken,
    RuleToken,
    TableToken,
    TextToken,
    Token,
    WhitespaceToken,
)

logger = logging.getLogger(__name__)

# Block types that hold inline text
PARAGRAPH_TYPES = ("paragraph", "block_text")


class MarkdownLexer:
    """Tokenize Markdown text with mistune.

    Supports headings, paragraphs, lists (nested, ordered with start
    numbers), block quotes, fenced/indented code, thematic breaks, tables
    and raw HTML blocks.
    """

    def __init__(self) -> None:
        self._md = mistune.create_markdown(
            renderer=None,
            plugins=["table", "strikethrough"],
        )

    def tokenize(self, markdown_text: str) -> list[Token]:
        """Parse Markdown text into tokens.

        Args:
            markdown_text: Markdown source

        Returns:
            Top-level tokens in document order
        """
        if not markdown_text or not markdown_text.strip():
            return []
        ast = self._md(markdown_text)
        return self._convert_all(ast)

    def _convert_all(self, nodes: Iterable[Mapping[str, Any]]) -> list[Token]:
        tokens: list[Token] = []
        for node in nodes:
            token = self._convert(node)
            if token is not None:
                tokens.append(token)
        return tokens

    def _convert(self, node: Mapping[str, Any]) -> Optional[Token]:
        """Convert one mistune block node."""
        node_type = node.get("type")
        attrs = node.get("attrs") or {}

        if node_type == "blank_line":
            return WhitespaceToken()
        if node_type == "heading":
            return HeadingToken(
                text=plain_text(node.get("children", [])).strip(),
                depth=int(attrs.get("level", 1)),
            )
        if node_type == "paragraph":
            return ParagraphToken(text=inline_text(node))
        if node_type == "block_text":
            return TextToken(text=inline_text(node))
        if node_type == "block_quote":
            return BlockquoteToken(
                children=tuple(self._convert_all(node.get("children", [])))
            )
        if node_type == "list":
            return self._list(node)
        if node_type == "block_code":
            return CodeToken(
                text=node.get("raw", "").rstrip("\n"),
                lang=str(attrs.get("info") or ""),
            )
        if node_type == "thematic_break":
            return RuleToken()
        if node_type == "block_html":
            return RawMarkupToken(text=node.get("raw", ""))
        if node_type == "table":
            return self._table(node)

        logger.debug("Unhandled mistune node: %s", node_type)
        text = node.get("raw")
        if text is None and node.get("children"):
            text = inline_markdown(node["children"])
        return OtherToken(type_name=str(node_type), text=text)

    def _list(self, node: Mapping[str, Any]) -> ListToken:
        attrs = node.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start")

        items: list[ListItemToken] = []
        for index, item in enumerate(
            child for child in node.get("children", [])
            if child.get("type") == "list_item"
        ):
            children = self._convert_all(item.get("children", []))
            items.append(
                ListItemToken(
                    text=_item_text(item),
                    children=tuple(children),
                    start=int(start) + index if ordered and start is not None else None,
                )
            )

        return ListToken(items=tuple(items), ordered=ordered)

    def _table(self, node: Mapping[str, Any]) -> TableToken:
        rows: list[tuple[str, ...]] = []
        for section in node.get("children", []):
            if section.get("type") == "table_head":
                rows.append(_cells(section))
            elif section.get("type") == "table_body":
                for row in section.get("children", []):
                    rows.append(_cells(row))
        return TableToken(rows=tuple(rows))


def _cells(row: Mapping[str, Any]) -> tuple[str, ...]:
    return tuple(
        inline_text(cell)
        for cell in row.get("children", [])
        if cell.get("type") == "table_cell"
    )


def _item_text(item: Mapping[str, Any]) -> str:
    """Flattened text of a list item: its first paragraph-like child."""
    for child in item.get("children", []):
        if child.get("type") in PARAGRAPH_TYPES:
            return inline_text(child)
    return ""


def inline_text(node: Mapping[str, Any]) -> str:
    """Inline Markdown of a paragraph-like node, trimmed."""
    return inline_markdown(node.get("children", [])).strip()


def inline_markdown(children: Iterable[Mapping[str, Any]]) -> str:
    """Re-serialise mistune inline nodes to Markdown inline syntax.

    Text nodes arrive already unescaped and the inline formatter has no
    escape syntax, so ``\\*\\*x\\*\\*`` in the source comes back as live
    ``**x**`` and renders bold.
    """
    parts: list[str] = []

    for child in children:
        child_type = child.get("type")
        inner = child.get("children", [])

        if child_type == "text":
            parts.append(child.get("raw", ""))
        elif child_type == "strong":
            parts.append(f"**{inline_markdown(inner)}**")
        elif child_type == "emphasis":
            parts.append(f"*{inline_markdown(inner)}*")
        elif child_type == "codespan":
            parts.append(f"`{child.get('raw', '')}`")
        elif child_type == "link":
            url = (child.get("attrs") or {}).get("url", "")
            parts.append(f"[{inline_markdown(inner)}]({url})")
        elif child_type == "image":
            url = (child.get("attrs") or {}).get("url", "")
            parts.append(f"![{plain_text(inner)}]({url})")
        elif child_type == "softbreak":
            # Rendered as a space, so emphasis may span source lines
            parts.append(" ")
        elif child_type == "linebreak":
            parts.append("\n")
        elif child_type == "inline_html":
            # Raw markup is not supported
            continue
        elif inner:
            parts.append(inline_markdown(inner))
        else:
            parts.append(child.get("raw", ""))

    return "".join(parts)


def plain_text(children: Iterable[Mapping[str, Any]]) -> str:
    """Flatten mistune inline nodes to their text content."""
    parts: list[str] = []
    for child in children:
        child_type = child.get("type")
        if child_type in ("softbreak", "linebreak"):
            parts.append(" ")
        elif child_type == "inline_html":
            continue
        elif child.get("children"):
            parts.append(plain_text(child["children"]))
        else:
            parts.append(child.get("raw", ""))
    return "".join(parts)


def tokenize(markdown_text: str) -> list[Token]:
    """Tokenize Markdown text with a fresh lexer."""
    return MarkdownLexer().tokenize(markdown_text)
