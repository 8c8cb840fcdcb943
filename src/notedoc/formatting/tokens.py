"""Markdown token model.

Tokens are the read-only input of the document builder. They follow the
shape of the ``marked`` lexer: block tokens carry their flattened inline
text, list items duplicate that text into their first nested child, and
tables are plain rows of cell texts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, Mapping, Optional, Union

from notedoc.formatting.ir import FALLBACK_HEADING_DEPTH


class TokenKind(str, Enum):
    """Token kinds, valued by their ``marked`` wire names."""

    WHITESPACE = "space"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE = "code"
    CODESPAN = "codespan"
    TABLE = "table"
    RULE = "hr"
    RAW_MARKUP = "html"
    STRONG = "strong"
    EM = "em"
    OTHER = "other"


@dataclass(frozen=True)
class WhitespaceToken:
    kind: ClassVar[TokenKind] = TokenKind.WHITESPACE


@dataclass(frozen=True)
class HeadingToken:
    text: str
    depth: int = 1
    kind: ClassVar[TokenKind] = TokenKind.HEADING


@dataclass(frozen=True)
class ParagraphToken:
    text: str
    kind: ClassVar[TokenKind] = TokenKind.PARAGRAPH


@dataclass(frozen=True)
class TextToken:
    """Bare inline text, e.g. the content of a tight list item."""

    text: str
    kind: ClassVar[TokenKind] = TokenKind.TEXT


@dataclass(frozen=True)
class BlockquoteToken:
    children: tuple["Token", ...] = ()
    kind: ClassVar[TokenKind] = TokenKind.BLOCKQUOTE


@dataclass(frozen=True)
class ListItemToken:
    """One list item.

    Attributes:
        text: Flattened inline text of the item
        children: Nested block tokens (usually repeating ``text`` first)
        start: Declared number for ordered lists, if any
    """

    text: str = ""
    children: tuple["Token", ...] = ()
    start: Optional[int] = None
    kind: ClassVar[TokenKind] = TokenKind.LIST_ITEM


@dataclass(frozen=True)
class ListToken:
    items: tuple[ListItemToken, ...] = ()
    ordered: bool = False
    kind: ClassVar[TokenKind] = TokenKind.LIST


@dataclass(frozen=True)
class CodeToken:
    text: str
    lang: str = ""
    kind: ClassVar[TokenKind] = TokenKind.CODE


@dataclass(frozen=True)
class CodespanToken:
    text: str
    kind: ClassVar[TokenKind] = TokenKind.CODESPAN


@dataclass(frozen=True)
class TableToken:
    rows: tuple[tuple[str, ...], ...] = ()
    kind: ClassVar[TokenKind] = TokenKind.TABLE


@dataclass(frozen=True)
class RuleToken:
    kind: ClassVar[TokenKind] = TokenKind.RULE


@dataclass(frozen=True)
class RawMarkupToken:
    text: str = ""
    kind: ClassVar[TokenKind] = TokenKind.RAW_MARKUP


@dataclass(frozen=True)
class StrongToken:
    text: str
    kind: ClassVar[TokenKind] = TokenKind.STRONG


@dataclass(frozen=True)
class EmToken:
    text: str
    kind: ClassVar[TokenKind] = TokenKind.EM


@dataclass(frozen=True)
class OtherToken:
    """Any token kind the builder has no dedicated handling for."""

    type_name: str
    text: Optional[str] = None
    kind: ClassVar[TokenKind] = TokenKind.OTHER


Token = Union[
    WhitespaceToken,
    HeadingToken,
    ParagraphToken,
    TextToken,
    BlockquoteToken,
    ListToken,
    ListItemToken,
    CodeToken,
    CodespanToken,
    TableToken,
    RuleToken,
    RawMarkupToken,
    StrongToken,
    EmToken,
    OtherToken,
]


def token_text(token: Token) -> Optional[str]:
    """Get the ``text`` field of a token, or None if its kind has none."""
    return getattr(token, "text", None)


# =============================================================================
# Loading marked-style token dumps
# =============================================================================

def _text(raw: Mapping[str, Any]) -> str:
    value = raw.get("text")
    return "" if value is None else str(value)


def _children(raw: Mapping[str, Any], key: str = "tokens") -> tuple[Token, ...]:
    return tuple(tokens_from_dicts(raw.get(key) or []))


def _int_or_none(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _cell_text(cell: Any) -> str:
    if isinstance(cell, Mapping):
        return _text(cell)
    return "" if cell is None else str(cell)


def list_item_from_dict(raw: Mapping[str, Any]) -> ListItemToken:
    """Convert one ``list_item`` dict."""
    return ListItemToken(
        text=_text(raw),
        children=_children(raw),
        start=_int_or_none(raw.get("start")),
    )


def token_from_dict(raw: Mapping[str, Any]) -> Token:
    """Convert one marked-style token dict into a Token.

    Unknown types load as :class:`OtherToken` so that the builder can still
    render any text they carry.
    """
    type_name = str(raw.get("type", ""))

    if type_name == TokenKind.WHITESPACE.value:
        return WhitespaceToken()
    if type_name == TokenKind.HEADING.value:
        depth = _int_or_none(raw.get("depth"))
        if depth is None:
            depth = FALLBACK_HEADING_DEPTH
        return HeadingToken(text=_text(raw), depth=depth)
    if type_name == TokenKind.PARAGRAPH.value:
        return ParagraphToken(text=_text(raw))
    if type_name == TokenKind.TEXT.value:
        return TextToken(text=_text(raw))
    if type_name == TokenKind.BLOCKQUOTE.value:
        return BlockquoteToken(children=_children(raw))
    if type_name == TokenKind.LIST.value:
        return ListToken(
            items=tuple(list_item_from_dict(item) for item in raw.get("items") or []),
            ordered=bool(raw.get("ordered", False)),
        )
    if type_name == TokenKind.LIST_ITEM.value:
        return list_item_from_dict(raw)
    if type_name == TokenKind.CODE.value:
        return CodeToken(text=_text(raw), lang=str(raw.get("lang") or ""))
    if type_name == TokenKind.CODESPAN.value:
        return CodespanToken(text=_text(raw))
    if type_name == TokenKind.TABLE.value:
        rows = [list(row) for row in raw.get("rows") or []]
        header = raw.get("header")
        if header:
            rows.insert(0, list(header))
        return TableToken(
            rows=tuple(tuple(_cell_text(cell) for cell in row) for row in rows)
        )
    if type_name == TokenKind.RULE.value:
        return RuleToken()
    if type_name == TokenKind.RAW_MARKUP.value:
        return RawMarkupToken(text=_text(raw))
    if type_name == TokenKind.STRONG.value:
        return StrongToken(text=_text(raw))
    if type_name == TokenKind.EM.value:
        return EmToken(text=_text(raw))

    text = raw.get("text")
    return OtherToken(type_name=type_name, text=None if text is None else str(text))


def tokens_from_dicts(data: Union[Iterable[Mapping[str, Any]], Mapping[str, Any]]) -> list[Token]:
    """Convert a marked-style token dump into Tokens.

    Args:
        data: A list of token dicts, or a mapping holding one under ``tokens``

    Returns:
        Tokens in the same order
    """
    if isinstance(data, Mapping):
        data = data.get("tokens") or []
    return [token_from_dict(raw) for raw in data if isinstance(raw, Mapping)]
