"""Formatting: Markdown tokens to styled blocks."""

from notedoc.formatting.ir import (
    Alignment,
    Block,
    BlockKind,
    NoteDocument,
    Run,
    Theme,
    DEFAULT_THEME,
    HEADING_SIZES,
)
from notedoc.formatting.tokens import Token, TokenKind, tokens_from_dicts
from notedoc.formatting.inline import InlineFormatter, format_inline
from notedoc.formatting.lists import ListContext, ListFlattener, normalize_text
from notedoc.formatting.builder import DocumentBuilder, build_blocks
from notedoc.formatting.lexer import MarkdownLexer, tokenize

__all__ = [
    "Alignment",
    "Block",
    "BlockKind",
    "NoteDocument",
    "Run",
    "Theme",
    "DEFAULT_THEME",
    "HEADING_SIZES",
    "Token",
    "TokenKind",
    "tokens_from_dicts",
    "InlineFormatter",
    "format_inline",
    "ListContext",
    "ListFlattener",
    "normalize_text",
    "DocumentBuilder",
    "build_blocks",
    "MarkdownLexer",
    "tokenize",
]
