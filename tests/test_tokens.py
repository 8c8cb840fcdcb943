"""Tests for loading marked-style token dumps."""

import pytest

from notedoc.formatting.builder import DocumentBuilder
from notedoc.formatting.ir import HEADING_SIZES
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
    TokenKind,
    WhitespaceToken,
    token_text,
    tokens_from_dicts,
)


class TestTokensFromDicts:
    """Tests for the marked token loader."""

    def test_block_kinds(self):
        tokens = tokens_from_dicts([
            {"type": "space", "raw": "\n\n"},
            {"type": "heading", "depth": 2, "text": "Title"},
            {"type": "paragraph", "text": "Body"},
            {"type": "code", "text": "x = 1", "lang": "python"},
            {"type": "hr", "raw": "---"},
            {"type": "html", "text": "<br>"},
        ])

        assert tokens == [
            WhitespaceToken(),
            HeadingToken(text="Title", depth=2),
            ParagraphToken(text="Body"),
            CodeToken(text="x = 1", lang="python"),
            RuleToken(),
            RawMarkupToken(text="<br>"),
        ]

    def test_list_with_duplicated_item_text(self):
        tokens = tokens_from_dicts([
            {
                "type": "list",
                "ordered": True,
                "items": [
                    {
                        "type": "list_item",
                        "text": "Buy milk",
                        "tokens": [{"type": "text", "text": "Buy milk"}],
                    },
                    {"type": "list_item", "text": "Call", "start": 5},
                ],
            }
        ])

        assert tokens == [
            ListToken(
                ordered=True,
                items=(
                    ListItemToken(text="Buy milk", children=(TextToken(text="Buy milk"),)),
                    ListItemToken(text="Call", start=5),
                ),
            )
        ]

    def test_blockquote_children(self):
        tokens = tokens_from_dicts([
            {"type": "blockquote", "tokens": [{"type": "paragraph", "text": "q"}]}
        ])

        assert tokens == [BlockquoteToken(children=(ParagraphToken(text="q"),))]

    def test_table_header_prepended(self):
        tokens = tokens_from_dicts([
            {
                "type": "table",
                "header": [{"text": "A"}, {"text": "B"}],
                "rows": [[{"text": "1"}, {"text": "2"}]],
            }
        ])

        assert tokens == [TableToken(rows=(("A", "B"), ("1", "2")))]

    @pytest.mark.parametrize("depth", [None, "", "deep"])
    def test_heading_without_usable_depth(self, depth):
        """Test that a missing depth renders like a level 3 heading."""
        raw = {"type": "heading", "text": "T"}
        if depth is not None:
            raw["depth"] = depth

        blocks = DocumentBuilder().build(tokens_from_dicts([raw]))

        assert blocks[0].heading_level == 3
        assert blocks[0].runs[0].size == HEADING_SIZES[3]

    def test_unknown_type(self):
        tokens = tokens_from_dicts([{"type": "def", "text": "ref"}, {"type": "br"}])

        assert tokens == [OtherToken(type_name="def", text="ref"), OtherToken(type_name="br")]

    def test_mapping_with_tokens_key(self):
        tokens = tokens_from_dicts({"tokens": [{"type": "paragraph", "text": "x"}]})

        assert tokens == [ParagraphToken(text="x")]

    def test_non_mapping_entries_skipped(self):
        assert tokens_from_dicts(["junk", 3, {"type": "hr"}]) == [RuleToken()]

    def test_marked_dump_builds(self):
        """Test a realistic marked dump end to end."""
        tokens = tokens_from_dicts([
            {"type": "heading", "depth": 9, "text": "Deep"},
            {
                "type": "list",
                "ordered": False,
                "items": [
                    {
                        "type": "list_item",
                        "text": "Buy milk",
                        "tokens": [
                            {"type": "paragraph", "text": "Buy  milk"},
                            {"type": "space"},
                        ],
                    }
                ],
            },
        ])

        blocks = DocumentBuilder().build(tokens)

        assert [b.plain_text for b in blocks] == ["Deep", "• Buy milk"]
        assert blocks[0].heading_level == 3


class TestTokenHelpers:
    """Tests for token helpers."""

    def test_token_text(self):
        assert token_text(ParagraphToken(text="p")) == "p"
        assert token_text(ListToken()) is None
        assert token_text(WhitespaceToken()) is None

    def test_kinds_use_marked_names(self):
        assert ParagraphToken.kind == TokenKind.PARAGRAPH
        assert RuleToken.kind.value == "hr"
        assert WhitespaceToken.kind.value == "space"
