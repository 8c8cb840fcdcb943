"""Tests for the inline formatter."""

import pytest

from notedoc.formatting.inline import InlineFormatter, format_inline
from notedoc.formatting.ir import BASE_COLOR, BASE_FONT, BASE_SIZE, Run, Theme


class TestInlineFormatter:
    """Tests for the InlineFormatter class."""

    def test_plain_text_single_base_run(self, formatter: InlineFormatter):
        """Test that text without markers becomes one base-style run."""
        runs = formatter.format("Hello, world!")

        assert runs == [
            Run(text="Hello, world!", size=BASE_SIZE, font=BASE_FONT, color=BASE_COLOR)
        ]

    def test_empty_text_never_empty(self, formatter: InlineFormatter):
        """Test that empty input still yields one run."""
        runs = formatter.format("")

        assert len(runs) == 1
        assert runs[0].text == ""

    def test_bold_italic_code(self, formatter: InlineFormatter):
        """Test the three emphasis-like markers with spacing between them."""
        runs = formatter.format("**a** *b* `c`")

        assert [r.text for r in runs] == ["a", " ", "b", " ", "c"]
        assert runs[0].bold is True
        assert runs[0].italic is False
        assert runs[2].italic is True
        assert runs[2].bold is False
        assert runs[4].monospace is True
        assert runs[4].font == "Consolas"
        assert all(not (r.bold or r.italic or r.monospace) for r in (runs[1], runs[3]))

    def test_markers_keep_base_color_and_size(self, formatter: InlineFormatter):
        """Test that emphasis only flips flags."""
        runs = formatter.format("**bold** and *slanted*")

        for run in runs:
            assert run.size == BASE_SIZE
            assert run.color == BASE_COLOR
            assert run.font == BASE_FONT

    def test_link_degrades_to_label_and_target(self, formatter: InlineFormatter):
        """Test that links render as underlined label plus the URL."""
        runs = formatter.format("[x](http://y)")

        assert len(runs) == 2
        assert runs[0].text == "x"
        assert runs[0].underline is True
        assert runs[1].text == " (http://y)"
        assert runs[1].italic is True
        assert runs[1].size == BASE_SIZE - 2

    def test_image_alt_text(self, formatter: InlineFormatter):
        """Test that images become italic alt-text placeholders."""
        runs = formatter.format("![alt](u)")

        assert len(runs) == 1
        assert runs[0].text == "[Image: alt]"
        assert runs[0].italic is True

    def test_surrounding_text_kept_verbatim(self, formatter: InlineFormatter):
        """Test text before and after a marker."""
        runs = formatter.format("This is **bold** text")

        assert [r.text for r in runs] == ["This is ", "bold", " text"]
        assert [r.bold for r in runs] == [False, True, False]

    @pytest.mark.parametrize(
        "text",
        [
            "2 * 3 = 6",
            "an **unclosed bold",
            "a `dangling backtick",
            "[label without target]",
            "**\n**",
        ],
    )
    def test_unpaired_markers_stay_literal(self, formatter: InlineFormatter, text: str):
        """Test that incomplete markers are left as text."""
        runs = formatter.format(text)

        assert "".join(r.text for r in runs) == text
        assert all(not (r.bold or r.italic or r.monospace or r.underline) for r in runs)

    def test_marker_does_not_span_lines(self, formatter: InlineFormatter):
        """Test that a newline between delimiters breaks the pair."""
        runs = formatter.format("*one\ntwo*")

        assert len(runs) == 1
        assert runs[0].italic is False

    def test_earliest_match_wins(self, formatter: InlineFormatter):
        """Test that code is not scanned for emphasis."""
        runs = formatter.format("`a *b* c`")

        assert len(runs) == 1
        assert runs[0].text == "a *b* c"
        assert runs[0].monospace is True

    def test_custom_theme(self):
        """Test that runs inherit a custom theme."""
        theme = Theme(font="Arial", size=20, color="333333", monospace_font="Menlo")
        runs = format_inline("plain `code` [l](t)", theme)

        assert runs[0].font == "Arial"
        assert runs[0].size == 20
        assert runs[0].color == "333333"
        assert runs[1].font == "Menlo"
        assert runs[-1].size == 18
