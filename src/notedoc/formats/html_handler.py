"""Standalone HTML file handler."""

from html import escape

from notedoc.formats.base import FormatHandler
from notedoc.formatting.ir import Alignment, Block, NoteDocument, Run

# Left margin per list level
INDENT_STEP_EM = 2


class HTMLHandler(FormatHandler):
    """Handler for standalone HTML pages.

    Headings become <h1>-<h6>, every other block a <p>. Run styling is
    written as semantic tags plus an inline style for size, font and color.
    """

    STYLE = """
        body {
            max-width: 48em;
            margin: 2em auto;
            line-height: 1.5;
        }
        p, h1, h2, h3, h4, h5, h6 {
            margin: 0;
        }
        .rule {
            text-align: center;
        }
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def render(self, document: NoteDocument) -> bytes:
        body = "\n".join(self._block_to_html(block) for block in document.blocks)
        page = (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(document.title)}</title>\n"
            f"<style>{self.STYLE}</style>\n"
            "</head>\n"
            "<body>\n"
            f"{body}\n"
            "</body>\n"
            "</html>\n"
        )
        return page.encode("utf-8")

    def _block_to_html(self, block: Block) -> str:
        """Convert a Block to one HTML element."""
        level = block.heading_level
        tag = f"h{level}" if level is not None else "p"

        styles = [
            f"margin-top: {block.spacing_before / 20:g}pt",
            f"margin-bottom: {block.spacing_after / 20:g}pt",
        ]
        if block.indent_level:
            styles.append(f"margin-left: {block.indent_level * INDENT_STEP_EM}em")
        if block.alignment == Alignment.CENTER:
            styles.append("text-align: center")

        content = "".join(self._run_to_html(run) for run in block.runs)
        return f'<{tag} class="{block.kind.value}" style="{"; ".join(styles)}">{content}</{tag}>'

    def _run_to_html(self, run: Run) -> str:
        text = escape(run.text).replace("\n", "<br>")

        if run.monospace:
            text = f"<code>{text}</code>"
        if run.underline:
            text = f"<u>{text}</u>"
        if run.italic:
            text = f"<em>{text}</em>"
        if run.bold:
            text = f"<strong>{text}</strong>"

        style = (
            f"font-family: '{escape(run.font)}'; "
            f"font-size: {run.size / 2:g}pt; "
            f"color: #{escape(run.color)}"
        )
        return f'<span style="{style}">{text}</span>'
