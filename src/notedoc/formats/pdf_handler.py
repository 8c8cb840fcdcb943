"""PDF file handler."""

import io

from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.fonts import tt2ps
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from notedoc.formats.base import FormatHandler
from notedoc.formatting.ir import Alignment, Block, NoteDocument, Run


# Left indent per list level, in points (0.5 inch)
INDENT_STEP = 36

# Standard PDF font families; tt2ps picks the bold/italic face
SERIF_FAMILY = "times"
MONOSPACE_FAMILY = "courier"

ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
}


class PDFHandler(FormatHandler):
    """Handler for PDF files.

    Uses reportlab's Paragraph with HTML-like tags for run formatting.
    Theme font families are mapped onto the built-in Times and Courier
    families.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".pdf",)

    def render(self, document: NoteDocument) -> bytes:
        """Render the document as PDF bytes."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            rightMargin=inch,
            leftMargin=inch,
            topMargin=inch,
            bottomMargin=inch,
            title=document.title,
        )

        styles = self._create_styles()

        story: list = []
        for block in document.blocks:
            story.append(
                Paragraph(self._block_to_html(block), self._block_style(block, styles))
            )

        if not story:
            # reportlab refuses to build an empty story
            story.append(Spacer(1, 0))

        doc.build(story)
        return buffer.getvalue()

    def _create_styles(self) -> dict[str, ParagraphStyle]:
        """Create the base paragraph styles."""
        base_styles = getSampleStyleSheet()
        styles = {
            "body": ParagraphStyle(
                "NoteBody",
                parent=base_styles["Normal"],
                fontName=tt2ps(SERIF_FAMILY, 0, 0),
                fontSize=12,
                leading=16,
            ),
        }
        for level in range(1, 7):
            styles[f"heading-{level}"] = ParagraphStyle(
                f"NoteHeading{level}",
                parent=base_styles[f"Heading{level}"],
                fontName=tt2ps(SERIF_FAMILY, 0, 0),
            )
        return styles

    def _block_style(
        self, block: Block, styles: dict[str, ParagraphStyle]
    ) -> ParagraphStyle:
        """Derive the paragraph style for one block."""
        parent = styles["body"]
        if block.heading_level is not None:
            parent = styles[f"heading-{block.heading_level}"]

        largest = max((run.size for run in block.runs), default=0) / 2
        return ParagraphStyle(
            f"{parent.name}-block",
            parent=parent,
            leftIndent=block.indent_level * INDENT_STEP,
            alignment=ALIGNMENTS[block.alignment],
            spaceBefore=block.spacing_before / 20,
            spaceAfter=block.spacing_after / 20,
            leading=max(parent.leading, largest * 1.3),
        )

    def _block_to_html(self, block: Block) -> str:
        """Convert a Block to HTML-formatted string for reportlab."""
        return "".join(self._run_to_html(run) for run in block.runs)

    def _run_to_html(self, run: Run) -> str:
        # Escape HTML special characters
        text = (
            run.text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace("\n", "<br/>")
        )

        # An explicit face name overrides <b>/<i>, so resolve the styled face here
        family = MONOSPACE_FAMILY if run.monospace else SERIF_FAMILY
        font = tt2ps(family, int(run.bold), int(run.italic))
        text = f'<font name="{font}" size="{run.size / 2:g}" color="#{run.color}">{text}</font>'

        if run.underline:
            text = f"<u>{text}</u>"

        return text
