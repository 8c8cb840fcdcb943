"""Microsoft Word (.docx) file handler."""

import io
import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor, Twips

from notedoc.formats.base import FormatHandler
from notedoc.formatting.ir import (
    Alignment,
    Block,
    DEFAULT_THEME,
    NoteDocument,
    Run,
)

logger = logging.getLogger(__name__)

# Left indent per list level, in twips (0.5 inch)
INDENT_STEP_TWIPS = 720

ALIGNMENTS = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) files.

    Uses python-docx to write one Word paragraph per block, with every
    run property (weight, slant, underline, size, font, color) set
    explicitly at the run level.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def render(self, document: NoteDocument) -> bytes:
        """Render the document as DOCX bytes."""
        doc = Document()

        # Set default font
        style = doc.styles["Normal"]
        font = style.font
        font.name = DEFAULT_THEME.font
        font.size = Pt(DEFAULT_THEME.size / 2)

        doc.core_properties.title = document.title

        for block in document.blocks:
            self._add_block(doc, block)

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def _add_block(self, doc: Document, block: Block) -> None:
        """Add one block as a Word paragraph."""
        level = block.heading_level
        if level is not None:
            para = doc.add_paragraph(style=f"Heading {level}")
        else:
            para = doc.add_paragraph()

        fmt = para.paragraph_format
        if block.indent_level:
            fmt.left_indent = Twips(block.indent_level * INDENT_STEP_TWIPS)
        if block.spacing_before:
            fmt.space_before = Twips(block.spacing_before)
        if block.spacing_after:
            fmt.space_after = Twips(block.spacing_after)
        para.alignment = ALIGNMENTS[block.alignment]

        for run_data in block.runs:
            self._add_run(para, run_data)

    def _add_run(self, para, run_data: Run) -> None:
        run = para.add_run(run_data.text)
        run.bold = run_data.bold
        run.italic = run_data.italic
        run.underline = run_data.underline
        run.font.size = Pt(run_data.size / 2)
        run.font.name = run_data.font
        try:
            run.font.color.rgb = RGBColor.from_string(run_data.color.upper())
        except ValueError:
            logger.debug("Ignoring invalid run color %r", run_data.color)
