"""Document format handlers for notedoc."""

from notedoc.formats.base import FormatHandler
from notedoc.formats.txt_handler import TXTHandler
from notedoc.formats.docx_handler import DOCXHandler
from notedoc.formats.pdf_handler import PDFHandler
from notedoc.formats.html_handler import HTMLHandler

__all__ = [
    "FormatHandler",
    "TXTHandler",
    "DOCXHandler",
    "PDFHandler",
    "HTMLHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".docx": DOCXHandler,
    ".pdf": PDFHandler,
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
    ".txt": TXTHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())

# Names accepted by --format
OUTPUT_FORMATS = ("docx", "pdf", "html", "txt")


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported output format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
