"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from notedoc.formatting.ir import NoteDocument


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Each handler renders a NoteDocument's blocks, in order, into the bytes
    of one output format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.pdf',))."""
        ...

    @abstractmethod
    def render(self, document: NoteDocument) -> bytes:
        """Render a document to the bytes of this format.

        Args:
            document: The NoteDocument with styled blocks

        Returns:
            Encoded document content
        """
        ...

    def write(self, document: NoteDocument, path: Path) -> None:
        """Write formatted document to file.

        Args:
            document: The NoteDocument with styled blocks
            path: Path to write the output document
        """
        path.write_bytes(self.render(document))
