"""Main note export orchestrator."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from notedoc.formats import get_handler
from notedoc.formatting.builder import DocumentBuilder
from notedoc.formatting.ir import NoteDocument, Theme
from notedoc.formatting.lexer import MarkdownLexer
from notedoc.formatting.tokens import Token, tokens_from_dicts

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".markdown", ".txt")
TOKEN_DUMP_EXTENSIONS = (".json",)
INPUT_EXTENSIONS = MARKDOWN_EXTENSIONS + TOKEN_DUMP_EXTENSIONS


class ExportError(Exception):
    """Error during note export."""

    pass


class NoteExporter:
    """Orchestrates the export pipeline.

    Pipeline:
    1. Read input file (Markdown text or a JSON token dump)
    2. Tokenize Markdown with mistune
    3. Build styled blocks
    4. Render with the handler for the output extension
    """

    def __init__(self, theme: Optional[Theme] = None) -> None:
        """Initialize the exporter.

        Args:
            theme: Base typography; defaults to the built-in theme
        """
        self.lexer = MarkdownLexer()
        self.builder = DocumentBuilder(theme)

    def build_from_tokens(
        self,
        tokens: Iterable[Token],
        title: Optional[str] = None,
    ) -> NoteDocument:
        """Build a document from already tokenized Markdown."""
        blocks = self.builder.build(tokens)
        return NoteDocument(blocks=blocks, metadata={"title": title})

    def build_document(
        self,
        markdown_text: str,
        title: Optional[str] = None,
    ) -> NoteDocument:
        """Tokenize Markdown text and build a document.

        Args:
            markdown_text: Markdown source
            title: Optional document title

        Returns:
            NoteDocument with styled blocks (empty for blank input)
        """
        return self.build_from_tokens(self.lexer.tokenize(markdown_text), title=title)

    def export_file(self, input_path: Path, output_path: Path) -> NoteDocument:
        """Export a Markdown file or token dump to a rich-text document.

        Args:
            input_path: Path to the Markdown or JSON input
            output_path: Path for the output document

        Returns:
            The NoteDocument that was written

        Raises:
            ExportError: If the input cannot be read or the format is unsupported
        """
        try:
            handler = get_handler(output_path.suffix)()
        except ValueError as e:
            raise ExportError(str(e)) from e

        document = self.load_document(input_path)
        handler.write(document, output_path)
        logger.info("Exported %s -> %s", input_path, output_path)

        return document

    def load_document(self, input_path: Path) -> NoteDocument:
        """Read a Markdown file or token dump and build its document.

        Raises:
            ExportError: If the file is missing, blank or not a supported input
        """
        if not input_path.exists():
            raise ExportError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in INPUT_EXTENSIONS:
            raise ExportError(
                f"Unsupported input format: {ext}. "
                f"Supported: {', '.join(INPUT_EXTENSIONS)}"
            )

        content = input_path.read_text(encoding="utf-8")
        if not content.strip():
            raise ExportError("Input file contains no text")

        title = input_path.stem
        if ext in TOKEN_DUMP_EXTENSIONS:
            document = self.build_from_tokens(self._load_tokens(content), title=title)
        else:
            document = self.build_document(content, title=title)
        document.metadata["source"] = str(input_path)

        logger.debug("Built %d blocks from %s", len(document.blocks), input_path)
        return document

    def _load_tokens(self, content: str) -> list[Token]:
        try:
            data: Any = json.loads(content)
        except json.JSONDecodeError as e:
            raise ExportError(f"Invalid token dump: {e}") from e

        if not isinstance(data, (list, dict)):
            raise ExportError("Token dump must be a list or an object with 'tokens'")
        return tokens_from_dicts(data)
