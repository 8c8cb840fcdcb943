"""Plain text file handler."""

from notedoc.formats.base import FormatHandler
from notedoc.formatting.ir import NoteDocument

INDENT = "    "


class TXTHandler(FormatHandler):
    """Handler for plain text (.txt) output.

    Styling is dropped; list nesting is kept as four spaces per indent
    level and blocks are separated by blank lines.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def render(self, document: NoteDocument) -> bytes:
        blocks: list[str] = []

        for block in document.blocks:
            prefix = INDENT * block.indent_level
            lines = block.plain_text.split("\n")
            blocks.append("\n".join(prefix + line for line in lines))

        return "\n\n".join(blocks).encode("utf-8")
