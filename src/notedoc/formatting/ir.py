"""Intermediate Representation for styled note documents.

This module defines the data structures that sit between the Markdown
token tree and format-specific rendering. Every output format (DOCX, PDF,
HTML, plain text) consumes the same ordered list of blocks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Typography
# =============================================================================

BASE_FONT = "Times New Roman"
BASE_SIZE = 24  # half-points -> 12pt
BASE_COLOR = "000000"
MONOSPACE_FONT = "Consolas"

# Heading depth -> run size in half-points (depth 1 is the largest)
HEADING_SIZES: dict[int, int] = {
    1: 36,
    2: 32,
    3: 28,
    4: 26,
    5: 24,
    6: 24,
}
FALLBACK_HEADING_DEPTH = 3


def clamp_heading_depth(depth: int) -> int:
    """Map a heading depth onto the heading table.

    Depths outside 1-6 are treated as depth 3.
    """
    if depth in HEADING_SIZES:
        return depth
    return FALLBACK_HEADING_DEPTH


@dataclass(frozen=True)
class Theme:
    """Base typography applied to every run.

    Attributes:
        font: Base font family
        size: Base font size in half-points
        color: Base text color as six hex digits
        monospace_font: Family used for inline and block code
    """

    font: str = BASE_FONT
    size: int = BASE_SIZE
    color: str = BASE_COLOR
    monospace_font: str = MONOSPACE_FONT

    def heading_size(self, depth: int) -> int:
        """Get the run size for a heading depth."""
        return HEADING_SIZES[clamp_heading_depth(depth)]


DEFAULT_THEME = Theme()


# =============================================================================
# Blocks and runs
# =============================================================================

class BlockKind(str, Enum):
    """Block-level kinds understood by every renderer."""

    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    PARAGRAPH = "paragraph"
    RULE = "rule"

    @classmethod
    def heading(cls, depth: int) -> "BlockKind":
        """Get the heading kind for a (clamped) depth."""
        return cls(f"heading-{clamp_heading_depth(depth)}")

    @property
    def heading_level(self) -> Optional[int]:
        """Heading level 1-6, or None for non-heading kinds."""
        if self.value.startswith("heading-"):
            return int(self.value.rsplit("-", 1)[1])
        return None


class Alignment(str, Enum):
    """Paragraph alignment."""

    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class Run:
    """A contiguous run of text with explicit styling.

    Attributes:
        text: The text content
        bold: Bold weight
        italic: Italic slant
        monospace: Code styling (font is already the monospace family)
        underline: Single underline
        size: Font size in half-points
        font: Font family name
        color: Text color as six hex digits
    """

    text: str
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    underline: bool = False
    size: int = BASE_SIZE
    font: str = BASE_FONT
    color: str = BASE_COLOR

    def __str__(self) -> str:
        return self.text


@dataclass
class Block:
    """A paragraph-like unit made of styled runs.

    Spacing values are in twips (1/20 pt).
    """

    runs: list[Run] = field(default_factory=list)
    kind: BlockKind = BlockKind.PARAGRAPH
    indent_level: int = 0
    alignment: Alignment = Alignment.LEFT
    spacing_before: int = 0
    spacing_after: int = 0

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    @property
    def heading_level(self) -> Optional[int]:
        return self.kind.heading_level

    def __str__(self) -> str:
        return self.plain_text


@dataclass
class NoteDocument:
    """Complete styled document ready for rendering.

    Attributes:
        blocks: Blocks in document order
        metadata: Additional metadata (title, source path)
    """

    blocks: list[Block] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.metadata.get("title") or "Notes"

    @property
    def plain_text(self) -> str:
        """Get all text content without styling."""
        return "\n\n".join(block.plain_text for block in self.blocks)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def add_block(self, block: Block) -> None:
        """Add a block to the end of the document."""
        self.blocks.append(block)
