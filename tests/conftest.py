"""Pytest fixtures for notedoc tests."""

import pytest
from pathlib import Path

from notedoc.formatting.builder import DocumentBuilder
from notedoc.formatting.inline import InlineFormatter
from notedoc.formatting.ir import Block, BlockKind, NoteDocument, Run


@pytest.fixture
def formatter() -> InlineFormatter:
    """Inline formatter with the default theme."""
    return InlineFormatter()


@pytest.fixture
def builder() -> DocumentBuilder:
    """Document builder with the default theme."""
    return DocumentBuilder()


@pytest.fixture
def sample_markdown() -> str:
    """Meeting notes exercising every block kind the exporter renders."""
    return """# Weekly sync

Notes from **Monday** with *everyone* present. See [the board](https://example.com/board).

## Action items

- Buy milk
- Review `deploy.sh`
  - Check the rollback path
  - Ping ops

1. First
2. Second

> Quoted decision: ship it.

---

| Owner | Task |
| ----- | ---- |
| Ana   | Docs |

```python
print("hello")
```
"""


@pytest.fixture
def sample_document() -> NoteDocument:
    """A small styled document for handler tests."""
    return NoteDocument(
        blocks=[
            Block(
                runs=[Run(text="Agenda", bold=True, size=36)],
                kind=BlockKind.HEADING_1,
                spacing_before=160,
                spacing_after=120,
            ),
            Block(
                runs=[
                    Run(text="Plain "),
                    Run(text="bold", bold=True),
                    Run(text=" and "),
                    Run(text="code", monospace=True, font="Consolas"),
                ],
                spacing_after=160,
            ),
            Block(
                runs=[Run(text="• "), Run(text="nested item")],
                indent_level=2,
                spacing_after=40,
            ),
        ],
        metadata={"title": "Agenda"},
    )


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary Markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path
