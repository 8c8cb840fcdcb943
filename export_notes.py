#!/usr/bin/env python3
"""
notedoc - Markdown notes to styled documents

Simple usage:
    python export_notes.py notes.md                 # Outputs notes.docx
    python export_notes.py notes.md --format pdf    # Outputs notes.pdf
    python export_notes.py /folder/path             # Exports every .md file in folder
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from notedoc.cli import app

if __name__ == "__main__":
    app()
