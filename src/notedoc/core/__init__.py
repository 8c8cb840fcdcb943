"""Core export logic for notedoc."""

from notedoc.core.exporter import ExportError, NoteExporter

__all__ = [
    "ExportError",
    "NoteExporter",
]
