"""notedoc - render Markdown notes as styled rich-text documents."""

__version__ = "0.1.0"
