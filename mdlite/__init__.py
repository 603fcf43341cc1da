"""Convert a small subset of Markdown to HTML."""

__version__ = "0.1.0"
__all__ = ["parser", "state"]