"""Run fenced code blocks from markdown documents by their heading."""

__version__ = "0.1.0"
