"""MCP tool implementations."""

from .list_headings import list_headings
from .get_heading import get_heading
from .run_heading import run_heading

__all__ = ["list_headings", "get_heading", "run_heading"]
