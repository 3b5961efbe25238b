"""Shared document loading for the MCP tools."""

from typing import Optional

from ..errors import MdScriptsError
from ..locator import resolve_document
from ..parser.markdown import Document, read_document


def load_document(file: Optional[str] = None, all_languages: bool = False) -> tuple[Optional[Document], Optional[dict]]:
    """Locate and parse a document. Returns (document, error_dict)."""
    try:
        path = resolve_document(file)
        return read_document(path, all_languages=all_languages), None
    except MdScriptsError as e:
        return None, {"error": str(e)}
