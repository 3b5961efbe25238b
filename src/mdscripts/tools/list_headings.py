"""Tool to list the headings of a markdown document."""

from typing import Optional

from ..parser.hierarchy import is_runnable
from ..parser.markdown import CommandNode
from .loader import load_document


def list_headings(file: Optional[str] = None, all_languages: bool = False) -> dict:
    """
    List the heading tree of a document.

    Args:
        file: Markdown file (defaults to the nearest scripts.md, .scripts.md or README.md)
        all_languages: Keep code blocks whose language has no interpreter

    Returns:
        Dict with nested heading tree
    """
    document, err = load_document(file, all_languages)
    if err:
        return err

    def node_to_dict(node: CommandNode) -> dict:
        return {
            "heading": node.heading,
            "level": node.level,
            "description": node.description,
            "languages": [block.language for block in node.code_blocks],
            "env": node.env,
            "runnable": is_runnable(node),
            "children": [node_to_dict(child) for child in node.children],
        }

    return {
        "file": document.path,
        "headings": [node_to_dict(node) for node in document.roots],
    }
