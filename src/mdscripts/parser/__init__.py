"""Markdown parsing utilities."""

from .markdown import CodeBlock, CommandNode, Document, parse_document, read_document
from .hierarchy import find_node, find_path, merge_env

__all__ = [
    "CodeBlock",
    "CommandNode",
    "Document",
    "parse_document",
    "read_document",
    "find_node",
    "find_path",
    "merge_env",
]
