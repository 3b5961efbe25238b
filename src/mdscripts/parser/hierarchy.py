"""Queries over the heading tree."""

import os
from typing import Mapping, Optional, Sequence

from ..errors import HeadingNotFound
from .markdown import CommandNode


def find_path(roots: Sequence[CommandNode], heading: str) -> list[CommandNode]:
    """
    Find a heading by case-insensitive exact match.

    The search is depth-first in document order, checking each node before
    its children. Returns the lineage from the root down to the match.
    """
    wanted = heading.lower()

    def search(nodes: Sequence[CommandNode], lineage: list[CommandNode]) -> Optional[list[CommandNode]]:
        for node in nodes:
            path = lineage + [node]
            if node.heading.lower() == wanted:
                return path
            found = search(node.children, path)
            if found:
                return found
        return None

    path = search(roots, [])
    if path is None:
        raise HeadingNotFound(heading)
    return path


def find_node(roots: Sequence[CommandNode], heading: str) -> CommandNode:
    return find_path(roots, heading)[-1]


def merge_env(lineage: Sequence[CommandNode], base_env: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """
    Build the environment for a node.

    ``lineage`` runs from the root to the node itself; nearer headings
    override farther ones.
    """
    env = dict(os.environ if base_env is None else base_env)
    for node in lineage:
        env.update(node.env)
    return env


def is_runnable(node: CommandNode) -> bool:
    """A node is runnable if it or any descendant has code blocks."""
    return bool(node.code_blocks) or any(is_runnable(child) for child in node.children)
