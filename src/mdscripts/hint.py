"""Render the runnable headings of a document as a tree."""

from typing import Sequence

from .parser.hierarchy import is_runnable
from .parser.markdown import CommandNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "

# Gap between the tree and the notes column
GUTTER = 2


def _notes(node: CommandNode, verbose: bool) -> list[str]:
    notes: list[str] = []
    if node.description:
        notes.append(node.description.splitlines()[0])
    if verbose:
        if node.env:
            notes.append("env: " + " ".join(f"{key}={value}" for key, value in node.env.items()))
        for block in node.code_blocks:
            lines = block.content.strip().splitlines()
            preview = lines[0] if lines else ""
            if len(lines) > 1:
                preview += " ..."
            notes.append(f"{block.language or 'text'}: {preview}")
    return notes


def _rows(root: CommandNode, verbose: bool) -> list[tuple[str, str, list[str]]]:
    """Lay out one tree as (branch, continuation, notes) rows."""
    rows: list[tuple[str, str, list[str]]] = []

    def visit(node: CommandNode, branch: str, child_prefix: str) -> None:
        children = [child for child in node.children if is_runnable(child)]
        continuation = child_prefix + ("│" if children else "")
        rows.append((branch, continuation, _notes(node, verbose)))
        for index, child in enumerate(children):
            last = index == len(children) - 1
            visit(
                child,
                child_prefix + (LAST_BRANCH if last else BRANCH) + child.heading,
                child_prefix + (SPACE if last else PIPE),
            )

    visit(root, root.heading, "")
    return rows


def render_hint(roots: Sequence[CommandNode], verbose: bool = False) -> str:
    """
    Draw each runnable root heading as a tree.

    Only headings with code blocks, or with such headings below them, are
    drawn. Descriptions (and, when verbose, env and code previews) line up in
    one column past the widest branch of all trees.
    """
    trees = [_rows(root, verbose) for root in roots if is_runnable(root)]
    if not trees:
        return ""

    width = max(len(branch) for rows in trees for branch, _, _ in rows)

    rendered: list[str] = []
    for rows in trees:
        lines: list[str] = []
        for branch, continuation, notes in rows:
            if not notes:
                lines.append(branch)
                continue
            lines.append(branch.ljust(width + GUTTER) + notes[0])
            for note in notes[1:]:
                lines.append(continuation.ljust(width + GUTTER) + note)
        rendered.append("\n".join(lines) + "\n")

    return "\n".join(rendered)
