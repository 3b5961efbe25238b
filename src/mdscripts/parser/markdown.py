"""Markdown parsing into a tree of runnable headings."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from ..errors import DocumentNotFound
from ..languages import is_supported

logger = logging.getLogger(__name__)

# Source lines as markdown-it numbers them: only CR, LF and CRLF end a line
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")

_md = MarkdownIt("commonmark").enable("table")


@dataclass
class CodeBlock:
    """A fenced code block."""
    language: str
    content: str


@dataclass
class CommandNode:
    """A heading and the content directly beneath it."""
    heading: str
    level: int
    description: Optional[str] = None
    code_blocks: list[CodeBlock] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    children: list["CommandNode"] = field(default_factory=list)
    # Source lines owned by the heading itself, up to the next heading
    line_start: int = 0
    line_end: int = 0


@dataclass
class Document:
    """A parsed markdown document."""
    source: str
    roots: list[CommandNode]
    path: Optional[str] = None


def _inline_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text runs below a node, turning line breaks into newlines."""
    parts: list[str] = []
    for child in node.children:
        if child.type in ("text", "code_inline", "html_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        else:
            parts.append(_inline_text(child))
    return "".join(parts)


def _table_cells(table: SyntaxTreeNode) -> tuple[list[str], list[list[str]]]:
    """Split a table node into (header cells, body rows)."""
    header: list[str] = []
    rows: list[list[str]] = []
    for section in table.children:
        for row in section.children:
            cells = [_inline_text(cell) for cell in row.children]
            if section.type == "thead":
                header = cells
            else:
                rows.append(cells)
    return header, rows


def table_to_env(header: list[str], rows: list[list[str]]) -> Optional[dict[str, str]]:
    """
    Read a two-column key/value table into a dict.

    The header must read ``key`` and ``value`` (any case, either order).
    Returns None for any other table.
    """
    if len(header) != 2:
        return None

    first = header[0].strip().lower()
    second = header[1].strip().lower()
    if (first, second) not in (("key", "value"), ("value", "key")):
        return None

    key_index = 0 if first == "key" else 1
    env: dict[str, str] = {}
    for row in rows:
        if len(row) < 2:
            continue
        key = row[key_index].strip()
        value = row[1 - key_index].strip()
        if key:
            env[key] = value
    return env


def _fences(node: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Yield fenced code blocks at or below a block node."""
    if node.type == "fence":
        yield node
        return
    for child in node.children:
        if child.type != "inline":
            yield from _fences(child)


def _fence_language(info: str) -> str:
    words = info.split()
    return words[0].lower() if words else ""


def parse_document(text: str, all_languages: bool = False, path: Optional[str] = None) -> Document:
    """
    Parse markdown into a forest of CommandNodes.

    Each heading becomes a node, nested under the nearest preceding heading of
    a smaller level. Paragraphs, fenced code blocks and key/value tables are
    attached to the heading they appear under. Content before the first
    heading is dropped.

    Code blocks are kept only when their language has an interpreter, unless
    ``all_languages`` is set.
    """
    tree = SyntaxTreeNode(_md.parse(text))

    roots: list[CommandNode] = []
    ordered: list[CommandNode] = []
    stack: list[CommandNode] = []

    for block in tree.children:
        if block.type == "heading":
            node = CommandNode(
                heading=_inline_text(block).strip(),
                level=int(block.tag[1]),
                line_start=block.map[0] if block.map else 0,
            )
            while stack and stack[-1].level >= node.level:
                stack.pop()
            if stack:
                stack[-1].children.append(node)
            else:
                roots.append(node)
            stack.append(node)
            ordered.append(node)
            continue

        if not stack:
            continue
        current = stack[-1]

        if block.type == "paragraph":
            text_value = _inline_text(block).strip()
            if text_value and current.description is None and not current.code_blocks:
                current.description = text_value
        elif block.type == "table":
            env = table_to_env(*_table_cells(block))
            if env is not None:
                current.env.update(env)
        else:
            for fence in _fences(block):
                language = _fence_language(fence.info)
                if all_languages or is_supported(language):
                    current.code_blocks.append(CodeBlock(language=language, content=fence.content))
                else:
                    logger.debug("Skipping %s code block under %s", language or "untagged", current.heading)

    total_lines = len(_source_lines(text))
    for index, node in enumerate(ordered):
        if index + 1 < len(ordered):
            node.line_end = ordered[index + 1].line_start
        else:
            node.line_end = total_lines

    return Document(source=text, roots=roots, path=path)


def read_document(path, all_languages: bool = False) -> Document:
    """Read and parse a markdown file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentNotFound(f"Cannot read markdown file {path}: {e}") from e
    return parse_document(text, all_languages=all_languages, path=str(path))


def _source_lines(text: str) -> list[str]:
    return _LINE_RE.findall(text)


def node_markdown(document: Document, node: CommandNode) -> str:
    """Return the raw markdown of a heading, excluding its child headings."""
    lines = _source_lines(document.source)
    return "".join(lines[node.line_start:node.line_end])


def dump_syntax_tree(text: str) -> str:
    """Pretty-print the parser's syntax tree."""
    return SyntaxTreeNode(_md.parse(text)).pretty(indent=2, show_text=True)
