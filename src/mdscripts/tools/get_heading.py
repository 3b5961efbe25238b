"""Tool to get a heading's code blocks and markdown."""

from typing import Optional

from ..errors import HeadingNotFound
from ..parser.hierarchy import find_path, merge_env
from ..parser.markdown import node_markdown
from .loader import load_document


def get_heading(heading: str, file: Optional[str] = None, all_languages: bool = False) -> dict:
    """
    Get the details of one heading.

    The env is what the heading's code blocks would see from the document
    itself: its own table entries over those of its ancestors.
    """
    document, err = load_document(file, all_languages)
    if err:
        return err

    try:
        lineage = find_path(document.roots, heading)
    except HeadingNotFound as e:
        return {"error": str(e)}
    node = lineage[-1]

    return {
        "file": document.path,
        "heading": node.heading,
        "level": node.level,
        "path": [n.heading for n in lineage],
        "description": node.description,
        "env": merge_env(lineage, base_env={}),
        "code_blocks": [
            {"language": block.language, "content": block.content}
            for block in node.code_blocks
        ],
        "markdown": node_markdown(document, node),
    }
