"""Find the markdown document to run scripts from."""

import logging
from pathlib import Path
from typing import Optional

from .errors import DocumentNotFound

logger = logging.getLogger(__name__)

# Default program name, which also names the preferred document
DEFAULT_PROGRAM = "scripts"


def candidate_names(program: str = DEFAULT_PROGRAM) -> list[str]:
    """Document names checked in each directory, in priority order."""
    return [f"{program}.md", f".{program}.md", "README.md"]


def find_doc(start_dir=None, program: str = DEFAULT_PROGRAM) -> Path:
    """
    Search ``start_dir`` and its ancestors for a markdown document.

    All candidate names are checked in one directory before moving up to its
    parent. Symlinks to regular files count as files.

    Raises:
        DocumentNotFound: if no candidate exists up to the filesystem root
    """
    directory = Path(start_dir).absolute() if start_dir else Path.cwd()
    names = candidate_names(program)

    while True:
        for name in names:
            path = directory / name
            logger.debug("Looking for %s", path)
            if path.is_file():
                return path

        parent = directory.parent
        if parent == directory:
            break
        directory = parent

    raise DocumentNotFound(f"No markdown file found (looked for {', '.join(names)})")


def resolve_document(file: Optional[str] = None, program: str = DEFAULT_PROGRAM, cwd=None) -> Path:
    """
    Pick the document for this run.

    An explicit path wins, otherwise search upward from ``cwd``.
    """
    if file:
        path = Path(file)
        if not path.is_file():
            raise DocumentNotFound(f"Markdown file not found: {file}")
        return path

    return find_doc(cwd, program)
