"""Tool to run a heading's code blocks and collect their output."""

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from ..errors import ExecutionFailed, MdScriptsError
from ..executor import execute_node
from ..parser.hierarchy import find_path
from .loader import load_document

logger = logging.getLogger(__name__)


def run_heading(
    heading: str,
    args: Optional[list[str]] = None,
    file: Optional[str] = None,
    all_languages: bool = False,
) -> dict:
    """
    Run the code blocks under a heading with captured output.

    Args:
        heading: Heading to run (case-insensitive)
        args: Arguments appended to every interpreter command
        file: Markdown file (defaults to the nearest scripts.md, .scripts.md or README.md)
        all_languages: Keep code blocks whose language has no interpreter

    Returns:
        Dict with per-block results, or the error and the results up to it
    """
    document, err = load_document(file, all_languages)
    if err:
        return err

    base_env = dict(os.environ)
    base_env["MD_FILE"] = str(Path(document.path).absolute())
    base_env.setdefault("MD_EXE", "scripts")

    try:
        lineage = find_path(document.roots, heading)
        results = execute_node(lineage[-1], args or [], lineage=lineage, base_env=base_env, capture=True)
    except ExecutionFailed as e:
        logger.warning("Running %s failed: %s", heading, e)
        return {
            "success": False,
            "error": str(e),
            "exit_code": e.exit_code,
            "results": [asdict(result) for result in e.results],
        }
    except MdScriptsError as e:
        return {"error": str(e)}

    return {
        "success": True,
        "heading": lineage[-1].heading,
        "results": [asdict(result) for result in results],
    }
