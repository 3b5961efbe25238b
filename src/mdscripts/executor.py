"""Run the code blocks of a heading."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .errors import ExecutionFailed
from .languages import build_command
from .parser.hierarchy import merge_env
from .parser.markdown import CommandNode

logger = logging.getLogger(__name__)


@dataclass
class BlockResult:
    """Outcome of one code block. Output is only set when captured."""
    language: str
    returncode: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None


def execute_node(
    node: CommandNode,
    args: Sequence[str] = (),
    lineage: Sequence[CommandNode] = (),
    base_env: Optional[Mapping[str, str]] = None,
    capture: bool = False,
) -> list[BlockResult]:
    """
    Run every code block of a node in document order.

    Args:
        node: The heading to run
        args: Trailing arguments appended to each interpreter command
        lineage: Ancestors of ``node``, root first; the node itself may be last
        base_env: Environment to start from (defaults to os.environ)
        capture: Capture stdout/stderr instead of inheriting the terminal

    Returns:
        One BlockResult per code block

    Raises:
        UnsupportedLanguage: if a block's language has no interpreter
        ExecutionFailed: on the first block that fails; later blocks are skipped
    """
    chain = list(lineage)
    if not chain or chain[-1] is not node:
        chain.append(node)
    env = merge_env(chain, base_env)

    results: list[BlockResult] = []
    for block in node.code_blocks:
        command = build_command(block, args)
        logger.debug("Running %s block under %s with %d argument(s)", block.language, node.heading, len(args))

        try:
            if capture:
                completed = subprocess.run(
                    command,
                    env=env,
                    stdin=subprocess.DEVNULL,
                    capture_output=True,
                    text=True,
                )
            else:
                completed = subprocess.run(command, env=env)
        except OSError as e:
            raise ExecutionFailed(block.language, spawn_error=e, results=results) from e

        results.append(BlockResult(
            language=block.language,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        ))
        if completed.returncode != 0:
            raise ExecutionFailed(block.language, returncode=completed.returncode, results=results)

    return results
