"""Command-line entry point: run markdown code blocks by their heading."""

import argparse
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Optional

from .errors import InvalidArgument, MdScriptsError
from .executor import execute_node
from .hint import render_hint
from .locator import DEFAULT_PROGRAM, candidate_names, resolve_document
from .parser.hierarchy import find_path
from .parser.markdown import dump_syntax_tree, node_markdown, read_document

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad usage."""

    def error(self, message):
        raise InvalidArgument(message)


def program_name(argv0: str) -> str:
    name = Path(argv0).name
    if not name or name.endswith(".py"):
        return DEFAULT_PROGRAM
    return name


def build_parser(program: str) -> argparse.ArgumentParser:
    names = ", ".join(candidate_names(program))
    parser = _ArgumentParser(
        prog=program,
        usage="%(prog)s [OPTION]... [HEADING] [ARG]...",
        description="Run markdown code blocks by its heading.",
        epilog=f"Without --file, the nearest of {names} in the current or a parent directory is used.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug information")
    parser.add_argument("-h", "--help", action="store_true", help="Print this help message")
    parser.add_argument("-a", "--all", action="store_true", help="Enable code blocks in all languages")
    parser.add_argument("-m", "--markdown", action="store_true", help="Print node markdown")
    parser.add_argument("-c", "--code", action="store_true", help="Print node code blocks")
    parser.add_argument("-f", "--file", metavar="FILE", help="Specify the file to parse")
    parser.add_argument("--debug-ast", action="store_true", help="Print the markdown syntax tree")
    return parser


# Long option that takes the next argument as its value
_FILE_OPTION = "--file"


def split_argv(argv: list[str]) -> tuple[list[str], Optional[str], list[str]]:
    """
    Split argv into (options, heading, trailing args) at the first non-option.

    Everything after the heading is passed through untouched, ``--`` included.
    """
    index = 0
    while index < len(argv):
        arg = argv[index]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        if arg == _FILE_OPTION or (arg[1] != "-" and arg.find("f", 1) == len(arg) - 1):
            # --file FILE, -f FILE, or a flag cluster ending in f such as -vf FILE
            index += 1
        index += 1

    if index >= len(argv):
        return argv, None, []
    return argv[:index], argv[index], argv[index + 1:]


def parse_command_line(parser: argparse.ArgumentParser, argv: list[str]) -> argparse.Namespace:
    option_args, heading, args = split_argv(argv)
    options = parser.parse_args(option_args)
    options.heading = heading
    options.args = args
    return options


def md_exe(exe: str) -> str:
    """
    Command that re-invokes this tool, exported to code blocks as MD_EXE.

    Under ``python -m mdscripts`` argv[0] is a .py file, so the interpreter
    command line is used instead; it must then be expanded unquoted.
    """
    if exe.endswith(".py"):
        return shlex.join([sys.executable, "-m", "mdscripts"])
    return exe


def configure_logging(program: str, verbose: bool = False) -> None:
    """Send package log records to stderr, prefixed with the program name."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(program.replace("%", "%%") + " %(levelname)s: %(message)s"))
    package_logger = logging.getLogger(__package__)
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def run(options: argparse.Namespace, program: str, exe: str) -> int:
    path = resolve_document(options.file, program)
    logger.info("Using markdown file: %s", path)

    document = read_document(path, all_languages=options.all)
    if options.debug_ast:
        sys.stdout.write(dump_syntax_tree(document.source))

    if options.heading is None:
        logger.info("No heading specified, printing hints")
        if options.markdown:
            sys.stdout.write(document.source)
            return 0
        hint = render_hint(document.roots, verbose=options.verbose)
        if hint:
            sys.stdout.write(hint)
        else:
            logger.warning("No runnable headings in %s", path)
        return 0

    logger.info("heading: %s, argument count: %d", options.heading, len(options.args))
    lineage = find_path(document.roots, options.heading)
    node = lineage[-1]
    logger.info("Found node: %s", node.heading)

    if options.markdown or options.code:
        if options.markdown:
            sys.stdout.write(node_markdown(document, node))
        if options.code:
            logger.info("Printing code blocks")
            for block in node.code_blocks:
                sys.stdout.write(block.content)
        return 0

    base_env = dict(os.environ)
    base_env["MD_FILE"] = str(path.absolute())
    base_env["MD_EXE"] = md_exe(exe)

    sys.stdout.flush()
    execute_node(node, options.args, lineage=lineage, base_env=base_env)
    return 0


def main(argv: Optional[list[str]] = None, exe: Optional[str] = None) -> int:
    """Entry point for the ``scripts`` command. Returns the exit code."""
    exe = exe or (sys.argv[0] if sys.argv and sys.argv[0] else DEFAULT_PROGRAM)
    program = program_name(exe)
    parser = build_parser(program)

    try:
        options = parse_command_line(parser, sys.argv[1:] if argv is None else list(argv))
    except InvalidArgument as e:
        configure_logging(program)
        logger.error("%s", e)
        parser.print_usage(sys.stderr)
        return e.exit_code

    configure_logging(program, options.verbose)
    logger.debug("flags: %s", vars(options))

    if options.help:
        parser.print_help(sys.stdout)
        return 0

    try:
        return run(options, program, exe)
    except MdScriptsError as e:
        logger.error("%s", e)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
