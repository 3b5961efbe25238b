"""Interpreters used to run code blocks, keyed by fence language."""

from types import MappingProxyType
from typing import NamedTuple

from .errors import UnsupportedLanguage

# Replaced by the code block body
PLACEHOLDER = "$CODE"


class Interpreter(NamedTuple):
    executable: str
    args: tuple[str, ...]


_SHELL = ("-euc", PLACEHOLDER, "--")

LANGUAGES = MappingProxyType({
    "sh": Interpreter("sh", _SHELL),
    "shell": Interpreter("sh", _SHELL),
    "bash": Interpreter("bash", _SHELL),
    "zsh": Interpreter("zsh", _SHELL),
    "python": Interpreter("python", ("-c", PLACEHOLDER)),
    "python3": Interpreter("python3", ("-c", PLACEHOLDER)),
    "py": Interpreter("python", ("-c", PLACEHOLDER)),
    "js": Interpreter("node", ("-e", PLACEHOLDER)),
    "javascript": Interpreter("node", ("-e", PLACEHOLDER)),
    "node": Interpreter("node", ("-e", PLACEHOLDER)),
    "ruby": Interpreter("ruby", ("-e", PLACEHOLDER)),
    "rb": Interpreter("ruby", ("-e", PLACEHOLDER)),
    "perl": Interpreter("perl", ("-e", PLACEHOLDER)),
    "pl": Interpreter("perl", ("-e", PLACEHOLDER)),
    "php": Interpreter("php", ("-r", PLACEHOLDER)),
    "lua": Interpreter("lua", ("-e", PLACEHOLDER)),
    "pwsh": Interpreter("pwsh", ("-Command", PLACEHOLDER)),
    "powershell": Interpreter("pwsh", ("-Command", PLACEHOLDER)),
})


def is_supported(language: str) -> bool:
    """Check whether a fence language has an interpreter."""
    return language.lower() in LANGUAGES


def get_interpreter(language: str) -> Interpreter:
    try:
        return LANGUAGES[language.lower()]
    except KeyError:
        raise UnsupportedLanguage(language) from None


def build_command(block, args=()) -> list[str]:
    """
    Build the argv that runs a code block.

    The block body (trailing newlines trimmed) replaces the first placeholder
    of the interpreter template; ``args`` are appended after the template.
    """
    interpreter = get_interpreter(block.language)
    code = block.content.rstrip("\n")

    command = [interpreter.executable]
    substituted = False
    for arg in interpreter.args:
        if not substituted and PLACEHOLDER in arg:
            arg = arg.replace(PLACEHOLDER, code, 1)
            substituted = True
        command.append(arg)
    command.extend(args)
    return command
