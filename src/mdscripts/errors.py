"""Errors raised while locating, parsing and running markdown scripts."""

from typing import Optional


class MdScriptsError(Exception):
    """Base error. ``exit_code`` is what the CLI exits with."""

    exit_code = 1


class DocumentNotFound(MdScriptsError):
    pass


class HeadingNotFound(MdScriptsError):
    def __init__(self, heading: str):
        super().__init__(f"Cannot find heading: {heading}")
        self.heading = heading


class UnsupportedLanguage(MdScriptsError):
    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language or '(none)'}")
        self.language = language


class InvalidArgument(MdScriptsError):
    pass


class ExecutionFailed(MdScriptsError):
    """A code block exited non-zero or its interpreter could not be spawned."""

    def __init__(
        self,
        language: str,
        returncode: Optional[int] = None,
        spawn_error: Optional[OSError] = None,
        results: Optional[list] = None,
    ):
        if spawn_error is not None:
            message = f"Failed to run {language} code block: {spawn_error}"
        else:
            message = f"{language} code block exited with status {returncode}"
        super().__init__(message)
        self.language = language
        self.returncode = returncode
        self.spawn_error = spawn_error
        self.results = results or []

    @property
    def exit_code(self) -> int:
        if self.returncode is None:
            return 1
        if self.returncode < 0:
            # Killed by a signal
            return 128 - self.returncode
        return self.returncode
