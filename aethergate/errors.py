"""
Error taxonomy for aethergate.

Every failure in the load, render and write pipeline is raised as one of
the classes below. Callers add a single context phrase with
``with_context`` and re-raise; nothing is retried or recovered locally.
"""

from .exit_codes import GENERAL_ERROR


class AethergateError(Exception):
    """
    Base class for pipeline errors.

    Carries the exit code the command line reports when the error
    reaches it.
    """

    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def with_context(self, phrase: str) -> 'AethergateError':
        """Return an error of the same class with ``phrase`` prepended.

        The original error becomes the new one's ``__cause__``.
        """
        wrapped = self.__class__(f"{phrase}: {self.message}", self.exit_code)
        wrapped.__cause__ = self
        return wrapped

    def __str__(self) -> str:
        return self.message


class NotFoundError(AethergateError):
    """Raised when the configuration or layout file does not exist."""


class ParseError(AethergateError):
    """Raised when the configuration is not valid TOML or has the wrong shape."""


class FilesystemError(AethergateError):
    """Raised when creating, removing, reading or writing a path fails."""


class WriteError(FilesystemError):
    """Raised when the default configuration cannot be written."""


class TemplateParseError(AethergateError):
    """Raised when a template has a syntax error."""


class TemplateExecError(AethergateError):
    """Raised when substituting values into a template fails."""


class MinifyError(AethergateError):
    """Raised when the minifier rejects a rendered document."""
