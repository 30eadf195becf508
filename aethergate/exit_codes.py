"""
Standard exit codes for aethergate commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # Load, render or write failure; unknown verb


def get_exit_code_for_exception(exc: BaseException) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        The exception's own ``exit_code`` when it carries one, otherwise
        GENERAL_ERROR
    """
    code = getattr(exc, 'exit_code', None)
    if isinstance(code, int):
        return code
    return GENERAL_ERROR


def exit_with_code(code: int, message: Optional[str] = None):
    """
    Exit with a specific code and optional message.

    Args:
        code: Exit code
        message: Optional message to print to stderr
    """
    import sys
    if message:
        print(message, file=sys.stderr)
    sys.exit(code)
