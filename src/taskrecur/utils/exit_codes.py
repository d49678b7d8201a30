"""Exit codes for the taskrecur CLI.

Scripts can tell an invalid rule (2) from a missing preset, config key or
fields file (5) and from an unexpected failure (1).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR_GENERAL = 1
    ERROR_INVALID_ARGS = 2
    ERROR_NOT_FOUND = 5


SUCCESS = ExitCode.SUCCESS
ERROR_GENERAL = ExitCode.ERROR_GENERAL
ERROR_INVALID_ARGS = ExitCode.ERROR_INVALID_ARGS
ERROR_NOT_FOUND = ExitCode.ERROR_NOT_FOUND

_DESCRIPTIONS = {
    ExitCode.SUCCESS: "Command executed successfully",
    ExitCode.ERROR_GENERAL: "A general error occurred",
    ExitCode.ERROR_INVALID_ARGS: "Invalid arguments or recurrence rule",
    ExitCode.ERROR_NOT_FOUND: "Preset, config key or file not found",
}


def get_exit_code_name(code: int) -> str:
    """Return the symbolic name of *code*, e.g. ``ERROR_NOT_FOUND``."""
    try:
        return ExitCode(code).name
    except ValueError:
        return f"UNKNOWN({code})"


def get_exit_code_description(code: int) -> str:
    try:
        return _DESCRIPTIONS[ExitCode(code)]
    except ValueError:
        return "Unknown error"
