"""Decorators for command functions."""

import functools
import logging
import time
import traceback
from collections.abc import Callable

import typer

from taskrecur.exceptions import InvalidPatternError, UnknownPresetError
from taskrecur.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    get_exit_code_name,
)
from taskrecur.utils.logger import get_logger
from taskrecur.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with logging and uniform error reporting.

    Invalid rules exit with ERROR_INVALID_ARGS (every validation message is
    printed), unknown presets with ERROR_NOT_FOUND, anything unexpected with
    ERROR_GENERAL.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except AppError as e:
            _fail(logger, cmd, start, e, e.exit_code, [str(e)])

        except InvalidPatternError as e:
            _fail(logger, cmd, start, e, ERROR_INVALID_ARGS, e.errors)

        except UnknownPresetError as e:
            _fail(logger, cmd, start, e, ERROR_NOT_FOUND, [str(e)])

        except typer.Exit:
            # Typer's own exits (cancelled prompts, explicit Exit(0))
            raise

        except Exception as e:
            logger.debug(traceback.format_exc())
            _fail(
                logger, cmd, start, e, ERROR_GENERAL,
                [f"An unexpected error occurred: {str(e)}"],
            )

    return wrapper


def _fail(
    logger: logging.Logger,
    cmd: str,
    start: float,
    error: Exception,
    exit_code: int,
    messages: list[str],
) -> None:
    logger.error(
        "command failed: %s (%.3fs) %s - %s",
        cmd,
        time.monotonic() - start,
        get_exit_code_name(exit_code),
        str(error),
    )
    for message in messages:
        format_error(message)
    raise typer.Exit(code=exit_code) from error
