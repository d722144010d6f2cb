# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI utility functions for output handling and error reporting."""

import functools
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, NoReturn, TextIO

from rich.console import Console

from ..errors import BsvWrapError, OutputTargetError

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def error_exit(error: BsvWrapError) -> NoReturn:
    """Print a bsvwrap error and exit with its exit code."""
    console.print(error.format_for_console(), soft_wrap=True)
    sys.exit(error.exit_code)


def reports_errors(func: Callable) -> Callable:
    """Turn bsvwrap errors raised by a command into a message and exit code."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BsvWrapError as e:
            logger.debug("Generation aborted", exc_info=True)
            error_exit(e)
    return wrapper


@contextmanager
def open_output(path: Path) -> Iterator[TextIO]:
    """Open the output file for writing, truncating it, and close it on exit.

    Raises:
        OutputTargetError: If the file cannot be opened, written or closed;
            carries the OS error text
    """
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputTargetError(f"Can't open file `{path}' for writing: {e.strerror}") from e

    try:
        with f:
            yield f
    except OSError as e:
        raise OutputTargetError(f"Can't write file `{path}': {e.strerror}") from e
