"""Null checks, debug output and a small loop helper."""

from __future__ import annotations

import inspect
import os
import sys
from typing import Any, Callable

NULL_MESSAGE = "Null pointer is not allowed in this context."


class NullValueError(ValueError):
    """Raised when a required value is missing."""


def not_null(value: Any, fail_fast: bool = True) -> bool:
    """Check that ``value`` is not None.

    A missing value is reported on stderr; with ``fail_fast`` it then raises
    :class:`NullValueError`, otherwise it returns False.
    """
    if value is None:
        print(NULL_MESSAGE, file=sys.stderr)
        if fail_fast:
            raise NullValueError(NULL_MESSAGE)
        return False
    return True


def debug_print(message: Any, enabled: bool = False) -> str | None:
    """Print ``message`` tagged with the caller's line and file when enabled."""
    if not enabled:
        return None
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        line = caller.f_lineno
        file_name = os.path.basename(caller.f_code.co_filename)
    else:
        line, file_name = 0, "<unknown>"
    del frame, caller
    text = f"[DEBUG] [{line}:{file_name}] {message}"
    print(text)
    return text


def eat_all_if(condition: Callable[[], bool], func: Callable[[], Any]) -> None:
    """Call ``func`` repeatedly, stopping after the call where ``condition()`` holds."""
    while True:
        func()
        if condition():
            break