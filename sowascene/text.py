"""String and time helpers."""

from __future__ import annotations

import time


def split(text: str, delimiter: str) -> list[str]:
    """Split *text* on *delimiter*, keeping empty inner tokens but no empty tail."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    tokens = text.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def format_arg_count(fmt: str) -> int:
    """Count the opening braces in a format string."""
    return fmt.count("{")


def get_time(fmt: str = "%Y-%m-%d") -> str:
    """Format the current local time with a strftime pattern."""
    return time.strftime(fmt, time.localtime())