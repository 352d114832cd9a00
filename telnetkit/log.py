"""Console output helpers: formatted lines, colour scopes and debug logging."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

ANSI_TEXT_COLOR_RESET = "\x1b[0m"

# Room in the line for the text, leaving space for CR, LF and a terminator.
_MAX_TEXT = 4096 - 3 - 1


def format_console_line(format: str, *args: object) -> str:
    """Format a printf-style message, strip trailing whitespace and end it with CRLF.

    The formatted text is cut to at most 4092 characters.
    """
    text = format % args if args else format
    return text[:_MAX_TEXT].rstrip() + "\r\n"


@contextmanager
def color_scope(stream: TextIO, start: str, end: str) -> Iterator[TextIO]:
    """Write ``start`` to ``stream`` now and ``end`` when the block is left."""
    stream.write(start)
    try:
        yield stream
    finally:
        stream.write(end)


def console_out(color: str, format: str, *args: object) -> str:
    """Write a formatted line to standard error in ``color``; return the line."""
    line = format_console_line(format, *args)
    with color_scope(sys.stderr, color, ANSI_TEXT_COLOR_RESET) as stream:
        stream.write(line)
    return line


def console_debug_log(format: str, *args: object) -> str:
    """Send a formatted line to the debug log; return the line."""
    line = format_console_line(format, *args)
    logger.debug("%s", line)
    return line


def console_error_log(format: str, *args: object) -> str:
    """Send a formatted line to the error log; return the line."""
    line = format_console_line(format, *args)
    logger.error("%s", line)
    return line