"""Choosing the host and port to connect to."""

from __future__ import annotations

import re

MIN_CONNECTION_PORT = 20
MAX_CONNECTION_PORT = 65535

DEFAULT_PORT_TEXT = "23"
DEFAULT_HOSTS: tuple[str, ...] = ("192.168.0.101", "172.29.64.1", "127.0.0.1")

_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def clamp_port(port: int) -> int:
    """Limit ``port`` to the range of ports a connection may use."""
    return max(MIN_CONNECTION_PORT, min(port, MAX_CONNECTION_PORT))


def parse_port(text: str) -> int:
    """Read a port number from the start of ``text`` and clamp it to the allowed range.

    Leading whitespace is skipped and reading stops at the first character
    that is not a digit; text without a number counts as 0. A negative number
    is out of range on the high side, as the port is an unsigned quantity.
    """
    match = _LEADING_INTEGER.match(text)
    value = int(match.group(1)) if match else 0
    if value < 0:
        return MAX_CONNECTION_PORT
    return clamp_port(value)