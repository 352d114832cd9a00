"""Telnet option negotiation: splitting incoming data and building replies."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

IAC = 255
DONT = 254
DO = 253
WONT = 252
WILL = 251
SB = 250
SE = 240

IS = ord("0")
SEND = ord("1")
INFO = ord("2")
VAR = ord("0")
VALUE = ord("1")
ESC = ord("2")
USERVAR = ord("3")

OPTION_ECHO = 1
OPTION_SUPPRESS_GO_AHEAD = 3

# Options this side agrees to negotiate.
SUPPORTED_OPTIONS = frozenset({OPTION_ECHO, OPTION_SUPPRESS_GO_AHEAD})

NEGOTIATION_VERBS = frozenset({DO, DONT, WILL, WONT})

# Reply verb for each request verb, for supported and refused options.
_ACCEPT = {DO: WILL, DONT: WONT, WILL: DO, WONT: DONT}
_REFUSE = {DO: WONT, DONT: WONT, WILL: DONT, WONT: DONT}


def normalize_line(data: bytes) -> bytes:
    """Turn every CR into CR LF and drop bare LF characters."""
    return data.replace(b"\n", b"").replace(b"\r", b"\r\n")


def split_options(data: bytes) -> tuple[bytes, list[bytes]]:
    """Separate plain text from telnet commands.

    Returns the text with commands removed and the list of negotiation
    commands (``IAC verb option`` and ``IAC SB ... SE`` sequences) in the
    order they appeared. A doubled IAC stands for a literal 0xFF byte; other
    two-byte commands are dropped.
    """
    text = bytearray()
    options: list[bytes] = []
    position = 0
    size = len(data)
    while position < size:
        index = data.find(bytes([IAC]), position)
        if index == -1:
            text += data[position:]
            break
        text += data[position:index]
        if index + 1 >= size:
            break
        command = data[index + 1]
        if command in NEGOTIATION_VERBS:
            options.append(bytes(data[index:index + 3]))
            position = index + 3
        elif command == IAC:
            text.append(IAC)
            position = index + 2
        elif command == SB:
            end = data.find(bytes([SE]), index + 2)
            if end == -1:
                end = size - 1
            options.append(bytes(data[index:end + 1]))
            position = end + 1
        else:
            position = index + 2
    return bytes(text), options


def arrange_reply(option: bytes) -> bytes:
    """Build the reply to one negotiation command, or b"" if none is owed."""
    if len(option) < 3:
        return b""
    verb = option[1]
    code = option[2]
    if code in SUPPORTED_OPTIONS:
        if verb in _ACCEPT:
            return bytes([IAC, _ACCEPT[verb], code])
        if verb == SB and len(option) > 3 and option[3] == SEND:
            return bytes([IAC, SB, code, IS, IAC, SE])
        return b""
    if verb in _REFUSE:
        return bytes([IAC, _REFUSE[verb], code])
    return b""


def respond_to_options(options: Iterable[bytes]) -> bytes:
    """Concatenate the replies to all ``options``, in order."""
    return b"".join(arrange_reply(option) for option in options)


@dataclass
class TelnetProtocol:
    """Processes data received from a telnet server."""

    processed_lines: int = 0

    def feed(self, data: bytes) -> tuple[str, bytes]:
        """Process one received block; return its display text and the reply to send."""
        if not data:
            return "", b""
        self.processed_lines += 1
        line = normalize_line(data)
        text, options = split_options(line)
        reply = respond_to_options(options)
        logger.debug("received %d bytes, %d options", len(data), len(options))
        return text.decode("latin-1"), reply