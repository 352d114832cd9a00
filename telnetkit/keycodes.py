"""Table of named terminal key events and the escape sequences they send."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)

# Codes are kept as the escaped text form (a backslash, "u" and four hex digits).
DEFAULT_KEY_CODES: tuple[tuple[str, str], ...] = (
    ("Arrow Down", "\\u001b[B"),
    ("Arrow Left", "\\u001b[D"),
    ("Arrow Right", "\\u001b[C"),
    ("Arrow Up", "\\u001b[A"),
    ("BackSpace", "\\u0008"),
    ("Back Tab", "\\u001bOP\\u0009"),
    ("Delete", "\\u007f"),
    ("Escape", "\\u001b"),
    ("Linefeed", "\\u000a"),
    ("Return", "\\u000d"),
    ("Tab", "\\u0009"),
    ("F1", "\\u001bOP"),
    ("F2", "\\u001bOQ"),
    ("F3", "\\u001bOR"),
    ("F4", "\\u001bOS"),
    ("F5", "\\u001b[15~"),
    ("F6", "\\u001b[17~"),
    ("F7", "\\u001b[18~"),
    ("F8", "\\u001b[19~"),
    ("F9", "\\u001b[20~"),
    ("F10", "\\u001b[21~"),
    ("F11", "\\u001b[23~"),
    ("F12", "\\u001b[24~"),
    ("F13", "\\u001b[25~"),
    ("F14", "\\u001b[26~"),
    ("F15", "\\u001b[28~"),
    ("F16", "\\u001b[29~"),
    ("F17", "\\u001b[31~"),
    ("F18", "\\u001b[32~"),
    ("F19", "\\u001b[33~"),
    ("F20", "\\u001b[34~"),
    ("0", "\\u001bOp"),
    ("1", "\\u001bOq"),
    ("2", "\\u001bOr"),
    ("3", "\\u001bOs"),
    ("4", "\\u001bOt"),
    ("5", "\\u001bOu"),
    ("6", "\\u001bOv"),
    ("7", "\\u001bOw"),
    ("8", "\\u001bOx"),
    ("9", "\\u001bOy"),
    ("Minus", "\\u001bOm"),
    ("Comma", "\\u001bOl"),
    ("Period", "\\u001bOn"),
    ("Enter", "\\u001bOM"),
    ("ACK", "\\u0006  ( CTRL+F )"),
    ("BELL", "\\u0007  ( CTRL+G )"),
    ("BS", "\\u0008  ( CTRL+H )"),
    ("CAN", "\\u0018  ( CTRL+X )"),
    ("CR", "\\u000d  ( CTRL+M )"),
    ("DC1 or XON", "\\u0011  ( CTRL+Q )"),
    ("DC2", "\\u0012  ( CTRL+R )"),
    ("DC3 or XOFF", "\\u0013  ( CTRL+S )"),
    ("DC4", "\\u0014  ( CTRL+T )"),
    ("DLE", "\\u0010  ( CTRL+P )"),
    ("EM", "\\u0019  ( CTRL+Y )"),
    ("ENQ", "\\u0005  ( CTRL+E )"),
    ("EOT", "\\u0004  ( CTRL+D )"),
    ("ESC", "\\u001b  ( CTRL+[ )"),
    ("ETB", "\\u0017  (&nbsp;CTRL+W&nbsp;)"),
    ("ETX", "\\u0003  ( CTRL+C )"),
    ("FF", "\\u000c  ( CTRL+L )"),
    ("FS", "\\u001c  ( CTRL+\\ )"),
    ("GS", "\\u001d  ( CTRL+] )"),
    ("HT", "\\u0009  ( CTRL+I )"),
    ("LF", "\\u000a  ( CTRL+J )"),
    ("NAK", "\\u0015  ( CTRL+U )"),
    ("NUL", "\\u0000  (&nbsp;CTRL+SpaceBar&nbsp;)"),
    ("RS", "\\u001e  ( CTRL+~ )"),
    ("SI", "\\u000f  ( CTRL+O )"),
    ("SO", "\\u000e  ( CTRL+N )"),
    ("SOH", "\\u0001  ( CTRL+A )"),
    ("STX", "\\u0002  ( CTRL+B )"),
    ("SUB", "\\u001a  ( CTRL+Z )"),
    ("SYN", "\\u0016  ( CTRL+V )"),
    ("US", "\\u001f  ( CTRL+? )"),
    ("VT", "\\u000b  ( CTRL+K )"),
    ("Do", "\\u001b[29~"),
    ("Find", "\\u001b[1~"),
    ("Help", "\\u001b[28~"),
    ("Insert", "\\u001b[2~"),
    ("KeyEnd", "\\u001b[F"),
    ("KeyHome", "\\u001b[H"),
    ("NextScn", "\\u001b[6~"),
    ("PrevScn", "\\u001b[5~"),
    ("Remove", "\\u001b[3~"),
    ("Select", "\\u001b[44~"),
)


class KeyCodeTable:
    """A mapping from key event names to the codes a terminal sends for them."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._codes: dict[str, str] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, key: object) -> bool:
        return key in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._codes[key] = value

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if there is none."""
        return self._codes.get(key)

    def initialize_key_codes(self) -> None:
        """Add every default key code to the table."""
        for name, code in DEFAULT_KEY_CODES:
            logger.debug('add "%s"', name)
            self.put(name, code)

    def initialize_data(self) -> None:
        """Fill the table with its default data."""
        logger.debug("initialize key codes")
        self.initialize_key_codes()

    def reset(self) -> None:
        """Remove every entry."""
        logger.debug("reset")
        self._codes.clear()

    def count(self) -> int:
        """Return the number of entries."""
        size = len(self._codes)
        logger.debug("count: %d", size)
        return size

    def find(self, key: str) -> bool:
        """Return True if ``key`` has an entry."""
        if key in self._codes:
            logger.debug("find(%s): FOUND. Values: %s=%s", key, key, self._codes[key])
            return True
        logger.debug("find(%s): NOT FOUND.", key)
        return False

    def key_exists(self, key: str) -> bool:
        """Return True if ``key`` has an entry."""
        return self.find(key)

    def get_code(self, key: str) -> str | None:
        """Return the code for the key event ``key``, or None if it is unknown."""
        return self.get(key)

    def dump_content(self) -> list[str]:
        """Log every entry and return the logged lines, in insertion order."""
        lines = [f"[{index}] {key} = {value}" for index, (key, value) in enumerate(self._codes.items())]
        for line in lines:
            logger.debug(line)
        return lines

    def self_test(self) -> bool:
        """Reload the defaults and check a few lookups; return True if all behave."""
        logger.warning("reset: flushing all default entries")
        self.reset()
        logger.debug("currently %d entries", len(self._codes))
        logger.warning("initialize data: loading all default entries")
        self.initialize_data()
        logger.debug("currently %d entries", len(self._codes))

        checks = [
            self.find("Insert"),
            self.find("Delete"),
            not self.find("InvalidKey"),
            self.get_code("Insert") is not None,
            self.get_code("KeyEnd") is not None,
        ]
        logger.debug('get_code(Insert): "%s"', self.get_code("Insert"))
        logger.debug('get_code(KeyEnd): "%s"', self.get_code("KeyEnd"))
        return all(checks)