"""A fixed-width scrolling text buffer that shows what a telnet server sends."""

from __future__ import annotations

from collections import deque

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 200

BACKSPACE = "\b"
TAB = "\t"
CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"


class TerminalBuffer:
    """Rows of characters; text is always written on the bottom row."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.cursor_x = 0
        self._rows: deque[list[str]] = deque(
            ([" "] * width for _ in range(height)), maxlen=height
        )

    def write(self, text: str) -> None:
        """Write ``text`` at the cursor; writing stops at a NUL character."""
        for char in text:
            if char == "\0":
                break
            if char == BACKSPACE:
                self.cursor_x = max(self.cursor_x - 1, 0)
            elif char == TAB:
                self._advance()
            elif char == CARRIAGE_RETURN:
                self.cursor_x = 0
            elif char == LINE_FEED:
                self.scroll()
            else:
                self._rows[-1][self.cursor_x] = char
                self._advance()

    def _advance(self) -> None:
        self.cursor_x += 1
        if self.cursor_x >= self.width:
            self.scroll()
            self.cursor_x = 0

    def scroll(self) -> None:
        """Move every row up by one and start a blank bottom row."""
        self._rows.append([" "] * self.width)

    def row(self, index: int) -> str:
        """Return row ``index`` (negative counts from the bottom) as a string."""
        return "".join(self._rows[index])

    def text(self) -> str:
        """Return all rows, trailing spaces removed, joined by newlines."""
        return "\n".join("".join(row).rstrip() for row in self._rows)