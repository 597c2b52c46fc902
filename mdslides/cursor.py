"""
Line cursor shared by the recursive markdown parsing functions.
"""
from typing import List, Optional


def split_lines(text: str) -> List[str]:
    """
    Split *text* at ``\\n``.

    A final line without a terminator is still a line; a trailing terminator
    does not produce an extra empty line. A ``\\r`` left over from CRLF line
    endings is dropped.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineCursor:
    """
    Peekable view over the lines of a text.

    A single instance is passed to every parsing function of one parse call;
    each line is consumed at most once.
    """

    def __init__(self, text: str):
        self._lines = split_lines(text)
        self._position = 0

    def peek(self) -> Optional[str]:
        """Return the current line without consuming it, ``None`` at the end."""
        if self._position < len(self._lines):
            return self._lines[self._position]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the current line, ``None`` at the end."""
        line = self.peek()
        if line is not None:
            self._position += 1
        return line

    def restart(self):
        self._position = 0

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._lines)

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return len(self._lines)
