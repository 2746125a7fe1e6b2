"""A small multi-line text editor for creature notes."""

from __future__ import annotations

_TAB_WIDTH = 4

_MOVE_KEYS = {
    "Left": "left",
    "Right": "right",
    "Up": "up",
    "Down": "down",
    "Home": "head",
    "End": "end",
}


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines or [""]


class NotesEditor:
    """Editable lines of text with a cursor at ``(row, column)``."""

    def __init__(self, text: str = "") -> None:
        self.lines = _split_lines(text)
        self.row = 0
        self.col = 0

    @property
    def cursor(self) -> tuple[int, int]:
        return self.row, self.col

    def text(self) -> str:
        """The whole text, lines joined with newlines."""
        return "\n".join(self.lines)

    def insert(self, ch: str) -> None:
        """Insert text at the cursor; newlines break the line."""
        for char in ch:
            if char == "\n":
                self.newline()
                continue
            line = self.lines[self.row]
            self.lines[self.row] = line[: self.col] + char + line[self.col :]
            self.col += 1

    def newline(self) -> None:
        """Break the current line at the cursor."""
        line = self.lines[self.row]
        self.lines[self.row] = line[: self.col]
        self.lines.insert(self.row + 1, line[self.col :])
        self.row += 1
        self.col = 0

    def backspace(self) -> bool:
        """Delete the character before the cursor, joining lines at a line start."""
        line = self.lines[self.row]
        if self.col > 0:
            self.lines[self.row] = line[: self.col - 1] + line[self.col :]
            self.col -= 1
            return True
        if self.row > 0:
            previous = self.lines[self.row - 1]
            self.lines[self.row - 1] = previous + line
            del self.lines[self.row]
            self.row -= 1
            self.col = len(previous)
            return True
        return False

    def delete(self) -> bool:
        """Delete the character under the cursor, joining lines at a line end."""
        line = self.lines[self.row]
        if self.col < len(line):
            self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
            return True
        if self.row < len(self.lines) - 1:
            self.lines[self.row] = line + self.lines.pop(self.row + 1)
            return True
        return False

    def move(self, direction: str) -> None:
        """Move the cursor: left, right, up, down, head, end, top or bottom."""
        if direction == "left":
            if self.col > 0:
                self.col -= 1
            elif self.row > 0:
                self.row -= 1
                self.col = len(self.lines[self.row])
        elif direction == "right":
            if self.col < len(self.lines[self.row]):
                self.col += 1
            elif self.row < len(self.lines) - 1:
                self.row += 1
                self.col = 0
        elif direction == "up":
            if self.row > 0:
                self.jump(self.row - 1, self.col)
        elif direction == "down":
            self.jump(self.row + 1, self.col)
        elif direction == "head":
            self.col = 0
        elif direction == "end":
            self.col = len(self.lines[self.row])
        elif direction == "top":
            self.jump(0, self.col)
        elif direction == "bottom":
            self.jump(len(self.lines) - 1, self.col)
        else:
            raise ValueError(f"unknown direction: {direction!r}")

    def jump(self, row: int, col: int) -> None:
        """Place the cursor, clamped to the text."""
        self.row = max(0, min(row, len(self.lines) - 1))
        self.col = max(0, min(col, len(self.lines[self.row])))

    def handle_key(self, key: str) -> bool:
        """Apply a key press; return whether the key was used."""
        if key == "Enter":
            self.newline()
        elif key == "Tab":
            self.insert(" " * (_TAB_WIDTH - self.col % _TAB_WIDTH))
        elif key == "Backspace":
            self.backspace()
        elif key == "Delete":
            self.delete()
        elif key in _MOVE_KEYS:
            self.move(_MOVE_KEYS[key])
        elif len(key) == 1 and key.isprintable():
            self.insert(key)
        else:
            return False
        return True