"""Fixed-size character grid the panes draw into.

Views write styled text at absolute cells; the board widget turns the
grid into a single rich Text for Textual to paint.
"""

from __future__ import annotations

from typing import NamedTuple

from rich.text import Text

CURSOR_STYLE = "reverse"


class Region(NamedTuple):
    """A rectangle of cells: origin column/row plus size."""

    x: int
    y: int
    width: int
    height: int


class Canvas:
    """A width x height grid of (character, style) cells plus a cursor."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: list[list[tuple[str, str]]] = [
            [(" ", "")] * self.width for _ in range(self.height)
        ]
        self.cursor: tuple[int, int] | None = None

    def put(self, x: int, y: int, text: str, style: str = "") -> int:
        """Write text starting at (x, y), clipped to the grid.

        Returns the number of cells written.
        """
        if y < 0 or y >= self.height:
            return 0
        row = self._cells[y]
        written = 0
        for offset, char in enumerate(text):
            col = x + offset
            if col >= self.width:
                break
            if col < 0:
                continue
            row[col] = (char, style)
            written += 1
        return written

    def fill(self, x: int, y: int, width: int, style: str = "") -> None:
        self.put(x, y, " " * max(0, width), style)

    def move_cursor(self, x: int, y: int) -> None:
        """Place the cursor, clamped into the grid."""
        if not self.width or not self.height:
            self.cursor = None
            return
        self.cursor = (
            min(max(0, x), self.width - 1),
            min(max(0, y), self.height - 1),
        )

    def char_at(self, x: int, y: int) -> str:
        return self._cells[y][x][0]

    def style_at(self, x: int, y: int) -> str:
        return self._cells[y][x][1]

    def lines(self) -> list[str]:
        """Plain text of every row, styles dropped."""
        return ["".join(char for char, _ in row) for row in self._cells]

    def to_text(self) -> Text:
        """Build one rich Text, merging runs of equally styled cells."""
        result = Text(no_wrap=True, overflow="crop", end="")
        for y, row in enumerate(self._cells):
            if y:
                result.append("\n")
            run = ""
            run_style = None
            for x, (char, style) in enumerate(row):
                if self.cursor == (x, y):
                    style = f"{style} {CURSOR_STYLE}".strip()
                if style != run_style and run:
                    result.append(run, style=run_style or None)
                    run = ""
                run_style = style
                run += char
            if run:
                result.append(run, style=run_style or None)
        return result
