"""List viewport: one item list with selection, scrolling and drawing.

The same class backs both panes. What differs between the pending and
completed pane (title, checkbox glyph, where confirmed items go) lives in
a small PaneConfig looked up by PaneKind.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from todopane.tui.canvas import Canvas, Region
from todopane.tui.wrap import wrap, wrapped_height

CHECKBOX_WIDTH = 4
PALETTE_SIZE = 12


def _build_palette(size: int) -> tuple[str, ...]:
    colors = []
    for step in range(size):
        r, g, b = colorsys.hsv_to_rgb(step / size, 0.55, 1.0)
        colors.append(f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}")
    return tuple(colors)


# Fixed hue rotation, one color per item position modulo the palette size.
PALETTE = _build_palette(PALETTE_SIZE)


class PaneKind(Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def other(self) -> "PaneKind":
        """Pane that confirmed items are transferred to."""
        if self is PaneKind.PENDING:
            return PaneKind.COMPLETED
        return PaneKind.PENDING


@dataclass(frozen=True)
class PaneConfig:
    title: str
    checkbox: str


PANE_CONFIGS = {
    PaneKind.PENDING: PaneConfig(title="TODO", checkbox="[ ] "),
    PaneKind.COMPLETED: PaneConfig(title="DONE", checkbox="[x] "),
}


class ListViewport:
    """
    An ordered list of items with a selection index and a scroll offset.

    Invariants kept by every mutation:
    - selection < len(items), or selection == 0 when empty
    - scroll >= 0
    """

    def __init__(self, kind: PaneKind, items: Optional[list[str]] = None) -> None:
        self.kind = kind
        self.config = PANE_CONFIGS[kind]
        self.items: list[str] = list(items or [])
        self.selection = 0
        self.scroll = 0

    def __len__(self) -> int:
        return len(self.items)

    def _clamp_selection(self) -> None:
        if not self.items:
            self.selection = 0
        else:
            self.selection = min(max(0, self.selection), len(self.items) - 1)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def move_up(self) -> bool:
        if not self.items:
            return False
        self.selection = (self.selection - 1) % len(self.items)
        return True

    def move_down(self) -> bool:
        if not self.items:
            return False
        self.selection = (self.selection + 1) % len(self.items)
        return True

    def move_to_top(self) -> bool:
        if not self.items:
            return False
        self.selection = 0
        return True

    def move_to_bottom(self) -> bool:
        if not self.items:
            return False
        self.selection = len(self.items) - 1
        return True

    # -------------------------------------------------------------------------
    # Reordering
    # -------------------------------------------------------------------------

    def shift_up(self) -> bool:
        """Drag the current item up; the first item rotates to the end."""
        if not self.items:
            return False
        index = self.selection
        if index == 0:
            self.items.append(self.items.pop(0))
            self.selection = len(self.items) - 1
        else:
            self.items[index - 1], self.items[index] = (
                self.items[index],
                self.items[index - 1],
            )
            self.selection = index - 1
        return True

    def shift_down(self) -> bool:
        """Drag the current item down; the last item rotates to the front."""
        if not self.items:
            return False
        index = self.selection
        if index == len(self.items) - 1:
            self.items.insert(0, self.items.pop())
            self.selection = 0
        else:
            self.items[index + 1], self.items[index] = (
                self.items[index],
                self.items[index + 1],
            )
            self.selection = index + 1
        return True

    def sort(self) -> bool:
        """Sort items by text; the selection keeps pointing at its item."""
        if not self.items:
            return False
        order = sorted(range(len(self.items)), key=lambda i: self.items[i])
        self.items = [self.items[i] for i in order]
        self.selection = order.index(self.selection)
        return True

    # -------------------------------------------------------------------------
    # Insertion / removal
    # -------------------------------------------------------------------------

    def insert(self, item: str, position: int) -> int:
        """Insert item at position (clamped to the list). Returns the index used."""
        position = min(max(0, position), len(self.items))
        self.items.insert(position, item)
        return position

    def insert_before(self, item: str) -> None:
        self.selection = self.insert(item, self.selection)

    def insert_after(self, item: str) -> None:
        position = self.selection + 1 if self.items else 0
        self.selection = self.insert(item, position)

    def push(self, item: str) -> None:
        self.items.append(item)

    def remove(self) -> Optional[str]:
        """Remove and return the current item, or None when empty."""
        if not self.items:
            return None
        item = self.items.pop(self.selection)
        self._clamp_selection()
        return item

    def set_current(self, text: str) -> bool:
        if not self.items:
            return False
        self.items[self.selection] = text
        return True

    def clone_current(self) -> Optional[str]:
        if not self.items:
            return None
        return self.items[self.selection]

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @staticmethod
    def line_width(pane_width: int) -> int:
        return max(1, pane_width - CHECKBOX_WIDTH)

    def selection_row(self, pane_width: int) -> int:
        """Display row of the current item's first fragment (row 0 is the title)."""
        width = self.line_width(pane_width)
        rows = sum(wrapped_height(item, width) for item in self.items[: self.selection])
        return rows + 1

    def scroll_into_view(self, pane_width: int, pane_height: int) -> int:
        """Adjust scroll so the selection row is visible. Returns the selection row."""
        row = self.selection_row(pane_width)
        below = row + 1 > pane_height + self.scroll
        above = row <= self.scroll
        if below or above:
            if row > self.scroll:
                self.scroll = max(0, row + 1 - pane_height)
            else:
                self.scroll = row - 1
        return row

    def draw(self, canvas: Canvas, region: Region, focused: bool = False) -> tuple[int, int]:
        """
        Draw the title and the visible wrapped items into region.

        Returns the cursor cell: column of the pane origin, row of the
        selection's first fragment.
        """
        row = self.scroll_into_view(region.width, region.height)
        width = self.line_width(region.width)

        title_style = "bold reverse" if focused else "bold"
        canvas.fill(region.x, region.y, region.width, title_style)
        title = f" {self.config.title} ({len(self.items)})"
        canvas.put(region.x, region.y, title[: region.width], title_style)

        blank = " " * CHECKBOX_WIDTH
        hidden = self.scroll
        visible = 0
        for index, item in enumerate(self.items):
            color = PALETTE[index % PALETTE_SIZE]
            for fragment_no, fragment in enumerate(wrap(item, width)):
                if hidden > 0:
                    hidden -= 1
                    continue
                if visible > region.height - 2:
                    break
                y = region.y + 1 + visible
                prefix = self.config.checkbox if fragment_no == 0 else blank
                canvas.put(region.x, y, prefix)
                canvas.put(region.x + CHECKBOX_WIDTH, y, fragment[:width], color)
                visible += 1
            if visible > region.height - 2:
                break

        offset = row - self.scroll
        if offset < 1:
            offset = 1
        return region.x, region.y + offset
