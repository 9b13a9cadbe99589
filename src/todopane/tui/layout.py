"""Screen partitioning for the two list panes.

Narrow terminals show only the focused pane; wide ones show both side by
side. The bottom row always belongs to the status line.
"""

from __future__ import annotations

from todopane.tui.canvas import Region
from todopane.tui.viewport import PaneKind

SINGLE_PANE_MAX_WIDTH = 55
STATUS_ROWS = 1


def list_area(width: int, height: int) -> Region:
    """Region left for the panes once the status row is taken."""
    return Region(0, 0, max(0, width), max(0, height - STATUS_ROWS))


def status_row(height: int) -> int:
    return max(0, height - STATUS_ROWS)


def pane_regions(
    width: int,
    height: int,
    focus: PaneKind,
    single_pane_max_width: int = SINGLE_PANE_MAX_WIDTH,
) -> list[tuple[PaneKind, Region]]:
    """
    Assign screen regions to the panes that should be drawn.

    - width <= single_pane_max_width: only the focused pane, full area
    - otherwise: pending on the left with the odd column, completed right
    """
    area = list_area(width, height)
    if area.width <= single_pane_max_width:
        return [(focus, area)]

    left_width = (area.width + 1) // 2
    right_width = area.width // 2
    return [
        (PaneKind.PENDING, Region(area.x, area.y, left_width, area.height)),
        (PaneKind.COMPLETED, Region(area.x + left_width, area.y, right_width, area.height)),
    ]
