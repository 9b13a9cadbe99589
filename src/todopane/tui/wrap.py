"""Word wrapping for list items.

Breaks one item into display fragments that fit a pane column.
Breaks happen on whitespace or punctuation; a word longer than the
line is force-split.
"""

from __future__ import annotations


def _last_break(text: str, limit: int) -> int | None:
    """Index of the last usable break before text overflows limit.

    Whitespace may sit at limit itself (it is dropped); punctuation must
    leave room for itself on the fragment.
    """
    found = None
    for index in range(1, limit + 1):
        char = text[index]
        if char.isspace() or (index < limit and not char.isalnum()):
            found = index
    return found


def wrap(text: str, max_width: int) -> list[str]:
    """
    Split text into fragments no wider than max_width.

    Whitespace at a cut is dropped, punctuation stays on the fragment it
    ends. A single word that cannot fit is cut into max_width - 1 wide
    pieces. Always returns at least one fragment ("" for blank input).
    """
    limit = max(1, max_width - 1)
    remaining = text.strip()
    fragments: list[str] = []

    while len(remaining) > limit:
        cut = _last_break(remaining, limit)
        if cut is None:
            fragments.append(remaining[:limit])
            remaining = remaining[limit:].lstrip()
        elif remaining[cut].isspace():
            fragments.append(remaining[:cut].rstrip())
            remaining = remaining[cut:].lstrip()
        else:
            fragments.append(remaining[: cut + 1])
            remaining = remaining[cut + 1 :].lstrip()

    fragments.append(remaining)
    return fragments


def wrapped_height(text: str, max_width: int) -> int:
    """Number of display rows an item occupies at max_width."""
    return len(wrap(text, max_width))
