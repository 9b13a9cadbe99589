"""List files: one item per line, no escaping.

A missing file is an empty list. Saving rewrites the whole file with a
newline after every item; failures raise StorageError and are never
swallowed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class StorageError(RuntimeError):
    """A list file could not be read or written."""


def _check_item(path: Path, item: str) -> None:
    if "\n" in item or "\r" in item:
        raise StorageError(f"Item for {path} contains a line break: {item!r}")


def load_list(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Cannot read {path}: {e}") from e
    # Universal newlines already turned \r\n and \r into \n; other
    # separators such as \x0c or \u2028 are item text.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def save_list(path: Path, items: Iterable[str]) -> None:
    items = list(items)
    for item in items:
        _check_item(path, item)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            for item in items:
                f.write(f"{item}\n")
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}") from e


def append_item(path: Path, item: str) -> None:
    """Add one item to the end of a list file without loading it."""
    _check_item(path, item)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        needs_newline = path.exists() and path.stat().st_size > 0 and not _ends_with_newline(path)
        with path.open("a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(f"{item}\n")
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}") from e


def _ends_with_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) == b"\n"
