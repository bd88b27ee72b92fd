"""xterm 256-color palette lookup for the extended (non-theme) entries."""

from __future__ import annotations

from typing import Any

# Byte value for each of the six cube levels: round(level * 255 / 5).
_CUBE_LEVELS = tuple(round(level * 255 / 5) for level in range(6))


def resolve_8bit(index: Any) -> tuple[int, int, int] | None:
    """Convert a 256-color index in 16..255 to an (r, g, b) triple.

    Indices 0-15 are theme colors and are not resolved here. Anything outside
    16..255, or a number that is not integral, yields None.
    """
    if isinstance(index, bool) or not isinstance(index, (int, float)):
        return None
    if isinstance(index, float):
        if not index.is_integer():
            return None
        index = int(index)

    if 16 <= index <= 231:
        v = index - 16
        return (
            _CUBE_LEVELS[v // 36],
            _CUBE_LEVELS[(v // 6) % 6],
            _CUBE_LEVELS[v % 6],
        )
    if 232 <= index <= 255:
        gray = round((index - 232) / 23 * 255)
        return (gray, gray, gray)
    return None
