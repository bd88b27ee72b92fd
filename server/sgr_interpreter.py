"""Apply SGR (Select Graphic Rendition) parameters to a StyleState."""

from __future__ import annotations

from palette import resolve_8bit
from sgr_style import BasicColor, ColorSpec, CustomColor, StyleState

_BASIC_FG = range(30, 38)
_BASIC_BG = range(40, 48)
_BRIGHT_FG = range(90, 98)
_BRIGHT_BG = range(100, 108)


def _color_8bit(params: list[int]) -> ColorSpec | None:
    if not params:
        return None
    n = params[0]
    if 0 <= n <= 15:
        return BasicColor(n)
    rgb = resolve_8bit(n)
    if rgb is None:
        return None
    return CustomColor(*rgb)


def _color_24bit(params: list[int]) -> ColorSpec | None:
    if len(params) < 3:
        return None
    r, g, b = params[:3]
    if not all(0 <= c <= 255 for c in (r, g, b)):
        return None
    return CustomColor(r, g, b)


def _apply_extended(state: StyleState, code: int, rest: list[int]) -> None:
    """Handle ``38;5;n`` / ``38;2;r;g;b`` and their 48 background forms."""
    color: ColorSpec | None = None
    if rest and rest[0] == 5:
        color = _color_8bit(rest[1:])
    elif rest and rest[0] == 2:
        color = _color_24bit(rest[1:])
    if color is None:
        return
    if code == 38:
        state.foreground = color
    else:
        state.background = color


def apply_sgr(state: StyleState, params: list[int], *, bright: bool = False) -> None:
    """Apply SGR parameter codes to the current state.

    An extended color code (38/48) ends the sequence: whatever follows the
    color, valid or not, is dropped. With *bright* set, the aixterm bright
    ranges (90-97, 100-107) and the 22/23/24 attribute resets are honoured.
    """
    for i, p in enumerate(params):
        if p == 0:
            state.reset()
        elif p == 1:
            state.bold = True
        elif p == 3:
            state.italic = True
        elif p == 4:
            state.underline = True
        elif p == 39:
            state.foreground = None
        elif p == 49:
            state.background = None
        elif p in _BASIC_FG:
            state.foreground = BasicColor(p - 30)
        elif p in _BASIC_BG:
            state.background = BasicColor(p - 40)
        elif p == 38 or p == 48:
            _apply_extended(state, p, params[i + 1 :])
            return
        elif bright:
            _apply_bright(state, p)


def _apply_bright(state: StyleState, p: int) -> None:
    if p in _BRIGHT_FG:
        state.foreground = BasicColor(p - 90 + 8)
    elif p in _BRIGHT_BG:
        state.background = BasicColor(p - 100 + 8)
    elif p == 22:
        state.bold = False
    elif p == 23:
        state.italic = False
    elif p == 24:
        state.underline = False
