"""Theme palettes for the 16 base ANSI colors."""

from __future__ import annotations

from typing import Protocol

RGB = tuple[int, int, int]

ROLES = frozenset({"foreground", "background"})

_DARK: tuple[RGB, ...] = (
    (0, 0, 0), (205, 49, 49), (13, 188, 121), (229, 229, 16),
    (36, 114, 200), (188, 63, 188), (17, 168, 205), (229, 229, 229),
    (102, 102, 102), (241, 76, 76), (35, 209, 139), (245, 245, 67),
    (59, 142, 234), (214, 112, 214), (41, 184, 219), (229, 229, 229),
)

_LIGHT: tuple[RGB, ...] = (
    (0, 0, 0), (205, 49, 49), (0, 188, 0), (148, 152, 0),
    (4, 81, 165), (188, 5, 188), (5, 152, 188), (85, 85, 85),
    (102, 102, 102), (205, 49, 49), (20, 206, 20), (181, 186, 0),
    (4, 81, 165), (188, 5, 188), (5, 152, 188), (165, 165, 165),
)


class ThemeService(Protocol):
    def resolve(self, index: int, role: str) -> RGB: ...


class Theme:
    """A named 16-color palette."""

    def __init__(self, name: str, colors: tuple[RGB, ...]) -> None:
        if len(colors) != 16:
            raise ValueError(f"Theme {name!r} needs 16 colors, got {len(colors)}")
        self.name = name
        self._colors = colors

    def resolve(self, index: int, role: str) -> RGB:
        """Return the concrete RGB for a base color slot in the given role."""
        if role not in ROLES:
            raise ValueError(f"Unknown color role: {role!r}")
        if not 0 <= index <= 15:
            raise ValueError(f"Base color index out of range: {index}")
        return self._colors[index]


_THEMES: dict[str, Theme] = {
    "dark": Theme("dark", _DARK),
    "light": Theme("light", _LIGHT),
}


def available_themes() -> list[str]:
    return sorted(_THEMES)


def get_theme(name: str) -> Theme:
    try:
        return _THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name!r}") from None
