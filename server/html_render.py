"""Render styled nodes as HTML spans.

Base colors are resolved through the theme at render time; custom colors
are always written as inline RGB.
"""

from __future__ import annotations

import html
from typing import Iterable

from ansi_parser import StyledNode
from link_detector import LinkPart
from sgr_style import BasicColor, ColorSpec, CustomColor
from theme import ThemeService


def _css_color(color: ColorSpec | None, role: str, theme: ThemeService | None) -> str | None:
    if isinstance(color, CustomColor):
        r, g, b = color.rgb
    elif isinstance(color, BasicColor) and theme is not None:
        r, g, b = theme.resolve(color.index, role)
    else:
        return None
    return f"rgb({r}, {g}, {b})"


def render_node(node: StyledNode, theme: ThemeService | None = None) -> str:
    attrs = []
    classes = node.classes
    if classes:
        attrs.append(f'class="{" ".join(classes)}"')

    styles = []
    fg = _css_color(node.foreground, "foreground", theme)
    if fg:
        styles.append(f"color: {fg}")
    bg = _css_color(node.background, "background", theme)
    if bg:
        styles.append(f"background-color: {bg}")
    if styles:
        attrs.append(f'style="{"; ".join(styles)}"')

    body = []
    for part in node.parts:
        if isinstance(part, LinkPart):
            body.append(
                f'<a href="{html.escape(part.target)}">{html.escape(part.text, quote=False)}</a>'
            )
        else:
            body.append(html.escape(part.text, quote=False))

    open_tag = "<span " + " ".join(attrs) + ">" if attrs else "<span>"
    return open_tag + "".join(body) + "</span>"


def render_html(nodes: Iterable[StyledNode], theme: ThemeService | None = None) -> str:
    """Render *nodes* into a single ``<span>`` container."""
    return "<span>" + "".join(render_node(node, theme) for node in nodes) + "</span>"
