"""ANSI SGR escape sequence parser.

Converts raw terminal text (with escape codes) into styled nodes, one per
maximal run of text sharing the same style:
  [StyledNode(parts=[TextPart("hello")], bold=True, foreground=BasicColor(2)), ...]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from link_detector import LinkDetector, LinkPart, Part, UrlLinkDetector
from sgr_interpreter import apply_sgr
from sgr_scanner import TextToken, scan
from sgr_style import BasicColor, ColorSpec, CustomColor, StyleState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    text: str
    style: StyleState


@dataclass(frozen=True)
class StyledNode:
    parts: tuple[Part, ...]
    bold: bool = False
    italic: bool = False
    underline: bool = False
    foreground: ColorSpec | None = None
    background: ColorSpec | None = None

    @classmethod
    def from_segment(cls, segment: Segment, link_detector: LinkDetector) -> StyledNode:
        style = segment.style
        return cls(
            parts=tuple(link_detector.detect(segment.text)),
            bold=style.bold,
            italic=style.italic,
            underline=style.underline,
            foreground=style.foreground,
            background=style.background,
        )

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)

    @property
    def foreground_basic_index(self) -> int | None:
        return _basic_index(self.foreground)

    @property
    def foreground_custom_rgb(self) -> tuple[int, int, int] | None:
        return _custom_rgb(self.foreground)

    @property
    def background_basic_index(self) -> int | None:
        return _basic_index(self.background)

    @property
    def background_custom_rgb(self) -> tuple[int, int, int] | None:
        return _custom_rgb(self.background)

    @property
    def classes(self) -> list[str]:
        """CSS classes describing this node's logical style."""
        classes: list[str] = []
        if self.bold:
            classes.append("code-bold")
        if self.italic:
            classes.append("code-italic")
        if self.underline:
            classes.append("code-underline")
        if self.foreground is not None:
            classes.append("code-foreground-colored")
        if self.background is not None:
            classes.append("code-background-colored")
        return classes

    def to_run(self) -> dict[str, Any]:
        """Build a compact run dict, omitting unset fields."""
        run: dict[str, Any] = {"t": self.text}
        if any(isinstance(part, LinkPart) for part in self.parts):
            run["parts"] = [
                {"t": part.text, "href": part.target}
                if isinstance(part, LinkPart)
                else {"t": part.text}
                for part in self.parts
            ]
        if self.foreground_basic_index is not None:
            run["fg"] = self.foreground_basic_index
        if self.foreground_custom_rgb is not None:
            run["fgRgb"] = list(self.foreground_custom_rgb)
        if self.background_basic_index is not None:
            run["bg"] = self.background_basic_index
        if self.background_custom_rgb is not None:
            run["bgRgb"] = list(self.background_custom_rgb)
        if self.bold:
            run["b"] = True
        if self.italic:
            run["i"] = True
        if self.underline:
            run["u"] = True
        return run


def _basic_index(color: ColorSpec | None) -> int | None:
    return color.index if isinstance(color, BasicColor) else None


def _custom_rgb(color: ColorSpec | None) -> tuple[int, int, int] | None:
    return color.rgb if isinstance(color, CustomColor) else None


class _SegmentBuilder:
    """Collects text under the style snapshot that was live when it opened."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._style = StyleState()

    def append(self, text: str) -> None:
        self._chunks.append(text)

    def restyle(self, style: StyleState) -> Segment | None:
        """Close the open segment and reopen it under *style*."""
        closed = self.close()
        self._style = style.copy()
        return closed

    def close(self) -> Segment | None:
        if not self._chunks:
            return None
        segment = Segment(text="".join(self._chunks), style=self._style)
        self._chunks = []
        return segment


def iter_segments(text: str, *, bright: bool = False) -> Iterator[Segment]:
    """Yield styled segments of *text* in input order."""
    state = StyleState()
    builder = _SegmentBuilder()
    for token in scan(text):
        if isinstance(token, TextToken):
            builder.append(token.text)
            continue
        params = token.sgr_params()
        if params is None:
            logger.debug("Discarding non-SGR escape sequence %r", token.raw)
            continue
        before = state.copy()
        apply_sgr(state, params, bright=bright)
        if state != before:
            closed = builder.restyle(state)
            if closed is not None:
                yield closed
    closed = builder.close()
    if closed is not None:
        yield closed


def handle_ansi_output(
    text: str,
    link_detector: LinkDetector | None = None,
    *,
    bright: bool = False,
) -> list[StyledNode]:
    """Parse *text* into styled nodes with link-aware parts."""
    detector = link_detector if link_detector is not None else UrlLinkDetector()
    return [StyledNode.from_segment(seg, detector) for seg in iter_segments(text, bright=bright)]


def parse_lines(
    raw: str,
    link_detector: LinkDetector | None = None,
    *,
    bright: bool = False,
) -> list[list[StyledNode]]:
    """Parse multi-line raw terminal output into styled nodes per line.

    Style carries across line breaks; a segment spanning a newline is split
    into one node on each line.
    """
    detector = link_detector if link_detector is not None else UrlLinkDetector()
    result: list[list[StyledNode]] = [[]]
    for segment in iter_segments(raw, bright=bright):
        for n, piece in enumerate(segment.text.split("\n")):
            if n > 0:
                result.append([])
            if piece:
                result[-1].append(StyledNode.from_segment(Segment(piece, segment.style), detector))
    return result
