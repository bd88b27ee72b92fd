"""Split styled text into plain-text and link parts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, Union

_URL_RE = re.compile(r"(?:https?|file)://[^\s<>\"'`]+")
# Sentence punctuation that commonly trails a URL in prose or log output.
_TRAILING = ".,;:!?"


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class LinkPart:
    text: str
    target: str


Part = Union[TextPart, LinkPart]


class LinkDetector(Protocol):
    def detect(self, text: str) -> list[Part]: ...


class PlainTextDetector:
    """Detector that never finds links."""

    def detect(self, text: str) -> list[Part]:
        return [TextPart(text)] if text else []


class UrlLinkDetector:
    """Detect http(s) and file URLs.

    The returned parts cover *text* exactly and in order.
    """

    def __init__(self, pattern: re.Pattern[str] = _URL_RE) -> None:
        self._pattern = pattern

    def detect(self, text: str) -> list[Part]:
        parts: list[Part] = []
        last = 0
        for match in self._pattern.finditer(text):
            url = _trim_url(match.group())
            if "://" not in url or url.endswith("://"):
                continue
            start = match.start()
            if start > last:
                parts.append(TextPart(text[last:start]))
            parts.append(LinkPart(text=url, target=url))
            last = start + len(url)
        if last < len(text):
            parts.append(TextPart(text[last:]))
        return parts


def _trim_url(url: str) -> str:
    url = url.rstrip(_TRAILING)
    # Drop a closing paren only when it has no opening partner in the URL.
    while url.endswith(")") and url.count(")") > url.count("("):
        url = url[:-1].rstrip(_TRAILING)
    return url
