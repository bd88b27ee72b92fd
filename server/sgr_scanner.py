"""Split raw terminal text into plain-text runs and CSI escape tokens.

Only ``ESC [`` sequences are recognised. A sequence runs from the introducer
up to and including the first terminator letter in ``TERMINATORS``. An
introducer without a terminator is not a sequence: the ESC byte is emitted as
literal text and scanning resumes right after it, so no input is lost.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

ESC = "\x1b"
TERMINATORS = "ABCDHIJKfhmpsu"

_TERMINATOR_RE = re.compile(f"[{TERMINATORS}]")
_SGR_BODY_RE = re.compile(r"[0-9;]*")
# Fields longer than this are out of range for every SGR code.
_MAX_FIELD_DIGITS = 9
_OUT_OF_RANGE = 10**_MAX_FIELD_DIGITS


@dataclass(frozen=True)
class TextToken:
    text: str


@dataclass(frozen=True)
class EscapeToken:
    body: str
    terminator: str

    @property
    def raw(self) -> str:
        return f"{ESC}[{self.body}{self.terminator}"

    def sgr_params(self) -> list[int] | None:
        """Return SGR parameters, or None if this is not an SGR sequence.

        Empty fields count as 0 and an empty body is a single 0 (reset).
        """
        if self.terminator != "m" or not _SGR_BODY_RE.fullmatch(self.body):
            return None
        if not self.body:
            return [0]
        return [_field_value(field) for field in self.body.split(";")]


def _field_value(field: str) -> int:
    digits = field.lstrip("0")
    if not digits:
        return 0
    if len(digits) > _MAX_FIELD_DIGITS:
        return _OUT_OF_RANGE
    return int(digits)


Token = Union[TextToken, EscapeToken]


def scan(text: str) -> Iterator[Token]:
    """Yield tokens covering *text* from left to right."""
    pos = 0
    end = len(text)
    # Once a terminator search fails nothing further right can terminate.
    exhausted = False
    while pos < end:
        esc = text.find(ESC, pos)
        if esc == -1:
            yield TextToken(text[pos:])
            return
        if esc > pos:
            yield TextToken(text[pos:esc])

        if not exhausted and text.startswith("[", esc + 1):
            match = _TERMINATOR_RE.search(text, esc + 2)
            if match is not None:
                yield EscapeToken(body=text[esc + 2 : match.start()], terminator=match.group())
                pos = match.end()
                continue
            exhausted = True

        yield TextToken(ESC)
        pos = esc + 1
