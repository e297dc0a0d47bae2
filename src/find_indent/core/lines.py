"""Line scanner — splits text into (leading whitespace, remainder) pairs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

# One line: a run of blanks, the rest up to a terminator, then one or more
# CR/LF characters (so blank lines fold into the preceding terminator).  The
# last line of the text may be unterminated.
_LINE = re.compile(r"([ \t]*)([^\r\n]*)(?:[\r\n]+|\Z)")


@dataclass(frozen=True, slots=True)
class Line:
    """A single scanned line, terminator excluded."""

    indent: str
    rest: str

    @property
    def text(self) -> str:
        return self.indent + self.rest


def as_text(text: str | bytes) -> str:
    """Accept ``str`` or ``bytes``; bytes are decoded as UTF-8 with replacement."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    return text


def iter_lines(text: str | bytes) -> Iterator[Line]:
    """Yield every line of *text* lazily, in order.

    Consecutive terminators are consumed together, so empty lines are never
    yielded except for a leading one at the very start of the text.
    """
    text = as_text(text)
    end = len(text)
    for m in _LINE.finditer(text):
        # the only empty match is the one at the end of the text
        if m.start() == end:
            break
        yield Line(m.group(1), m.group(2))
