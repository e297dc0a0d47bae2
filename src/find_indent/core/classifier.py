"""Indentation diff classifier.

Every significant line's leading whitespace is compared to the previous
significant line's.  The difference between the two (in either direction)
is one vote in a histogram keyed by :class:`StyleSignature`.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass

from find_indent.core.lines import Line
from find_indent.model.signature import StyleSignature

_logger = logging.getLogger(__name__)

TAB_WIDTH = 8

# Perl POD blocks are the recognized doc-comment syntax.
_DOC_OPEN = re.compile(r"^=(?:head\d|over|item|back|pod|begin|for|end)")
_DOC_CLOSE = re.compile(r"^=cut")

_COMMENT_MARKERS = ("#", "//", "/*")

# Up to seven spaces followed by a tab land on the same tab stop.
_TAB_STOP = re.compile(r"[ ]{0,7}\t")


def classify_diff(diff: str) -> StyleSignature:
    """Classify the whitespace added (or removed) between two levels."""
    if diff.strip(" ") == "":
        return StyleSignature.spaces(len(diff))
    if diff.strip("\t") == "":
        # what a tab stands for cannot be inferred from tabs alone
        return StyleSignature.tabs(TAB_WIDTH)
    body = diff.rstrip(" ")
    trailing = len(diff) - len(body)
    tabs = body.count("\t")
    return StyleSignature.mixed(tabs * TAB_WIDTH + trailing)


def expand_tab_stops(indent: str) -> str:
    return _TAB_STOP.sub(" " * TAB_WIDTH, indent)


@dataclass(slots=True)
class ScanState:
    """Per-call scanning state of the classifier."""

    prev_indent: str = ""
    lines_seen: int = 0
    skip: int = 0
    in_doc: bool = False


class IndentClassifier:
    """Feeds lines through the skip rules and tallies indentation votes."""

    def __init__(self, *, skip_doc_comments: bool = False) -> None:
        self.skip_doc_comments = skip_doc_comments
        self.state = ScanState()
        self.histogram: Counter[StyleSignature] = Counter()

    def _vote(self, signature: StyleSignature) -> None:
        self.histogram[signature] += 1

    def feed(self, line: Line) -> None:
        state = self.state
        state.lines_seen += 1
        ws, rest = line.indent, line.rest

        if state.skip:
            state.skip -= 1
            return

        if self.skip_doc_comments and ws == "" and rest.startswith("="):
            if not state.in_doc and _DOC_OPEN.match(rest):
                state.in_doc = True
            elif state.in_doc and _DOC_CLOSE.match(rest):
                state.in_doc = False
        if state.in_doc:
            return

        if rest == "":
            return

        if ws == "":
            state.prev_indent = ws
            return

        # the next line continues this one
        if rest.endswith("\\"):
            state.skip = 1

        if rest.startswith(_COMMENT_MARKERS):
            return

        prev = state.prev_indent
        state.prev_indent = ws

        if len(ws) > len(prev) and ws.startswith(prev):
            self._vote(classify_diff(ws[len(prev):]))
            return
        if len(prev) > len(ws) and prev.startswith(ws):
            self._vote(classify_diff(prev[len(ws):]))
            return

        # neither is a prefix of the other: compare visual widths
        len_diff = abs(len(expand_tab_stops(ws)) - len(expand_tab_stops(prev)))
        if len_diff:
            self._vote(StyleSignature.mixed(len_diff))
