"""Emacs file-variable detectors.

Two places in a file can carry emacs variables:

* the first line (the second one when the first is a ``#!`` line)::

      ;; -*- mode: Lisp; tab-width: 4; indent-tabs-mode: nil; -*-

* a ``Local Variables`` list, usually near the end of the file.  Whatever
  surrounds the magic string on its first line is the prefix/suffix every
  following line must carry, e.g.::

      /* Local Variables: */
      /* c-basic-offset: 4 */
      /* End: */

The variables understood are ``tab-width``, ``indent-tabs-mode``,
``c-basic-offset`` and ``style``; see
:meth:`~find_indent.core.settings.OverrideSettings.apply_emacs_variable`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from find_indent.core.settings import OverrideSettings

_logger = logging.getLogger(__name__)

_MARKER = "-*-"
_LOCAL_VARIABLES = "Local Variables:"
_END_KEY = "End"

_MODE = re.compile(r"\s*mode:\s*")
_NAME_STOP = re.compile(r"[\s;]")
_SEMICOLON = re.compile(";")
_CLOSER = re.compile(r"\s*-\*-")

# The first-line block may sit on line 1 or, after a shebang, on line 2.
FIRST_LINE_WINDOW = 2


def _parse_pair(segment: str) -> Optional[tuple[str, str]]:
    """Parse ``key: value`` where key has no blanks and value is non-empty."""
    segment = segment.lstrip()
    key, sep, value = segment.partition(":")
    key = key.rstrip()
    if not sep or not key or any(c.isspace() for c in key) or not value:
        return None
    return key, value.strip()


class _Segments:
    """The ``;``-terminated segments of one line, parsed once.

    ``reach[k]`` is the index of the furthest segment end after ``ends[k]``
    that is followed by a closing ``-*-``, with every segment in between a
    valid ``key: value`` pair; None if there is no such end.
    """

    def __init__(self, line: str) -> None:
        self.ends = [m.start() for m in _SEMICOLON.finditer(line)]
        self.index = {pos: k for k, pos in enumerate(self.ends)}
        self.pairs: list[Optional[tuple[str, str]]] = []
        start = 0
        for end in self.ends:
            self.pairs.append(_parse_pair(line[start:end]))
            start = end + 1

        n = len(self.ends)
        self.reach: list[Optional[int]] = [None] * n
        for k in range(n - 2, -1, -1):
            if self.pairs[k + 1] is None:
                continue
            furthest = self.reach[k + 1]
            if furthest is None and _CLOSER.match(line, self.ends[k + 1] + 1):
                furthest = k + 1
            self.reach[k] = furthest


def first_line_variables(line: str) -> Optional[list[tuple[str, str]]]:
    """Return the variables of a ``-*- mode: NAME; key: value; ... -*-`` block.

    The leftmost opening marker that starts a valid block wins; the block
    extends to the outermost closing marker that keeps it valid.
    """
    segments: Optional[_Segments] = None
    name_end = -1
    start = line.find(_MARKER)
    while start != -1:
        m = _MODE.match(line, start + len(_MARKER))
        if m is not None:
            name_start = m.end()
            # later names inside an already scanned run share its end
            if name_start >= name_end:
                stop = _NAME_STOP.search(line, name_start)
                name_end = stop.start() if stop else len(line)
            if name_end > name_start and line.startswith(";", name_end):
                if segments is None:
                    segments = _Segments(line)
                first = segments.index[name_end]
                last = segments.reach[first]
                if last is not None:
                    return [segments.pairs[k] for k in range(first + 1, last + 1)]
        start = line.find(_MARKER, start + 1)
    return None


def apply_emacs_first_line(line: str, settings: OverrideSettings) -> None:
    """Update *settings* from an emacs ``-*-`` first line, if *line* is one."""
    pairs = first_line_variables(line)
    if pairs is None:
        return
    _logger.debug("emacs first-line variables: %s", pairs)
    for key, value in pairs:
        settings.apply_emacs_variable(key, value)


@dataclass(frozen=True, slots=True)
class _Block:
    """Inside a Local Variables list; every line must carry these affixes."""

    prefix: str
    suffix: str


def _parse_block_opening(line: str) -> Optional[_Block]:
    stripped = line.strip()
    idx = stripped.find(_LOCAL_VARIABLES)
    if idx == -1:
        return None
    prefix = stripped[:idx].rstrip()
    suffix = stripped[idx + len(_LOCAL_VARIABLES):].strip()
    if any(c.isspace() for c in prefix) or any(c.isspace() for c in suffix):
        return None
    return _Block(prefix, suffix)


def _parse_block_line(line: str, block: _Block) -> Optional[tuple[str, str]]:
    """Parse ``PREFIX key: value SUFFIX`` with the affixes matched literally."""
    text = line.lstrip()
    if not text.startswith(block.prefix):
        return None
    text = text[len(block.prefix):].lstrip()
    key, sep, rest = text.partition(":")
    if not sep or not key or any(c.isspace() for c in key):
        return None
    rest = rest.rstrip()
    if not rest.endswith(block.suffix):
        return None
    value = rest[: len(rest) - len(block.suffix)]
    if not value:
        return None
    return key, value.strip()


class LocalVariablesScanner:
    """State machine for an emacs ``Local Variables`` list.

    Outside a list the scanner looks for the opening line; inside, each line
    either is a ``key: value`` entry (applied to the settings) or closes the
    list.  ``End:`` closes it explicitly.
    """

    def __init__(self) -> None:
        self._block: Optional[_Block] = None

    @property
    def in_block(self) -> bool:
        return self._block is not None

    def feed(self, line: str, settings: OverrideSettings) -> None:
        if self._block is None:
            self._block = _parse_block_opening(line)
            if self._block is not None:
                _logger.debug(
                    "Local Variables list opened (prefix=%r, suffix=%r)",
                    self._block.prefix,
                    self._block.suffix,
                )
            return

        pair = _parse_block_line(line, self._block)
        if pair is None or pair[0] == _END_KEY:
            _logger.debug("Local Variables list closed")
            self._block = None
            return
        settings.apply_emacs_variable(*pair)
