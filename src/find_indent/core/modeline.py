"""Vim modeline detector.

Grammar (quoting the two forms ``:help modeline`` documents)::

    form one:  [text] {white} {tag} [white] {options}
    form two:  [text] {white} {tag} [white] se[t] {white} {options} : [text]

    tag      := "vi:" | "vim:" | "vim<NNN:" | "vim=NNN:" | "vim>NNN:" | "ex:"
    options  := option (sep option)*
    option   := word-char+ ["="] arg
    arg      := (any char but blank or "\\" | "\\" blank | "\\\\")*

In form one ``sep`` is blanks and/or a colon and the options run to the end
of the line; in form two ``sep`` is blanks only and the list ends at the
first unescaped colon.  Only the indentation related options are applied::

    sts=N | softtabstop=N      -> soft_tab_stop
    ts=N  | tabstop=N          -> tab_stop
    et | expandtab             -> use_tabs = False
    noet | noexpandtab         -> use_tabs = True

Option names are matched case-insensitively; anything else is ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from find_indent.core.settings import OverrideSettings, parse_width

_logger = logging.getLogger(__name__)

_TAG = re.compile(r"(?<=\s)(?:vim[<=>]\d+|vim|vi|ex):")
_SET = re.compile(r"se(?:t)?\s+")
_SEPARATORS_FORM_ONE = re.compile(r"[:\s]+")

_SOFT_TAB_STOP_NAMES = frozenset({"sts", "softtabstop"})
_TAB_STOP_NAMES = frozenset({"ts", "tabstop"})
_EXPAND_TAB_NAMES = frozenset({"et", "expandtab"})
_NO_EXPAND_TAB_NAMES = frozenset({"noet", "noexpandtab"})


def _is_word_char(c: str) -> bool:
    return c.isalnum() or c == "_"


def _scan_option(text: str, i: int) -> Optional[int]:
    """Consume one ``option`` starting at *i*; return the end index or None."""
    n = len(text)
    start = i
    while i < n and _is_word_char(text[i]):
        i += 1
    if i == start:
        return None
    if i < n and text[i] == "=":
        i += 1
    while i < n:
        c = text[i]
        if c == "\\":
            if i + 1 < n and (text[i + 1].isspace() or text[i + 1] == "\\"):
                i += 2
                continue
            break
        if c.isspace():
            break
        i += 1
    return i


def _form_one_options(text: str) -> Optional[list[str]]:
    """Options of ``{tag} opt opt:opt`` running to the end of the line."""
    text = text.rstrip()
    i, n = 0, len(text)
    while True:
        end = _scan_option(text, i)
        if end is None:
            return None
        i = end
        if i == n:
            break
        if not text[i].isspace():
            # a stray backslash
            return None
        while i < n and text[i].isspace():
            i += 1
        if i < n and text[i] == ":":
            i += 1
            while i < n and text[i].isspace():
                i += 1
    return [tok for tok in _SEPARATORS_FORM_ONE.split(text) if tok]


def _form_two_options(text: str) -> Optional[list[str]]:
    """Options of ``{tag} se[t] opt opt:`` ending at the first unescaped colon."""
    m = _SET.match(text)
    if m is None:
        return None
    body = text[m.end():]
    i, n = 0, len(body)
    colon = None
    while i < n:
        if body[i] == "\\":
            i += 2
            continue
        if body[i] == ":":
            colon = i
            break
        i += 1
    if colon is None:
        return None
    tokens = body[:colon].split()
    if not tokens:
        return None
    for tok in tokens:
        if _scan_option(tok, 0) is None:
            return None
    return tokens


def _tag_tails(line: str) -> Iterator[str]:
    for m in _TAG.finditer(line):
        yield line[m.end():].lstrip()


def modeline_options(line: str) -> Optional[list[str]]:
    """Return the option tokens of a vim modeline in *line*, or None."""
    for tail in _tag_tails(line):
        options = _form_one_options(tail)
        if options:
            return options
    for tail in _tag_tails(line):
        options = _form_two_options(tail)
        if options:
            return options
    return None


def apply_vim_option(token: str, settings: OverrideSettings) -> bool:
    """Apply a single ``:set`` token; return True if it was recognized."""
    name, sep, arg = token.partition("=")
    name = name.lower()
    if sep:
        width = parse_width(arg)
        if width is None:
            return False
        if name in _SOFT_TAB_STOP_NAMES:
            settings.soft_tab_stop = width
            return True
        if name in _TAB_STOP_NAMES:
            settings.tab_stop = width
            return True
        return False
    if name in _EXPAND_TAB_NAMES:
        settings.use_tabs = False
        return True
    if name in _NO_EXPAND_TAB_NAMES:
        settings.use_tabs = True
        return True
    return False


def apply_vim_modeline(line: str, settings: OverrideSettings) -> None:
    """Update *settings* from a vim modeline in *line*, if there is one."""
    options = modeline_options(line)
    if options is None:
        return
    applied = [tok for tok in options if apply_vim_option(tok, settings)]
    if applied:
        _logger.debug("vim modeline options applied: %s", applied)
