"""Override settings collected from in-file editor directives.

Both vim modelines and emacs variables write into one
:class:`OverrideSettings` accumulator.  Explicit settings (``tab-width``,
``ts=``, ``et`` ...) take precedence over heuristics; the emacs ``style``
presets only populate the ``style_*`` shadow fields, which the resolver
consults as a last resort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from find_indent.model.signature import StyleSignature

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TabMode:
    """Effect of an emacs ``indent-tabs-mode`` value."""

    use_tabs: bool
    mixed_mode: Optional[bool]   # None clears any earlier mixed-mode request


@dataclass(frozen=True, slots=True)
class EmacsStyle:
    """Indentation preset implied by an emacs ``c-set-style`` name."""

    soft_tab_stop: int
    tab_stop: int
    use_tabs: Optional[bool] = None


TAB_MODES: Mapping[str, TabMode] = {
    "t": TabMode(use_tabs=True, mixed_mode=True),
    "nil": TabMode(use_tabs=False, mixed_mode=None),
}

_KR = EmacsStyle(soft_tab_stop=4, tab_stop=8, use_tabs=True)

EMACS_STYLES: Mapping[str, EmacsStyle] = {
    "kr": _KR,
    "k&r": _KR,
    "bsd": _KR,
    "whitesmith": _KR,
    "stroustrup": _KR,
    "linux": EmacsStyle(soft_tab_stop=8, tab_stop=8, use_tabs=True),
    "gnu": EmacsStyle(soft_tab_stop=2, tab_stop=8, use_tabs=True),
    "ellemtel": EmacsStyle(soft_tab_stop=3, tab_stop=3, use_tabs=False),
    "java": EmacsStyle(soft_tab_stop=4, tab_stop=8),
}


def parse_width(value: str) -> Optional[int]:
    """Return *value* as a positive column count, or None if it is not one."""
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    width = int(value)
    return width if width > 0 else None


@dataclass(slots=True)
class OverrideSettings:
    """Mutable accumulator, alive for a single detection call."""

    soft_tab_stop: Optional[int] = None
    tab_stop: Optional[int] = None
    use_tabs: Optional[bool] = None
    mixed_mode: Optional[bool] = None

    style_soft_tab_stop: Optional[int] = None
    style_tab_stop: Optional[int] = None
    style_use_tabs: Optional[bool] = None

    # ── emacs variable handling (shared by both emacs detectors) ────

    def apply_emacs_variable(self, key: str, value: str) -> None:
        """Apply one emacs ``key: value`` pair; unknown keys are ignored."""
        if key == "tab-width":
            width = parse_width(value)
            if width is not None:
                self.tab_stop = width
        elif key == "indent-tabs-mode":
            mode = TAB_MODES.get(value)
            if mode is not None:
                self.use_tabs = mode.use_tabs
                self.mixed_mode = mode.mixed_mode
        elif key == "c-basic-offset":
            # tab-width wins when both are given
            width = parse_width(value)
            if width is not None and self.tab_stop is None:
                self.tab_stop = width
        elif key == "style":
            style = EMACS_STYLES.get(value)
            if style is not None:
                self.style_soft_tab_stop = style.soft_tab_stop
                self.style_tab_stop = style.tab_stop
                if style.use_tabs is not None:
                    self.style_use_tabs = style.use_tabs

    # ── resolution helpers ──────────────────────────────────────────

    def short_circuit(self) -> Optional[StyleSignature]:
        """Return the verdict if explicit settings fully determine it."""
        if self.soft_tab_stop is not None and self.use_tabs is not None:
            mixed = self.use_tabs if self.mixed_mode is None else self.mixed_mode
            if mixed:
                return StyleSignature.mixed(self.soft_tab_stop)
            return StyleSignature.spaces(self.soft_tab_stop)
        if self.tab_stop is not None and self.use_tabs:
            if self.mixed_mode:
                return StyleSignature.mixed(self.tab_stop)
            return StyleSignature.tabs(self.tab_stop)
        if self.tab_stop is not None and self.use_tabs is not None:
            return StyleSignature.spaces(self.tab_stop)
        return None

    def apply_style_fallbacks(self) -> None:
        """Fill unset primary fields from the emacs ``style`` preset."""
        if self.soft_tab_stop is None and self.style_soft_tab_stop is not None:
            self.soft_tab_stop = self.style_soft_tab_stop
        if self.tab_stop is None and self.style_tab_stop is not None:
            self.tab_stop = self.style_tab_stop
        if self.use_tabs is None and self.style_use_tabs is not None:
            self.use_tabs = self.style_use_tabs
        _logger.debug("settings after style fallback: %s", self)
