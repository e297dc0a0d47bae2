"""Enums shared across the engine and the outer surfaces."""

from __future__ import annotations

from enum import Enum


class IndentStyle(str, Enum):
    """Style letter of a detected indentation signature.

    The value doubles as the letter of the textual rendering (``s4``, ``t8``,
    ``m4``, ``u``).
    """

    SPACES = "s"
    TABS = "t"
    MIXED = "m"
    UNKNOWN = "u"

    @property
    def long_name(self) -> str:
        return self.name.lower()
