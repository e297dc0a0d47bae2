"""StyleSignature — the normalized engine output."""

from __future__ import annotations

import re
from dataclasses import dataclass

from . import IndentStyle

_RENDERED = re.compile(r"^(?:([stm])([1-9]\d*)|u)$")


@dataclass(frozen=True, slots=True)
class StyleSignature:
    """Immutable indentation verdict: a style letter plus a column width.

    ``width`` is the number of columns per indentation level (for ``TABS`` the
    number of columns a tab stands for).  It is ``0`` only for ``UNKNOWN``.
    """

    style: IndentStyle
    width: int = 0

    # ── constructors ────────────────────────────────────────────────

    @classmethod
    def spaces(cls, width: int) -> StyleSignature:
        return cls(IndentStyle.SPACES, width)

    @classmethod
    def tabs(cls, width: int = 8) -> StyleSignature:
        return cls(IndentStyle.TABS, width)

    @classmethod
    def mixed(cls, width: int) -> StyleSignature:
        return cls(IndentStyle.MIXED, width)

    @classmethod
    def unknown(cls) -> StyleSignature:
        return cls(IndentStyle.UNKNOWN, 0)

    @classmethod
    def parse(cls, text: str) -> StyleSignature:
        """Inverse of :meth:`render`.

        Raises
        ------
        ValueError
            If *text* is not a rendered signature such as ``"s4"`` or ``"u"``.
        """
        m = _RENDERED.match(text.strip())
        if m is None:
            raise ValueError(f"not an indentation signature: {text!r}")
        if m.group(1) is None:
            return cls.unknown()
        return cls(IndentStyle(m.group(1)), int(m.group(2)))

    # ── derived values ──────────────────────────────────────────────

    @property
    def is_unknown(self) -> bool:
        return self.style is IndentStyle.UNKNOWN

    def with_width(self, width: int) -> StyleSignature:
        if self.is_unknown:
            return self
        return StyleSignature(self.style, width)

    def with_style(self, style: IndentStyle) -> StyleSignature:
        return StyleSignature(style, self.width)

    def sort_key(self) -> tuple[str, int]:
        """Ordering used to break histogram ties: letter first, then width."""
        return (self.style.value, self.width)

    # ── serialisation ───────────────────────────────────────────────

    def render(self) -> str:
        if self.is_unknown:
            return IndentStyle.UNKNOWN.value
        return f"{self.style.value}{self.width}"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict:
        return {
            "signature": self.render(),
            "style": self.style.long_name,
            "width": self.width,
        }
