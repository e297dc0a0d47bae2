"""Resolver — turns the vote histogram and override settings into a verdict."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

from find_indent.core.settings import OverrideSettings
from find_indent.model import IndentStyle
from find_indent.model.signature import StyleSignature

_logger = logging.getLogger(__name__)

# Mixed votes worth at least 1/5 of the spaces winner promote it to mixed.
_MIXED_PROMOTION_DIVISOR = 5


def pick_winner(histogram: Counter[StyleSignature]) -> Optional[StyleSignature]:
    """Most voted signature; ties go to the smallest ``(letter, width)``."""
    if not histogram:
        return None
    winner, _ = min(
        histogram.items(), key=lambda kv: (-kv[1], kv[0].sort_key())
    )
    return winner


def promote_mixed(
    winner: StyleSignature, histogram: Counter[StyleSignature]
) -> StyleSignature:
    if winner.style is not IndentStyle.SPACES:
        return winner
    mixed = StyleSignature.mixed(winner.width)
    mixed_votes = histogram.get(mixed, 0)
    if mixed_votes and mixed_votes * _MIXED_PROMOTION_DIVISOR >= histogram[winner]:
        return mixed
    return winner


def apply_overrides(
    signature: StyleSignature, settings: OverrideSettings
) -> StyleSignature:
    """Layer explicit (and, failing those, style preset) settings on top."""
    settings.apply_style_fallbacks()

    if settings.soft_tab_stop is not None:
        signature = signature.with_width(settings.soft_tab_stop)
    elif settings.tab_stop is not None:
        signature = signature.with_width(settings.tab_stop)

    if settings.use_tabs is True:
        if signature.is_unknown or signature.width == 8:
            signature = StyleSignature.tabs(8)
        else:
            signature = StyleSignature.mixed(signature.width)
    elif settings.use_tabs is False:
        # NOTE: this re-tags plain spaces as mixed too; kept for compatibility
        # with the ``s``/``t``/``m`` encoding consumers already depend on.
        signature = signature.with_style(IndentStyle.MIXED)

    if settings.mixed_mode:
        signature = signature.with_style(IndentStyle.MIXED)
    return signature


def resolve(
    histogram: Counter[StyleSignature], settings: OverrideSettings
) -> StyleSignature:
    winner = pick_winner(histogram)
    if winner is None:
        return StyleSignature.unknown()
    promoted = promote_mixed(winner, histogram)
    if promoted != winner:
        _logger.debug("promoted %s to %s", winner, promoted)
    result = apply_overrides(promoted, settings)
    _logger.debug(
        "histogram %s resolved to %s",
        {str(k): v for k, v in histogram.items()},
        result,
    )
    return result
