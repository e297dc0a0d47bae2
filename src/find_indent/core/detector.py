"""Single-pass indentation detection.

Usage::

    from find_indent import detect_indentation

    sig = detect_indentation(source)
    if sig.style is IndentStyle.SPACES:
        print(f"indented with {sig.width} spaces")

Each line is first offered to the override detectors (vim modeline, emacs
first line, emacs Local Variables list).  As soon as the collected settings
fully determine the answer the scan stops.  Otherwise the line goes to the
diff classifier, and once all lines are consumed the resolver picks the
verdict.
"""

from __future__ import annotations

import logging
from typing import Optional

from find_indent.core.classifier import IndentClassifier
from find_indent.core.config import DetectOptions
from find_indent.core.emacs import (
    FIRST_LINE_WINDOW,
    LocalVariablesScanner,
    apply_emacs_first_line,
)
from find_indent.core.lines import iter_lines
from find_indent.core.modeline import apply_vim_modeline
from find_indent.core.resolver import resolve
from find_indent.core.settings import OverrideSettings
from find_indent.model.signature import StyleSignature

_logger = logging.getLogger(__name__)


def detect_indentation(
    text: str | bytes,
    *,
    skip_doc_comments: bool = False,
    options: Optional[DetectOptions] = None,
) -> StyleSignature:
    """Infer the indentation style of *text*.

    Parameters
    ----------
    text:
        Source text starting at a line boundary, as ``str`` or UTF-8 ``bytes``.
    skip_doc_comments:
        Ignore POD blocks (``=head1`` ... ``=cut``), whose verbatim examples
        are usually indented unlike the surrounding code.
    options:
        A :class:`DetectOptions`; takes precedence over the keyword.

    Returns
    -------
    The detected :class:`StyleSignature`; ``StyleSignature.unknown()`` when
    the text carries no evidence.  Never raises for any text.
    """
    if options is None:
        options = DetectOptions(skip_doc_comments=skip_doc_comments)

    settings = OverrideSettings()
    local_variables = LocalVariablesScanner()
    classifier = IndentClassifier(skip_doc_comments=options.skip_doc_comments)

    for lineno, line in enumerate(iter_lines(text), start=1):
        full = line.text
        if lineno <= FIRST_LINE_WINDOW:
            apply_emacs_first_line(full, settings)
        apply_vim_modeline(full, settings)
        local_variables.feed(full, settings)

        verdict = settings.short_circuit()
        if verdict is not None:
            _logger.debug("editor settings decided %s at line %d", verdict, lineno)
            return verdict

        classifier.feed(line)

    return resolve(classifier.histogram, settings)


def find_indent(text: str | bytes, *, skip_pod: bool = False, **kwargs) -> str:
    """Rendered form of :func:`detect_indentation` (``s4``, ``t8``, ``m4``, ``u``).

    ``skip_pod`` is accepted as an alias of ``skip_doc_comments``.
    """
    kwargs.setdefault("skip_doc_comments", skip_pod)
    return detect_indentation(text, **kwargs).render()
