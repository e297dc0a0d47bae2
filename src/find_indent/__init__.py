"""find_indent — heuristically infer the indentation style of source text."""

__all__ = [
    "__version__",
    "detect_indentation",
    "find_indent",
    "DetectOptions",
    "ScanConfig",
    "IndentStyle",
    "StyleSignature",
    "detect_text",
    "detect_file",
    "scan_tree",
]
__version__ = "0.1.0"

from find_indent.model import IndentStyle  # noqa: E402
from find_indent.model.signature import StyleSignature  # noqa: E402
from find_indent.core import (  # noqa: E402
    DetectOptions,
    ScanConfig,
    detect_indentation,
    find_indent,
)
from find_indent.api import detect_file, detect_text, scan_tree  # noqa: E402
