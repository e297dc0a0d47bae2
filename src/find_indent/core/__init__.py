"""Detection engine: line scanner, override detectors, classifier, resolver."""

from find_indent.core.config import DetectOptions, ScanConfig
from find_indent.core.detector import detect_indentation, find_indent

__all__ = ["DetectOptions", "ScanConfig", "detect_indentation", "find_indent"]
