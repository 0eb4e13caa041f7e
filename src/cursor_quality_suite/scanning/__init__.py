"""File discovery, metric computation and the scanner."""

from .discovery import discover_files, is_excluded_dir, is_excluded_name, iter_files
from .metrics import classify, compute_metrics
from .patterns import ANTI_PATTERNS, AntiPattern, run_patterns, search_pattern
from .scanner import scan

__all__ = [
    "scan",
    "discover_files",
    "iter_files",
    "is_excluded_dir",
    "is_excluded_name",
    "compute_metrics",
    "classify",
    "ANTI_PATTERNS",
    "AntiPattern",
    "run_patterns",
    "search_pattern",
]
