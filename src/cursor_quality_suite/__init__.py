"""
Cursor Quality Suite - quick smell check for React component trees.

Measures component files (size, imports, state and effect declarations,
custom hooks) against warning/critical thresholds and searches the tree for
a couple of known anti-patterns.
"""

__version__ = "1.1.0"

from .config import ScanConfig, ThresholdConfig, load_config
from .models import ScanResult, Verdict
from .scanning import scan

__all__ = [
    "scan",  # Main entry point
    "ScanConfig",
    "ThresholdConfig",
    "load_config",
    "ScanResult",
    "Verdict",
]
