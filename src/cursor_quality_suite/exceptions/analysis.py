"""Scan-time exceptions: unreadable files, failed discovery."""

from pathlib import Path

from .base import QualitySuiteError


class AnalysisError(QualitySuiteError):
    """Base class for errors raised while scanning a tree."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class DiscoveryError(AnalysisError):
    """Raised when candidate files cannot be enumerated under a root."""

    def __init__(self, root: Path, reason: str):
        super().__init__(
            f"Cannot discover files under: {root}",
            details={"root": str(root), "reason": reason},
        )
        self.root = root
        self.reason = reason
