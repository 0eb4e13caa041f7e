"""Exception hierarchy for the quality suite."""

from .analysis import AnalysisError, DiscoveryError, FileAccessError
from .base import QualitySuiteError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "QualitySuiteError",
    "AnalysisError",
    "FileAccessError",
    "DiscoveryError",
    "ConfigurationError",
    "InvalidConfigError",
]
