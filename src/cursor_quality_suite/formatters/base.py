"""Base formatter interface for scan report rendering."""

from abc import ABC, abstractmethod

from ..models import ScanResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: ScanResult) -> None:
        """Print the report for ``result``."""

    @abstractmethod
    def format(self, result: ScanResult) -> str:
        """Return the report for ``result`` as a string."""
