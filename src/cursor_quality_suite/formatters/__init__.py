"""Output formatters for scan reports."""

from .base import BaseFormatter
from .rich_formatter import RichFormatter

__all__ = [
    "BaseFormatter",
    "RichFormatter",
]
