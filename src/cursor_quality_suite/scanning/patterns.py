"""Whole-tree anti-pattern searches.

Each search walks its own file set (it is not limited to the measured
components) and reports every matching line. A pattern that matches
anywhere counts as a single warning in the scan summary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..config import ScanConfig
from ..exceptions import FileAccessError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..models import PatternFinding, PatternMatch
from .discovery import iter_files

logger = get_logger(__name__)


@dataclass(frozen=True)
class AntiPattern:
    """A regex searched line by line across a file set chosen from the config."""

    name: str
    description: str
    advice: str
    regex: re.Pattern
    select_files: Callable[[Path, ScanConfig], list[Path]]


def _watch_files(root: Path, config: ScanConfig) -> list[Path]:
    return list(iter_files(root, config.watch_extensions, config.excluded_dirs))


def _typed_files(root: Path, config: ScanConfig) -> list[Path]:
    return list(
        iter_files(root, config.typed_extensions, config.excluded_dirs, config.any_excluded_markers)
    )


WATCH_USAGE = AntiPattern(
    name="watch-usage",
    description="watch() usage",
    advice="prefer useWatch",
    # also covers methods.watch()
    regex=re.compile(r"\.watch\(\)"),
    select_files=_watch_files,
)

ANY_TYPE = AntiPattern(
    name="any-type",
    description="'any' type usage",
    advice="",
    regex=re.compile(r": any|:any|as any"),
    select_files=_typed_files,
)

ANTI_PATTERNS = (WATCH_USAGE, ANY_TYPE)


def search_pattern(regex: re.Pattern, files: list[Path]) -> list[PatternMatch]:
    """Every line in ``files`` matching ``regex``, in file then line order."""
    matches = []
    for filepath in files:
        try:
            content = safe_read_file(filepath)
        except FileAccessError as e:
            logger.debug(f"Skipped unreadable file {filepath}: {e.reason}")
            continue
        for lineno, line in enumerate(content.split("\n"), start=1):
            if regex.search(line):
                matches.append(PatternMatch(str(filepath), lineno, line.strip()))
    return matches


def run_pattern(pattern: AntiPattern, root: Path, config: ScanConfig) -> PatternFinding:
    """Search one anti-pattern. A failed walk is reported as no matches."""
    try:
        files = pattern.select_files(root, config)
    except OSError as e:
        logger.debug(f"Pattern search {pattern.name} failed: {e}")
        files = []
    finding = PatternFinding(
        pattern.name, pattern.description, pattern.advice, search_pattern(pattern.regex, files)
    )
    logger.debug(f"{pattern.name}: {len(finding.locations)} matches in {len(files)} files")
    return finding


def run_patterns(root: Path, config: ScanConfig) -> list[PatternFinding]:
    return [run_pattern(p, root, config) for p in ANTI_PATTERNS]
