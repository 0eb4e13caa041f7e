"""The quality scanner.

``scan`` never prints and never exits: it returns a ``ScanResult`` and the
caller decides what to do with the verdict.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..config import ScanConfig
from ..exceptions import DiscoveryError, FileAccessError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..models import FileReport, ScanResult
from .discovery import discover_files
from .metrics import classify, compute_metrics
from .patterns import run_patterns

logger = get_logger(__name__)


def scan(root: Union[str, Path], config: Optional[ScanConfig] = None) -> ScanResult:
    """
    Measure every component file under ``root`` and run the anti-pattern searches.

    Args:
        root: Directory (or single component file) to scan
        config: Scan configuration (defaults to built-in thresholds)

    Returns:
        Fully populated ScanResult. Unreadable files are left out of every
        count; a root that cannot be walked, or one without component files,
        yields an empty result with ``notice`` set.
    """
    config = config or ScanConfig()
    root = Path(root)
    result = ScanResult(root=str(root))

    try:
        files = discover_files(root, config)
    except DiscoveryError as e:
        logger.warning(f"Nothing to scan: {e}")
        result.notice = f"{e.message} ({e.reason})"
        return result

    if not files:
        exts = ", ".join(config.extensions)
        result.notice = f"No {exts} files found in {root}"
        logger.info(result.notice)
        return result

    logger.info(f"Scanning {len(files)} components in {root}")

    for filepath in files:
        try:
            content = safe_read_file(filepath)
        except FileAccessError as e:
            logger.debug(f"Skipped unreadable file {filepath}: {e.reason}")
            continue

        result.files_scanned += 1
        metrics = compute_metrics(str(filepath), content)
        issues = classify(metrics, config.thresholds)
        if not issues:
            continue

        report = FileReport(path=str(filepath), metrics=metrics, issues=issues)
        result.file_reports.append(report)
        if report.has_critical:
            result.critical_count += 1
        else:
            result.warning_file_count += 1

    result.pattern_findings = run_patterns(root, config)

    logger.info(
        f"Scan complete: {result.files_scanned} scanned, "
        f"{result.critical_count} critical, {result.warning_count} warnings"
    )
    return result
