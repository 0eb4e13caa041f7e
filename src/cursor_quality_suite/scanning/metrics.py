"""Per-file structural metrics and threshold classification.

These are text heuristics over the raw file contents, not a parse: a
``useState`` inside a comment or string counts the same as a real call.
"""

from __future__ import annotations

import re

from ..config import ThresholdConfig
from ..models import FileMetrics, Issue, Metric, Severity

IMPORT_RE = re.compile(r"^import", re.MULTILINE)
HOOK_RE = re.compile(r"use[A-Z][a-zA-Z]+")

STATE_TOKEN = "useState"
EFFECT_TOKEN = "useEffect"


def count_lines(content: str) -> int:
    """Newline-delimited segments; a trailing newline adds an empty segment."""
    return len(content.split("\n"))


def count_imports(content: str) -> int:
    return len(IMPORT_RE.findall(content))


def count_distinct_hooks(content: str) -> int:
    return len(set(HOOK_RE.findall(content)))


def compute_metrics(path: str, content: str) -> FileMetrics:
    return FileMetrics(
        path=path,
        lines=count_lines(content),
        imports=count_imports(content),
        state_decls=content.count(STATE_TOKEN),
        effect_decls=content.count(EFFECT_TOKEN),
        distinct_hooks=count_distinct_hooks(content),
    )


def classify(metrics: FileMetrics, thresholds: ThresholdConfig) -> list[Issue]:
    """
    Compare every metric against its limits.

    A value above the critical limit yields only a critical issue for that
    metric; a value above the warning limit (and not critical) yields a
    warning. Issues come back in ``Metric`` declaration order.
    """
    issues = []
    for metric in Metric:
        limit = thresholds.for_metric(metric)
        value = metrics.value(metric)
        if value > limit.critical:
            issues.append(Issue(metrics.path, metric, value, Severity.CRITICAL, limit.critical))
        elif value > limit.warning:
            issues.append(Issue(metrics.path, metric, value, Severity.WARNING, limit.warning))
    return issues
