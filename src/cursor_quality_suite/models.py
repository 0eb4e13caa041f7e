"""Data models for the quality scanner"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Metric(str, Enum):
    """Per-file structural metrics measured by the scanner."""

    LINES = "lines"
    IMPORTS = "imports"
    STATE_DECLS = "state_decls"
    EFFECT_DECLS = "effect_decls"
    DISTINCT_HOOKS = "distinct_hooks"

    @property
    def label(self) -> str:
        return _METRIC_LABELS[self]


_METRIC_LABELS = {
    Metric.LINES: "Lines",
    Metric.IMPORTS: "Imports",
    Metric.STATE_DECLS: "useState",
    Metric.EFFECT_DECLS: "useEffect",
    Metric.DISTINCT_HOOKS: "Custom hooks",
}


class Severity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class Verdict(str, Enum):
    """Aggregate outcome of one scan."""

    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed_with_warnings"
    FAILED = "failed"

    @property
    def exit_code(self) -> int:
        return 1 if self is Verdict.FAILED else 0


@dataclass(frozen=True)
class FileMetrics:
    """Raw observations for a single component file"""

    path: str
    lines: int
    imports: int
    state_decls: int
    effect_decls: int
    distinct_hooks: int

    def value(self, metric: Metric) -> int:
        return getattr(self, metric.value)


@dataclass(frozen=True)
class Issue:
    """A single metric breach. ``threshold`` is the limit of the breached tier."""

    file: str
    metric: Metric
    value: int
    severity: Severity
    threshold: int


@dataclass
class FileReport:
    """Metrics and breaches for one flagged file."""

    path: str
    metrics: FileMetrics
    issues: List[Issue] = field(default_factory=list)

    @property
    def has_critical(self) -> bool:
        return any(i.severity is Severity.CRITICAL for i in self.issues)


@dataclass(frozen=True)
class PatternMatch:
    path: str
    line_number: int
    line: str

    def __str__(self) -> str:
        return f"{self.path}:{self.line_number}:{self.line}"


@dataclass
class PatternFinding:
    """Result of one whole-tree anti-pattern search."""

    name: str
    description: str
    advice: str = ""
    locations: List[PatternMatch] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.locations)


@dataclass
class ScanResult:
    """Everything a single scan produced.

    ``critical_count`` counts files with at least one critical issue;
    ``warning_file_count`` counts the remaining files with a warning.
    ``notice`` is set when the scan stopped early (nothing to scan).
    """

    root: str
    files_scanned: int = 0
    file_reports: List[FileReport] = field(default_factory=list)
    pattern_findings: List[PatternFinding] = field(default_factory=list)
    critical_count: int = 0
    warning_file_count: int = 0
    notice: Optional[str] = None

    @property
    def warning_count(self) -> int:
        return self.warning_file_count + sum(1 for p in self.pattern_findings if p.found)

    @property
    def verdict(self) -> Verdict:
        if self.critical_count > 0:
            return Verdict.FAILED
        if self.warning_count > 0:
            return Verdict.PASSED_WITH_WARNINGS
        return Verdict.PASSED

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code
