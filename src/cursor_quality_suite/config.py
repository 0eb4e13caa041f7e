"""Configuration loading and management for the quality suite.

Thresholds and scan settings are merged in priority order:
    1. Defaults (defined in ScanConfig / ThresholdConfig)
    2. Project config (./.quality-suite.toml)
    3. Explicit config file (--config)
    4. Environment variables (QUALITY_SUITE_* prefix)
    5. Keyword overrides (typically from CLI flags)

Example:
    >>> config = load_config(max_pattern_locations=10)
    >>> config.thresholds.lines.critical
    300
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidConfigError
from .models import Metric

PROJECT_CONFIG_NAME = ".quality-suite.toml"
ENV_PREFIX = "QUALITY_SUITE_"

# Hyphenated spellings accepted in config files alongside the field names.
METRIC_ALIASES = {
    "lines-of-code": Metric.LINES,
    "import-count": Metric.IMPORTS,
    "state-declaration-count": Metric.STATE_DECLS,
    "effect-declaration-count": Metric.EFFECT_DECLS,
    "distinct-hook-count": Metric.DISTINCT_HOOKS,
}


@dataclass(frozen=True)
class MetricThreshold:
    """Warning and critical limits for one metric. A value must exceed a limit to breach it."""

    warning: int
    critical: int

    def __post_init__(self) -> None:
        if self.warning < 0 or self.critical < 0:
            raise ValueError("thresholds must be non-negative")
        if self.warning > self.critical:
            raise ValueError(
                f"warning threshold ({self.warning}) exceeds critical threshold ({self.critical})"
            )


@dataclass(frozen=True)
class ThresholdConfig:
    """Per-metric limits for component files.

    Attributes:
        lines: Physical line count
        imports: Lines starting with ``import``
        state_decls: ``useState`` occurrences
        effect_decls: ``useEffect`` occurrences
        distinct_hooks: Distinct ``useXxx`` identifiers
    """

    lines: MetricThreshold = MetricThreshold(warning=150, critical=300)
    imports: MetricThreshold = MetricThreshold(warning=20, critical=35)
    state_decls: MetricThreshold = MetricThreshold(warning=4, critical=6)
    effect_decls: MetricThreshold = MetricThreshold(warning=3, critical=5)
    distinct_hooks: MetricThreshold = MetricThreshold(warning=8, critical=15)

    def for_metric(self, metric: Metric) -> MetricThreshold:
        return getattr(self, metric.value)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base: Optional[ThresholdConfig] = None) -> ThresholdConfig:
        """Build thresholds from ``{metric: {"warning": n, "critical": n}}``.

        Metrics missing from ``data`` (and missing tiers within a metric) keep
        the values from ``base``, or the defaults.
        """
        base = base or cls()
        values = {m.value: base.for_metric(m) for m in Metric}

        for key, tiers in data.items():
            metric = _resolve_metric(key)
            if not isinstance(tiers, dict):
                raise InvalidConfigError(f"thresholds.{key}", tiers, "expected a table of warning/critical")
            unknown = set(tiers) - {"warning", "critical"}
            if unknown:
                raise InvalidConfigError(
                    f"thresholds.{key}", ", ".join(sorted(unknown)), "unknown threshold tier"
                )
            current = values[metric.value]
            try:
                values[metric.value] = MetricThreshold(
                    warning=int(tiers.get("warning", current.warning)),
                    critical=int(tiers.get("critical", current.critical)),
                )
            except (TypeError, ValueError) as e:
                raise InvalidConfigError(f"thresholds.{key}", tiers, str(e))

        return cls(**values)


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan.

    Attributes:
        extensions: Suffixes of files measured against thresholds
        watch_extensions: Suffixes searched for ``.watch()`` calls
        typed_extensions: Suffixes searched for ``any`` annotations
        excluded_dirs: Directory names never descended into (dependencies)
        excluded_markers: Name fragments that exclude a file from measurement
        any_excluded_markers: Name fragments that exclude a file from the ``any`` search
        max_pattern_locations: Match locations shown per anti-pattern in the report
        thresholds: Per-metric warning/critical limits
    """

    extensions: tuple[str, ...] = (".tsx",)
    watch_extensions: tuple[str, ...] = (".tsx",)
    typed_extensions: tuple[str, ...] = (".ts", ".tsx")
    excluded_dirs: tuple[str, ...] = ("node_modules",)
    excluded_markers: tuple[str, ...] = (".test.", ".stories.", ".styled.", ".types.", ".mock.")
    any_excluded_markers: tuple[str, ...] = (".test.",)
    max_pattern_locations: int = 5
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("extensions", "watch_extensions", "typed_extensions"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            for ext in value:
                if not ext.startswith("."):
                    raise ValueError(f"{name} entries must start with '.', got {ext!r}")

        if self.max_pattern_locations < 1:
            raise ValueError("max_pattern_locations must be at least 1")


def load_config(
    config_file: Optional[Path] = None, project_dir: Optional[Path] = None, **overrides
) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        project_dir: Directory searched for ``.quality-suite.toml`` (defaults to cwd)
        **overrides: Direct overrides (typically from CLI flags). A
            ``thresholds`` override is merged per metric.

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}
    thresholds_data: dict[str, dict[str, Any]] = {}

    def absorb(data: dict[str, Any]) -> None:
        data = dict(data)
        section = data.pop("thresholds", None)
        if section is not None:
            if not isinstance(section, dict):
                raise InvalidConfigError("thresholds", section, "expected a table")
            for key, tiers in section.items():
                metric = _resolve_metric(key)
                if isinstance(tiers, dict):
                    thresholds_data.setdefault(metric.value, {}).update(tiers)
                else:
                    thresholds_data[metric.value] = tiers
        merged.update(data)

    # 1. Project config
    project_config = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            absorb(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    # 2. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            absorb(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    # 3. Environment variables
    absorb(_load_env_vars())

    # 4. CLI overrides
    absorb({k: v for k, v in overrides.items() if v is not None})

    merged["thresholds"] = ThresholdConfig.from_dict(thresholds_data)

    for key in ("extensions", "watch_extensions", "typed_extensions", "excluded_dirs",
                "excluded_markers", "any_excluded_markers"):
        if key not in merged:
            continue
        value = merged[key]
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise InvalidConfigError(key, value, "expected a list of strings")
        merged[key] = tuple(value)

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _resolve_metric(key: str) -> Metric:
    if key in METRIC_ALIASES:
        return METRIC_ALIASES[key]
    try:
        return Metric(key.replace("-", "_"))
    except ValueError:
        known = ", ".join(m.value for m in Metric)
        raise InvalidConfigError(f"thresholds.{key}", key, f"unknown metric (expected one of: {known})")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from QUALITY_SUITE_* environment variables.

    Supported environment variables:
        QUALITY_SUITE_<METRIC>_WARNING: int (e.g. QUALITY_SUITE_LINES_WARNING)
        QUALITY_SUITE_<METRIC>_CRITICAL: int
        QUALITY_SUITE_MAX_PATTERN_LOCATIONS: int

    Returns:
        Dict in the same shape as a parsed config file.
    """
    result: dict[str, Any] = {}
    thresholds: dict[str, dict[str, int]] = {}

    for metric in Metric:
        for tier in ("warning", "critical"):
            env_key = f"{ENV_PREFIX}{metric.value.upper()}_{tier.upper()}"
            env_value = os.environ.get(env_key)
            if env_value is None:
                continue
            try:
                thresholds.setdefault(metric.value, {})[tier] = int(env_value)
            except ValueError:
                raise ConfigurationError(f"Invalid {env_key}: expected an integer, got '{env_value}'")

    env_key = f"{ENV_PREFIX}MAX_PATTERN_LOCATIONS"
    env_value = os.environ.get(env_key)
    if env_value is not None:
        try:
            result["max_pattern_locations"] = int(env_value)
        except ValueError:
            raise ConfigurationError(f"Invalid {env_key}: expected an integer, got '{env_value}'")

    if thresholds:
        result["thresholds"] = thresholds
    return result


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)

