"""Candidate file discovery.

Walks the tree natively and applies the exclusion rules: nothing under a
dependency directory, and no file whose name carries an excluded marker
(``Button.test.tsx``, ``Card.stories.tsx``, ...).
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import ScanConfig
from ..exceptions import DiscoveryError
from ..logging_config import get_logger

logger = get_logger(__name__)


def is_excluded_dir(path: Path, excluded_dirs: Iterable[str]) -> bool:
    """True if any segment of ``path`` is an excluded directory name."""
    excluded = set(excluded_dirs)
    return any(part in excluded for part in path.parts)


def is_excluded_name(path: Path, markers: Iterable[str]) -> bool:
    """True if the file name contains any of ``markers``."""
    name = path.name
    return any(marker in name for marker in markers)


def _walk_error(error: OSError) -> None:
    logger.debug(f"Cannot list {error.filename}: {error.strerror}")


def iter_files(
    root: Path,
    extensions: Iterable[str],
    excluded_dirs: Iterable[str],
    markers: Iterable[str] = (),
) -> Iterator[Path]:
    """
    Yield regular files under ``root`` in a stable, sorted order.

    Args:
        root: Directory to walk, or a single file checked against the same rules
        extensions: File suffixes to include (e.g. ['.tsx'])
        excluded_dirs: Directory names that are never descended into
        markers: Name fragments that exclude a file
    """
    ext_set = set(extensions)
    excluded = set(excluded_dirs)
    markers = tuple(markers)
    root = Path(root)

    def accepted(filepath: Path) -> bool:
        if filepath.suffix not in ext_set:
            return False
        # Checked on the full path so a root inside a dependency tree yields nothing
        if is_excluded_dir(filepath.parent, excluded):
            logger.debug(f"Skipped (dependency): {filepath}")
            return False
        if markers and is_excluded_name(filepath, markers):
            logger.debug(f"Skipped (name): {filepath}")
            return False
        return filepath.is_file()

    if root.is_file():
        if accepted(root):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_walk_error):
        # Prune in place so os.walk skips dependency trees entirely
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)

        current = Path(dirpath)
        for name in sorted(filenames):
            filepath = current / name
            if accepted(filepath):
                yield filepath


def discover_files(root: Path, config: ScanConfig) -> list[Path]:
    """
    List the component files to measure under ``root``.

    A ``root`` that is itself a component file yields just that file,
    subject to the usual exclusions.

    Raises:
        DiscoveryError: If ``root`` is missing or cannot be listed
    """
    root = Path(root)
    if not root.exists():
        raise DiscoveryError(root, "path does not exist")
    if root.is_dir():
        try:
            os.listdir(root)
        except OSError as e:
            raise DiscoveryError(root, f"OS error: {e}")

    files = list(
        iter_files(root, config.extensions, config.excluded_dirs, config.excluded_markers)
    )
    logger.debug(f"Discovered {len(files)} candidate files under {root}")
    return files
