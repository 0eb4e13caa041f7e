"""Tests for candidate file discovery and exclusion rules."""

from pathlib import Path

import pytest

from cursor_quality_suite.config import ScanConfig
from cursor_quality_suite.exceptions import DiscoveryError
from cursor_quality_suite.scanning.discovery import (
    discover_files,
    is_excluded_dir,
    is_excluded_name,
    iter_files,
)

MARKERS = ScanConfig().excluded_markers


class TestExclusionPredicates:
    @pytest.mark.parametrize(
        "name",
        ["Foo.test.tsx", "Foo.stories.tsx", "Foo.styled.tsx", "Foo.types.tsx", "Foo.mock.tsx"],
    )
    def test_marked_names_are_excluded(self, name):
        assert is_excluded_name(Path("src") / name, MARKERS)

    def test_marker_needs_both_dots(self):
        assert not is_excluded_name(Path("Foo.testing.tsx"), MARKERS)
        assert not is_excluded_name(Path("Latest.tsx"), MARKERS)

    def test_only_the_file_name_is_checked(self):
        assert not is_excluded_name(Path("src/a.test.dir/Button.tsx"), MARKERS)

    def test_dependency_segment(self):
        assert is_excluded_dir(Path("web/node_modules/pkg/Button.tsx"), ["node_modules"])
        assert not is_excluded_dir(Path("web/node_modules_backup/Button.tsx"), ["node_modules"])


class TestDiscoverFiles:
    def test_finds_components_recursively_in_sorted_order(self, tmp_path, write_file):
        write_file("src/b/Zeta.tsx")
        write_file("src/a/Alpha.tsx")
        write_file("src/Beta.tsx")

        files = discover_files(tmp_path, ScanConfig())

        assert [f.relative_to(tmp_path).as_posix() for f in files] == [
            "src/Beta.tsx",
            "src/a/Alpha.tsx",
            "src/b/Zeta.tsx",
        ]

    def test_applies_exclusions(self, tmp_path, write_file):
        write_file("src/Button.tsx")
        write_file("src/Button.test.tsx")
        write_file("src/Button.stories.tsx")
        write_file("src/helpers.ts")
        write_file("node_modules/lib/Widget.tsx")
        write_file("packages/ui/node_modules/lib/Widget.tsx")

        files = discover_files(tmp_path, ScanConfig())

        assert [f.name for f in files] == ["Button.tsx"]

    def test_empty_directory(self, tmp_path):
        assert discover_files(tmp_path, ScanConfig()) == []

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(DiscoveryError, match="Cannot discover"):
            discover_files(tmp_path / "missing", ScanConfig())

    def test_file_root_yields_that_file(self, write_file):
        path = write_file("src/Button.tsx")
        assert discover_files(path, ScanConfig()) == [path]

    @pytest.mark.parametrize("relpath", ["src/Button.test.tsx", "src/helpers.ts"])
    def test_file_root_obeys_exclusions(self, write_file, relpath):
        assert discover_files(write_file(relpath), ScanConfig()) == []

    def test_root_inside_dependency_tree_yields_nothing(self, tmp_path, write_file):
        write_file("node_modules/pkg/Huge.tsx")
        write_file("node_modules/pkg/lib/Nested.tsx")

        assert discover_files(tmp_path / "node_modules" / "pkg", ScanConfig()) == []
        assert discover_files(tmp_path / "node_modules" / "pkg" / "Huge.tsx", ScanConfig()) == []

    def test_custom_extensions(self, tmp_path, write_file):
        write_file("src/view.jsx")
        write_file("src/view.tsx")
        config = ScanConfig(extensions=(".jsx",))
        assert [f.name for f in discover_files(tmp_path, config)] == ["view.jsx"]


class TestIterFiles:
    def test_without_markers_keeps_test_files(self, tmp_path, write_file):
        write_file("Button.test.tsx")
        write_file("Button.tsx")
        names = [f.name for f in iter_files(tmp_path, [".tsx"], ["node_modules"])]
        assert names == ["Button.test.tsx", "Button.tsx"]

    def test_directories_with_matching_suffix_are_skipped(self, tmp_path, write_file):
        (tmp_path / "weird.tsx").mkdir()
        write_file("Real.tsx")
        names = [f.name for f in iter_files(tmp_path, [".tsx"], [])]
        assert names == ["Real.tsx"]
