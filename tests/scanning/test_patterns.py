"""Tests for the whole-tree anti-pattern searches."""

from cursor_quality_suite.config import ScanConfig
from cursor_quality_suite.scanning.patterns import ANY_TYPE, WATCH_USAGE, run_pattern, run_patterns


class TestWatchUsage:
    def test_finds_methods_watch(self, tmp_path, write_file):
        write_file("src/Form.tsx", "const a = 1;\nconst value = methods.watch();\n")

        finding = run_pattern(WATCH_USAGE, tmp_path, ScanConfig())

        assert finding.found
        assert len(finding.locations) == 1
        location = finding.locations[0]
        assert location.line_number == 2
        assert location.line == "const value = methods.watch();"
        assert location.path.endswith("Form.tsx")

    def test_finds_any_receiver(self, tmp_path, write_file):
        write_file("src/Form.tsx", "form.watch()")
        assert run_pattern(WATCH_USAGE, tmp_path, ScanConfig()).found

    def test_watch_with_arguments_is_not_flagged(self, tmp_path, write_file):
        write_file("src/Form.tsx", "methods.watch('name');\nuseWatch({ control });")
        assert not run_pattern(WATCH_USAGE, tmp_path, ScanConfig()).found

    def test_searches_test_and_story_files(self, tmp_path, write_file):
        write_file("src/Form.stories.tsx", "methods.watch()")
        assert run_pattern(WATCH_USAGE, tmp_path, ScanConfig()).found

    def test_ignores_dependencies_and_other_extensions(self, tmp_path, write_file):
        write_file("node_modules/lib/Form.tsx", "methods.watch()")
        write_file("src/form.ts", "methods.watch()")
        assert not run_pattern(WATCH_USAGE, tmp_path, ScanConfig()).found

    def test_collects_every_match(self, tmp_path, write_file):
        write_file("a/A.tsx", "x.watch()\ny.watch()")
        write_file("b/B.tsx", "z.watch()")
        finding = run_pattern(WATCH_USAGE, tmp_path, ScanConfig())
        assert [(loc.path.endswith("A.tsx"), loc.line_number) for loc in finding.locations] == [
            (True, 1),
            (True, 2),
            (False, 1),
        ]


class TestAnyType:
    def test_finds_annotation_forms(self, tmp_path, write_file):
        write_file("src/api.ts", "let a: any;\nlet b:any;\nconst c = d as any;\nconst ok: string = '';")
        finding = run_pattern(ANY_TYPE, tmp_path, ScanConfig())
        assert [loc.line_number for loc in finding.locations] == [1, 2, 3]

    def test_skips_test_files(self, tmp_path, write_file):
        write_file("src/api.test.ts", "let a: any;")
        write_file("src/View.test.tsx", "let a: any;")
        assert not run_pattern(ANY_TYPE, tmp_path, ScanConfig()).found

    def test_story_files_are_still_searched(self, tmp_path, write_file):
        write_file("src/View.stories.tsx", "const args = {} as any;")
        assert run_pattern(ANY_TYPE, tmp_path, ScanConfig()).found

    def test_ignores_untyped_sources(self, tmp_path, write_file):
        write_file("src/legacy.js", "let a: any;")
        assert not run_pattern(ANY_TYPE, tmp_path, ScanConfig()).found


class TestRunPatterns:
    def test_returns_one_finding_per_pattern(self, tmp_path, write_file):
        write_file("src/Clean.tsx", "export const Clean = () => null;")
        findings = run_patterns(tmp_path, ScanConfig())
        assert [f.name for f in findings] == ["watch-usage", "any-type"]
        assert not any(f.found for f in findings)

    def test_missing_root_counts_as_no_matches(self, tmp_path):
        findings = run_patterns(tmp_path / "missing", ScanConfig())
        assert not any(f.found for f in findings)
