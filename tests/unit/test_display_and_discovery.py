#!/usr/bin/env python3
"""Tests for text output and batch file discovery."""

import os

import pytest

from hardenscan.cli.batch_discovery import iter_files
from hardenscan.cli.display import format_report, print_outcome, print_usage
from hardenscan.core.inspector import AnalysisOutcome
from hardenscan.domain.results import FortifiedFunctions, HardeningFlags, Relro, build_report
from hardenscan.utils.error_handler import AnalysisError, AnalysisErrorKind

pytestmark = pytest.mark.unit


REPORT = build_report(
    HardeningFlags(relro=Relro.PARTIAL, stack_canary=True, pie=False, pic=True),
    FortifiedFunctions(("__printf_chk", "__memcpy_chk")),
)


class TestFormatReport:
    def test_exact_lines(self):
        assert format_report(REPORT) == [
            "RELRO: Partial",
            "STACK_CANARY: true",
            "PIE: false",
            "PIC: true",
            "FORTIFY: true",
            "CHECKED FUNCTIONS: 2",
        ]

    def test_function_listing_follows_count(self):
        lines = format_report(REPORT, list_functions=True)
        assert lines[5] == "CHECKED FUNCTIONS: 2"
        assert lines[6:] == ["  __printf_chk", "  __memcpy_chk"]

    def test_unfortified_binary(self):
        lines = format_report(build_report(HardeningFlags(), FortifiedFunctions()))
        assert lines[0] == "RELRO: None"
        assert lines[4:] == ["FORTIFY: false", "CHECKED FUNCTIONS: 0"]


class TestPrinting:
    def test_usage(self, capsys):
        print_usage()
        assert capsys.readouterr().out == "usage: hardenscan <binary_path>\n"

    def test_report_block(self, capsys):
        print_outcome(AnalysisOutcome(path="/bin/x", report=REPORT))
        out = capsys.readouterr().out
        assert out.splitlines() == ["", "/bin/x"] + format_report(REPORT)

    def test_error_block(self, capsys):
        error = AnalysisError(AnalysisErrorKind.MALFORMED_ELF, "bad magic [x]")
        print_outcome(AnalysisOutcome(path="/tmp/junk", error=error))
        assert capsys.readouterr().out.splitlines() == ["", "/tmp/junk", "ERROR: bad magic [x]"]


class TestIterFiles:
    def test_nested_directories_in_sorted_order(self, tmp_path):
        (tmp_path / "b").mkdir()
        (tmp_path / "a" / "deep").mkdir(parents=True)
        for relative in ("z", "b/one", "a/two", "a/deep/three"):
            (tmp_path / relative).write_bytes(b"x")

        found = [os.path.relpath(path, tmp_path) for path in iter_files(tmp_path)]
        assert found == ["z", "a/two", "a/deep/three", "b/one"]

    def test_file_root_is_yielded(self, tmp_path):
        target = tmp_path / "single"
        target.write_bytes(b"x")
        assert list(iter_files(target)) == [str(target)]

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(iter_files(tmp_path / "absent")) == []

    def test_empty_directory(self, tmp_path):
        assert list(iter_files(tmp_path)) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinks_are_skipped_unless_followed(self, tmp_path):
        real = tmp_path / "real"
        real.write_bytes(b"x")
        (tmp_path / "link").symlink_to(real)

        assert [os.path.basename(p) for p in iter_files(tmp_path)] == ["real"]
        assert [os.path.basename(p) for p in iter_files(tmp_path, follow_symlinks=True)] == ["link", "real"]

    def test_paths_keep_the_prefix_as_typed(self, tmp_path, monkeypatch):
        (tmp_path / "tree" / "sub").mkdir(parents=True)
        (tmp_path / "tree" / "top").write_bytes(b"x")
        (tmp_path / "tree" / "sub" / "inner").write_bytes(b"x")
        monkeypatch.chdir(tmp_path)

        assert list(iter_files("./tree/")) == ["./tree/top", "./tree/sub/inner"]
        assert list(iter_files("./tree/top")) == ["./tree/top"]
