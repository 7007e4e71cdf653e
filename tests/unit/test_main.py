# tests/unit/test_main.py — v1
"""Tests for main.py: CLI entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from hubtags.main import _build_parser, main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep any local .env out of CLI settings."""
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Parser tests
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_version_flag(self):
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_analyze_subcommand(self):
        args = _build_parser().parse_args(["analyze", "net.txt", "--ths", "0.3", "--thc", "2"])
        assert args.command == "analyze"
        assert args.file == Path("net.txt")
        assert args.ths == 0.3
        assert args.thc == 2

    def test_analyze_defaults(self):
        args = _build_parser().parse_args(["analyze", "net.txt"])
        assert args.ths is None
        assert args.thc is None
        assert args.tags_per_line is None
        assert args.mode is None

    def test_strength_subcommand(self):
        args = _build_parser().parse_args(["--mode", "open", "strength", "net.txt", "0", "2"])
        assert args.command == "strength"
        assert (args.u, args.v) == (0, 2)
        assert args.mode == "open"


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_missing_file(self, tmp_path):
        assert main(["analyze", str(tmp_path / "nope.txt")]) == 1

    def test_analyze_prints_report(self, sample_input_file, sample_report, capsys):
        assert main(["analyze", str(sample_input_file)]) == 0
        assert capsys.readouterr().out == sample_report

    def test_analyze_thc_override(self, sample_input_file, capsys):
        assert main(["analyze", str(sample_input_file), "--thc", "1"]) == 0
        out = capsys.readouterr().out
        assert "Core user: u0; close friends: u1 u2" in out
        assert "Core user: u1" not in out

    def test_analyze_tags_per_line(self, sample_input_file, capsys):
        assert main(["analyze", str(sample_input_file), "--tags-per-line", "2"]) == 0
        assert "#art #data\n#ml #python\n#web\n" in capsys.readouterr().out

    def test_strength(self, sample_input_file, capsys):
        assert main(["strength", str(sample_input_file), "0", "1"]) == 0
        assert capsys.readouterr().out == "Strength of connection between u0 and u1: 0.67\n"

    def test_strength_open_mode(self, sample_input_file, capsys):
        assert main(["--mode", "open", "strength", str(sample_input_file), "0", "1"]) == 0
        assert capsys.readouterr().out.endswith("0.00\n")

    def test_strength_out_of_range(self, sample_input_file, capsys):
        assert main(["strength", str(sample_input_file), "0", "9"]) == 1
        assert capsys.readouterr().out == ""

    def test_malformed_input(self, tmp_path, capsys):
        bad = tmp_path / "bad.txt"
        bad.write_text("u0 2020 nohash\n0\n0.5 0\n", encoding="utf-8")
        assert main(["analyze", str(bad)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid hashtag" in captured.err
