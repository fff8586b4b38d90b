"""Tests for the CLI module: arg parsing, exit codes, output formats, end-to-end."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from boollex.cli import CliOptions, build_parser, main, render_report

# ---------------------------------------------------------------------------
# Arg parsing via build_parser
# ---------------------------------------------------------------------------


class TestArgParsing:
    def test_input_only(self) -> None:
        p = build_parser()
        ns = p.parse_args(["expr.bool"])
        assert ns.input == "expr.bool"
        assert ns.output is None
        assert ns.format is None

    def test_output_flag(self) -> None:
        p = build_parser()
        ns = p.parse_args(["expr.bool", "-o", "out.html"])
        assert ns.output == "out.html"

    def test_format_flag(self) -> None:
        p = build_parser()
        ns = p.parse_args(["expr.bool", "-f", "json"])
        assert ns.format == "json"

    def test_unknown_format_rejected(self) -> None:
        p = build_parser()
        with pytest.raises(SystemExit):
            p.parse_args(["expr.bool", "-f", "xml"])

    def test_html_flags(self) -> None:
        p = build_parser()
        ns = p.parse_args(["expr.bool", "--title", "T", "--css", "a.css", "--css", "b.css"])
        assert ns.title == "T"
        assert ns.css == ["a.css", "b.css"]

    def test_context_flag(self) -> None:
        p = build_parser()
        ns = p.parse_args(["expr.bool", "--context"])
        assert ns.context is True


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class TestExitCodes:
    def test_clean_scan(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "ok.bool"
        src.write_text("x := 1 and y;\n")
        assert main([str(src)]) == 0
        out = capsys.readouterr().out
        assert "6 tokens (6 ok, 0 errors)" in out

    def test_scan_errors_return_1(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "bad.bool"
        src.write_text("a :: b\n")
        assert main([str(src)]) == 1
        out = capsys.readouterr().out
        assert "unexpected character ':' (line 1, column 3)" in out

    def test_unterminated_comment_returns_1(self, tmp_path: Path) -> None:
        src = tmp_path / "c.bool"
        src.write_text("/* open")
        assert main([str(src)]) == 1

    def test_missing_file_returns_2(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "nope.bool")]) == 2
        assert "cannot read input" in capsys.readouterr().err

    def test_bad_config_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "boollex.toml").write_text('[output]\nformat = "pdf"\n')
        src = tmp_path / "ok.bool"
        src.write_text("x;")
        assert main([str(src)]) == 2
        assert "invalid output format" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Input / output
# ---------------------------------------------------------------------------


class TestInputOutput:
    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("not 0;"))
        assert main(["-"]) == 0
        assert "Keyword (NOT)" in capsys.readouterr().out

    def test_output_file(self, tmp_path: Path) -> None:
        src = tmp_path / "e.bool"
        src.write_text("x := 0;")
        out = tmp_path / "out.json"
        assert main([str(src), "-f", "json", "-o", str(out)]) == 0
        data = json.loads(out.read_text())
        assert data["token_count"] == 4

    def test_html_output(self, tmp_path: Path) -> None:
        src = tmp_path / "e.bool"
        src.write_text("x := 0;")
        out = tmp_path / "out.html"
        assert main([str(src), "-f", "html", "--title", "Check", "-o", str(out)]) == 0
        html = out.read_text()
        assert "<h1>Check</h1>" in html
        assert "<td>Assignment</td>" in html

    def test_context_to_stderr(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "e.bool"
        src.write_text("x ? y")
        assert main([str(src), "--context"]) == 1
        err = capsys.readouterr().err
        assert "error: unexpected character '?'" in err
        assert f"{src}:1:3" in err


# ---------------------------------------------------------------------------
# render_report smoke test
# ---------------------------------------------------------------------------


class TestRenderReport:
    def test_basic(self) -> None:
        opts = CliOptions(
            input_file=None,
            output_file=None,
            output_format="text",
            title="t",
            css_files=[],
            context=False,
        )
        report, has_errors = render_report("a or b", opts)
        assert "Keyword (OR)" in report
        assert has_errors is False
