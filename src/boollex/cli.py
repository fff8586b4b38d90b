"""Command-line interface for boollex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from boollex.analysis import analyze
from boollex.errors import ConfigError
from boollex.render import DEFAULT_TITLE, render_html, render_json, render_text

FORMATS = ("text", "json", "html")
CONFIG_NAME = "boollex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    title: str
    css_files: list[str]
    context: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="boollex",
        description="Lexical analyzer for boolean-algebra expressions",
    )
    p.add_argument("input", help="Input file ('-' reads stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Report format (default: text)",
    )
    p.add_argument("--title", default=None, help="Page title for the HTML report")
    p.add_argument(
        "--css",
        action="append",
        default=[],
        metavar="FILE",
        help="CSS file to link from the HTML report (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--context",
        action="store_true",
        help="Print each error with its source line to stderr",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        cfg_format = cfg_output["format"]
        if cfg_format not in FORMATS:
            raise ConfigError(
                f"invalid output format {cfg_format!r} (expected one of {', '.join(FORMATS)})"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # HTML title and stylesheets: config < CLI
    title = DEFAULT_TITLE
    css_files: list[str] = []
    cfg_html = config.get("html")
    if isinstance(cfg_html, dict):
        cfg_title = cfg_html.get("title")
        if cfg_title is not None:
            if not isinstance(cfg_title, str):
                raise ConfigError("html.title must be a string")
            title = cfg_title
        cfg_css = cfg_html.get("css")
        if cfg_css is not None:
            if not isinstance(cfg_css, list) or not all(isinstance(f, str) for f in cfg_css):
                raise ConfigError("html.css must be a list of strings")
            css_files.extend(cfg_css)
    if args.title is not None:
        title = args.title
    css_files.extend(args.css)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        title=title,
        css_files=css_files,
        context=args.context,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def render_report(source: str, options: CliOptions) -> tuple[str, bool]:
    """Analyze source and render it; return (report, has_errors)."""
    result = analyze(source)

    if options.context:
        filename = str(options.input_file) if options.input_file else "<stdin>"
        for err in result.diagnostics:
            print(err.format(source, filename), file=sys.stderr)

    if options.output_format == "json":
        report = render_json(result)
    elif options.output_format == "html":
        report = render_html(result, title=options.title, css_files=options.css_files)
    else:
        report = render_text(result)
    return report, result.has_errors


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    report, has_errors = render_report(source, options)

    if options.output_file:
        try:
            options.output_file.write_text(report, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write output: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(report)

    return 1 if has_errors else 0
