#!/usr/bin/env python3
"""
HTML Reporter: CLI entrypoint.

Usage:
  python src/main.py results.json                   # Render report to stdout
  python src/main.py results.json -o report.html    # Render report to a file
  cat results.json | python src/main.py -o out.html # Read results JSON from stdin
  python src/main.py results.json --identifier 22.02 --title "Nightly Lint"

Input JSON format:
{
  "file_count": 12,
  "violations": [
    {"path": "a.cpp", "start_line": 10, "start_column": 2,
     "message": "empty if statement",
     "rule": {"name": "Empty If Statement", "category": "basic", "priority": 1}}
  ],
  "errors": [{"path": "b.cpp", "start_line": 3, "start_column": 1, "message": "..."}],
  "warnings": [],
  "checker_bugs": []
}

Output:
  - HTML report written to --output (or stdout)
  - Progress and errors printed to stderr
  - The report references sorttable.js, which must sit next to the HTML file
    for column sorting to work
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

# Allow running from the repository root as well as src/
sys.path.insert(0, str(Path(__file__).parent))

from reporter import __version__, get_reporter
from results_schema import ReportConfig, ResultSet


def _load_results(args: argparse.Namespace) -> ResultSet:
    if args.input_file:
        input_path = Path(args.input_file)
        if not input_path.exists():
            print(f"ERROR: Input file not found: {input_path}", file=sys.stderr)
            sys.exit(1)
        with open(input_path, encoding="utf-8") as f:
            text = f.read()
        source = str(input_path)
    else:
        text = sys.stdin.read()
        source = "stdin"

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        print(f"ERROR: Invalid JSON in {source}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        results = ResultSet.model_validate(raw)
    except ValidationError as e:
        print(f"ERROR: Invalid result set in {source}:\n{e}", file=sys.stderr)
        sys.exit(1)

    print(f"[HTML Reporter] Loaded results from {source}", file=sys.stderr)
    return results


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Render static-analysis results as an interactive HTML report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to result set JSON file (omit to read stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write the HTML report to (default: stdout)",
    )
    parser.add_argument(
        "--report-type",
        default="html",
        help="Output format name (default: html)",
    )
    parser.add_argument(
        "--identifier",
        default=__version__,
        help=f"Version identifier shown in the footer (default: {__version__})",
    )
    parser.add_argument(
        "--title",
        default=ReportConfig().title,
        help="Report title",
    )
    parser.add_argument(
        "--sortable-script",
        default=ReportConfig().sortable_script,
        help="Relative name of the column-sorting script the report loads",
    )

    args = parser.parse_args(argv)

    if not args.input_file and sys.stdin.isatty():
        parser.error("no input file given and stdin is a terminal")

    try:
        reporter_cls = get_reporter(args.report_type)
    except KeyError as e:
        print(f"ERROR: {e.args[0]}", file=sys.stderr)
        sys.exit(1)

    results = _load_results(args)
    reporter = reporter_cls(
        version=args.identifier,
        config=ReportConfig(title=args.title, sortable_script=args.sortable_script),
    )

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            reporter.report(results, f)
        print(f"[HTML Reporter] HTML report saved: {output_path}", file=sys.stderr)
    else:
        reporter.report(results, sys.stdout)
        sys.stdout.flush()

    print(
        f"[HTML Reporter] Rendered {len(results.violations)} violation(s), "
        f"{len(results.errors) + len(results.warnings)} compiler diagnostic(s), "
        f"{len(results.checker_bugs)} checker bug(s).",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
