"""
HTML Report Renderer: streams a ResultSet into a self-contained HTML report.

Uses Jinja2 templating with the report.html template (head, style sheet and
filter script live in _head.html). The template is generated chunk by chunk
into the caller's sink, so large result sets are never buffered whole.
"""

from __future__ import annotations

import io
from datetime import datetime
from itertools import chain
from pathlib import Path
from typing import Iterator, Optional, TextIO

from jinja2 import Environment, FileSystemLoader

from results_schema import DiagnosticLevel, ReportConfig, ResultSet, Violation
from summary import build_bug_summary, category_key

_TEMPLATE_DIR = Path(__file__).parent
_TEMPLATE_NAME = "report.html"

# level -> (row class, rule name cell, level cell class, level cell text)
_DIAGNOSTIC_CELLS: dict[str, tuple[str, str, str, str]] = {
    "error": ("compiler-error", "compiler error", "cmplr-error", "error"),
    "warning": ("compiler-warning", "compiler warning", "cmplr-warning", "warning"),
    "checker-bug": ("clang_static_analyzer", "clang static analyzer", "checker-bug", "checker bug"),
}

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def _violation_rows(violations: list[Violation]) -> Iterator[dict]:
    for violation in violations:
        rule = violation.rule
        yield {
            "css_class": category_key(rule.name),
            "path": violation.path,
            "location": violation.location,
            "name": rule.name,
            "category": rule.category,
            "level_class": f"priority{rule.priority}",
            "level": rule.priority,
            "message": violation.message,
        }


def _diagnostic_rows(violations: list[Violation], level: DiagnosticLevel) -> Iterator[dict]:
    row_class, name, level_class, level_text = _DIAGNOSTIC_CELLS[level]
    for violation in violations:
        yield {
            "css_class": row_class,
            "path": violation.path,
            "location": violation.location,
            "name": name,
            "category": "",
            "level_class": level_class,
            "level": level_text,
            "message": violation.message,
        }


def _detail_rows(results: ResultSet) -> Iterator[dict]:
    """Violations in reported order, then errors, warnings and checker bugs."""
    return chain(
        _violation_rows(results.violations),
        _diagnostic_rows(results.errors, "error"),
        _diagnostic_rows(results.warnings, "warning"),
        _diagnostic_rows(results.checker_bugs, "checker-bug"),
    )


def render_html_report(
    results: ResultSet,
    out: TextIO,
    version: str,
    config: Optional[ReportConfig] = None,
    now: Optional[datetime] = None,
) -> None:
    """
    Write a self-contained HTML report for one analysis run.

    Args:
        results: Result set snapshot; not modified.
        out: Text sink; only its write() method is used. Write errors propagate.
        version: Identifier shown in the footer.
        config: Presentation strings; defaults to ReportConfig().
        now: Footer timestamp; defaults to the current local time.
    """
    results.require_rules()
    config = config or ReportConfig()
    now = now or datetime.now()
    template = _env.get_template(_TEMPLATE_NAME)

    context = {
        "title": config.title,
        "sortable_script": config.sortable_script,
        "generator_name": config.generator_name,
        "generator_url": config.generator_url,
        "version": version,
        "generated_at": now.ctime(),
        "summary": build_bug_summary(results),
        "rows": _detail_rows(results),
    }

    for chunk in template.generate(**context):
        out.write(chunk)


def render_html_string(
    results: ResultSet,
    version: str,
    config: Optional[ReportConfig] = None,
    now: Optional[datetime] = None,
) -> str:
    """Render the report into a string."""
    buffer = io.StringIO()
    render_html_report(results, buffer, version, config=config, now=now)
    return buffer.getvalue()
