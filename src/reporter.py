"""
Reporter registration: the host selects an output format by its short name
and calls report(results, out).
"""

from __future__ import annotations

from typing import Optional, TextIO

from results_schema import ReportConfig, ResultSet
from ui.renderer import render_html_report

__version__ = "0.1.0"


class HTMLReporter:
    """Interactive HTML report with per-category display filters."""

    name = "html"

    def __init__(self, version: str = __version__, config: Optional[ReportConfig] = None):
        self.version = version
        self.config = config or ReportConfig()

    def report(self, results: ResultSet, out: TextIO) -> None:
        render_html_report(results, out, self.version, config=self.config)


REPORTERS = {cls.name: cls for cls in (HTMLReporter,)}


def get_reporter(name: str) -> type[HTMLReporter]:
    try:
        return REPORTERS[name]
    except KeyError:
        raise KeyError(
            f"unknown report type {name!r}; available: {', '.join(sorted(REPORTERS))}"
        ) from None
