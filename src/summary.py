"""
Bug summary aggregation.

Violations are grouped per priority by CategoryKey, the rule name with spaces
replaced by underscores. The same key is the row class targeted by the
report's display filters, so rules whose names sanitize identically share a
summary row even when their categories differ.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel

from results_schema import PRIORITIES, ResultSet


def category_key(name: str) -> str:
    """Sanitize a rule name for use as summary key and HTML row class."""
    return name.replace(" ", "_")


class SummaryRow(BaseModel):
    key: str
    count: int


class PrioritySummary(BaseModel):
    """Per-category counts for one priority level."""
    priority: int
    total: int
    rows: list[SummaryRow]

    @property
    def css_class(self) -> str:
        return f"priority{self.priority}"


class BugSummary(BaseModel):
    all_bugs: int
    priorities: list[PrioritySummary]

    @property
    def keys(self) -> list[str]:
        return [row.key for section in self.priorities for row in section.rows]


def summarize_priority(results: ResultSet, priority: int) -> PrioritySummary:
    """
    Count violations of one priority per CategoryKey.

    Rows are ordered by key, so identical input always yields identical
    output regardless of the order violations were reported in.
    """
    counts: Counter[str] = Counter()
    for violation in results.violations:
        if violation.rule.priority != priority:
            continue
        counts[category_key(violation.rule.name)] += 1

    total = results.number_of_violations_with_priority(priority)
    assert sum(counts.values()) == total, (
        f"priority {priority}: grouped {sum(counts.values())} violations, result set reports {total}"
    )
    return PrioritySummary(
        priority=priority,
        total=total,
        rows=[SummaryRow(key=key, count=counts[key]) for key in sorted(counts)],
    )


def build_bug_summary(results: ResultSet) -> BugSummary:
    """Summaries for every priority with at least one violation."""
    totals = {p: results.number_of_violations_with_priority(p) for p in PRIORITIES}
    return BugSummary(
        all_bugs=sum(totals.values()),
        priorities=[summarize_priority(results, p) for p in PRIORITIES if totals[p] > 0],
    )
