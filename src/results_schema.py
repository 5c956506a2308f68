"""
Result Set Models: Pydantic schemas for analysis results handed to the renderer.

A ResultSet is produced by the analysis engine and is read-only here:
  - violations:    rule violations, each carrying the Rule that produced it
  - errors:        compiler errors (no rule)
  - warnings:      compiler warnings (no rule)
  - checker_bugs:  failures inside the static analyzer itself (no rule)
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


PRIORITIES = (1, 2, 3)

DiagnosticLevel = Literal["error", "warning", "checker-bug"]


class Rule(BaseModel):
    """A named, categorized, prioritized check definition."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name, may contain spaces")
    category: str = Field(default="", description="Display category")
    priority: int = Field(..., ge=1, le=3, description="Severity 1 (most severe) to 3")


class Violation(BaseModel):
    """A single reported problem located in a file."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="File path as reported by the analyzer")
    start_line: int = Field(..., ge=1, description="1-based line")
    start_column: int = Field(..., ge=1, description="1-based column")
    message: str = Field(default="", description="Free text message")
    rule: Optional[Rule] = Field(
        default=None,
        description="Producing rule; None for compiler diagnostics and checker bugs",
    )

    @property
    def location(self) -> str:
        return f"{self.start_line}:{self.start_column}"


class ResultSet(BaseModel):
    """Snapshot of one analysis run."""
    model_config = ConfigDict(frozen=True)

    violations: list[Violation] = Field(default_factory=list)
    errors: list[Violation] = Field(default_factory=list)
    warnings: list[Violation] = Field(default_factory=list)
    checker_bugs: list[Violation] = Field(default_factory=list)
    file_count: int = Field(default=0, ge=0, description="Number of files analyzed")

    @model_validator(mode="after")
    def violations_must_carry_rule(self) -> "ResultSet":
        self.require_rules()
        return self

    def require_rules(self) -> None:
        """Raise ValueError if any entry of `violations` has no rule."""
        for i, violation in enumerate(self.violations):
            if violation.rule is None:
                raise ValueError(
                    f"violation {i + 1} ({violation.path}:{violation.location}) has no rule"
                )

    def number_of_files(self) -> int:
        seen = {v.path for v in self.violations}
        seen.update(v.path for v in self.errors)
        seen.update(v.path for v in self.warnings)
        seen.update(v.path for v in self.checker_bugs)
        return max(self.file_count, len(seen))

    def number_of_files_with_violations(self) -> int:
        return len({v.path for v in self.violations})

    def number_of_violations_with_priority(self, priority: int) -> int:
        return sum(1 for v in self.violations if v.rule.priority == priority)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def has_checker_bugs(self) -> bool:
        return bool(self.checker_bugs)


class ReportConfig(BaseModel):
    """Presentation strings fixed for a renderer instance."""
    title: str = Field(default="OCLint Report", min_length=1)
    sortable_script: str = Field(
        default="sorttable.js",
        min_length=1,
        description="Relative name of the column-sorting script shipped next to the report",
    )
    generator_name: str = Field(default="OCLint", min_length=1)
    generator_url: str = Field(default="http://oclint.org")
