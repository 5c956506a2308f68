"""
Display filter state, mirroring the script embedded in the report head.

One checkbox per summary row toggles the visibility of detail rows with the
matching class; the "All Bugs" master checkbox is checked exactly when no
category checkbox is unchecked.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from summary import BugSummary


@dataclass
class FilterState:
    checked: dict[str, bool]
    num_unchecked: int = 0
    master_checked: bool = True
    hidden: set[str] = field(default_factory=set)

    @classmethod
    def from_summary(cls, summary: BugSummary) -> "FilterState":
        """Initial state of a freshly loaded report: everything checked."""
        return cls(checked={key: True for key in summary.keys})

    def toggle_display(self, key: str, checked: bool) -> None:
        """A category checkbox was clicked and is now `checked`."""
        if key not in self.checked:
            raise KeyError(f"unknown category: {key}")
        self.checked[key] = checked
        if checked:
            self.hidden.discard(key)
            self.num_unchecked -= 1
            if self.num_unchecked == 0:
                self.master_checked = True
        else:
            self.hidden.add(key)
            self.num_unchecked += 1
            self.master_checked = False

    def copy_checked_state_to_check_buttons(self, master_checked: bool) -> None:
        """The master checkbox was clicked and is now `master_checked`."""
        self.master_checked = master_checked
        for key, checked in list(self.checked.items()):
            if checked != master_checked:
                self.toggle_display(key, master_checked)

    def is_visible(self, row_class: str) -> bool:
        return row_class not in self.hidden
