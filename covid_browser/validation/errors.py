from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a loaded table. `code` is stable and meant for logs/tests."""
    code: str
    message: str


class ValidationError(Exception):
    """Raised once per table with every issue found."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        lines = [f"{issue.code}: {issue.message}" for issue in self.issues]
        super().__init__("\n".join(lines))
