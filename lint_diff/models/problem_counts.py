"""
Problem Counts
==============
Per-severity counter for one bucket of findings ("new" or "old").

Only ever incremented.  Any kind other than "error" counts as a warning.

render(prefix) produces the summary line, e.g.
    "0 old problems"
    "1 new problem (0 errors) (1 warning)"
    "3 old problems (2 errors) (1 warning)"
"""
from dataclasses import dataclass


def english_plural(value: int, word: str) -> str:
    """'1 error', '0 errors', '2 errors'."""
    if value == 1:
        return f"{value} {word}"
    return f"{value} {word}s"


@dataclass
class ProblemCounts:
    error: int = 0
    warning: int = 0

    @property
    def total(self) -> int:
        return self.error + self.warning

    def increment(self, kind: str) -> None:
        if kind == "error":
            self.error += 1
        else:
            self.warning += 1

    def render(self, prefix: str) -> str:
        summary = english_plural(self.total, f"{prefix} problem")
        if self.total > 0:
            summary += (
                f" ({english_plural(self.error, 'error')})"
                f" ({english_plural(self.warning, 'warning')})"
            )
        return summary
