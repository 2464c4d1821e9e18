"""
Classification Models
=====================
Output of the classifier: the second report's messages tagged new/existing,
plus one ProblemCounts bucket per tag.
"""
from dataclasses import dataclass, field
from typing import List

from lint_diff.models.lint_message import LintMessage
from lint_diff.models.problem_counts import ProblemCounts


@dataclass(frozen=True)
class TaggedLine:
    """A message from the second report and whether it is newly introduced."""
    message: LintMessage
    is_new: bool


@dataclass
class ClassificationResult:
    lines: List[TaggedLine] = field(default_factory=list)
    new_counts: ProblemCounts = field(default_factory=ProblemCounts)
    existing_counts: ProblemCounts = field(default_factory=ProblemCounts)
    has_new: bool = False
