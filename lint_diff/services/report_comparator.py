"""
Report Comparator
=================
End-to-end pipeline: two raw reports in, formatted diff out.

    normalize(before) ─┐
                       ├─ diff(keys) → classify(runs, after.messages) → format_report
    normalize(after)  ─┘

The header always names the second ("after") report's file.  Any failure
aborts the whole comparison; there is no partial output.
"""
import logging
from dataclasses import dataclass
from typing import Any

from lint_diff.core.output_formatter import FormattedReport, format_report
from lint_diff.models.classification import ClassificationResult
from lint_diff.parser.report_normalizer import normalize
from lint_diff.services.classifier import classify
from lint_diff.services.report_loader import load_report
from lint_diff.services.sequence_diff import diff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonOutcome:
    file_name: str
    result: ClassificationResult
    output: FormattedReport

    @property
    def has_new(self) -> bool:
        return self.result.has_new

    @property
    def exit_code(self) -> int:
        return self.output.exit_code


def compare_reports(before: Any, after: Any, color: bool = False) -> ComparisonOutcome:
    """Compare two decoded reports and render the new-findings report."""
    report_a = normalize(before, label="before")
    report_b = normalize(after, label="after")

    runs = diff(report_a.keys, report_b.keys)
    result = classify(runs, report_b.messages)
    output = format_report(
        report_b.file_name,
        result.lines,
        result.new_counts,
        result.existing_counts,
        color=color,
    )

    logger.info(
        "Compared %s: %d new, %d existing",
        report_b.file_name, result.new_counts.total, result.existing_counts.total,
    )
    return ComparisonOutcome(file_name=report_b.file_name, result=result, output=output)


def compare_report_files(before_path: str, after_path: str, color: bool = False) -> ComparisonOutcome:
    """Load both report files, then compare them."""
    before = load_report(before_path)
    after = load_report(after_path)
    return compare_reports(before, after, color=color)
