"""
Output Formatter
================
THE SINGLE SOURCE OF TRUTH for all report output strings.

STRICT DETERMINISM CONTRACT:
  - This module NEVER reads environment variables or inspects the TTY.
    Callers decide `color` and pass it in.
  - Given the same inputs, it ALWAYS returns the exact same output string.

OUTPUT CONTRACT (no new findings):
    text = ""               exit_code = 0

OUTPUT CONTRACT (at least one new finding):
    {file_name}
    {line:col padded to 8} {label} {message}      ← one per tagged line
    ...
    <blank line>
    {n} old problem(s)[ ({e} error(s)) ({w} warning(s))]
    {n} new problem(s)[ ({e} error(s)) ({w} warning(s))]
                            exit_code = 1

Labels:
    existing → "    " + type padded to 8          e.g. "    warning "
    new      → "NEW " + TYPE padded to 8          e.g. "NEW ERROR   "
    With color, NEW labels are red (error) / yellow (warning), the old
    summary is yellow and the new summary red.
"""
from dataclasses import dataclass
from typing import List

from lint_diff.core.constants import (
    EXISTING_MARKER,
    EXIT_CLEAN,
    EXIT_NEW_FINDINGS,
    LOCATION_WIDTH,
    NEW_MARKER,
    TYPE_WIDTH,
)
from lint_diff.models.classification import TaggedLine
from lint_diff.models.lint_message import LintMessage
from lint_diff.models.problem_counts import ProblemCounts
from lint_diff.utils.logging_config import RED, RESET, YELLOW


@dataclass(frozen=True)
class FormattedReport:
    text: str
    exit_code: int


def colorize(text: str, ansi: str, color: bool) -> str:
    if not color:
        return text
    return f"{ansi}{text}{RESET}"


# ---------------------------------------------------------------------------
# Line Rendering
# ---------------------------------------------------------------------------
def format_label(message_type: str, is_new: bool, color: bool = False) -> str:
    """Type column of a report line."""
    if not is_new:
        return EXISTING_MARKER + message_type.ljust(TYPE_WIDTH)

    label = NEW_MARKER + message_type.upper().ljust(TYPE_WIDTH)
    ansi = RED if message_type == "error" else YELLOW
    return colorize(label, ansi, color)


def format_line(message: LintMessage, is_new: bool, color: bool = False) -> str:
    """One newline-terminated report line."""
    return (
        f"{message.location.ljust(LOCATION_WIDTH)} "
        f"{format_label(message.type, is_new, color)} "
        f"{message.message}\n"
    )


# ---------------------------------------------------------------------------
# Core Format Function
# ---------------------------------------------------------------------------
def format_report(
    file_name: str,
    lines: List[TaggedLine],
    new_counts: ProblemCounts,
    existing_counts: ProblemCounts,
    color: bool = False,
) -> FormattedReport:
    """
    Render the classified report.

    Parameters
    ----------
    file_name       : str  — header; the second report's primary file.
    lines           : List[TaggedLine] — in run order.
    new_counts      : ProblemCounts — bucket for NEW lines.
    existing_counts : ProblemCounts — bucket for existing lines.
    color           : bool — emit ANSI highlights.

    Returns
    -------
    FormattedReport
        Empty text and exit code 0 when nothing is new.
    """
    if not any(line.is_new for line in lines):
        return FormattedReport(text="", exit_code=EXIT_CLEAN)

    parts = [f"{file_name}\n"]
    parts.extend(format_line(line.message, line.is_new, color) for line in lines)
    parts.append("\n")
    parts.append(colorize(existing_counts.render("old"), YELLOW, color) + "\n")
    parts.append(colorize(new_counts.render("new"), RED, color) + "\n")

    return FormattedReport(text="".join(parts), exit_code=EXIT_NEW_FINDINGS)
