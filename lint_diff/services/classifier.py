"""
Classifier
==========
Walks the edit script against the second report's messages and tags each
message as new or existing.

Rules per run:
    added     — consume `count` messages, tag NEW, bump new_counts
    removed   — consume nothing, emit nothing (only exists in report A)
    unchanged — consume `count` messages, tag existing, bump existing_counts

Implemented as a fold over a frozen accumulator: each step maps
(accumulator, run) → new accumulator and leaves its input untouched.

Invariant:
    every message of report B is visited exactly once, in index order;
    otherwise EditScriptMismatch is raised.
"""
import logging
from dataclasses import dataclass, field, replace
from functools import partial, reduce
from typing import List, Sequence, Tuple

from lint_diff.core.exceptions import EditScriptMismatch
from lint_diff.models.classification import ClassificationResult, TaggedLine
from lint_diff.models.edit_run import EditRun
from lint_diff.models.lint_message import LintMessage
from lint_diff.models.problem_counts import ProblemCounts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Accumulator:
    """Internal: state threaded through the fold."""
    cursor: int = 0
    lines: Tuple[TaggedLine, ...] = ()
    new_counts: ProblemCounts = field(default_factory=ProblemCounts)
    existing_counts: ProblemCounts = field(default_factory=ProblemCounts)
    has_new: bool = False


def _apply_run(messages: Sequence[LintMessage], acc: _Accumulator, run: EditRun) -> _Accumulator:
    if not run.consumes_second:
        return acc

    end = acc.cursor + run.count
    if end > len(messages):
        raise EditScriptMismatch(
            f"'{run.tag}' run of {run.count} overruns report "
            f"({acc.cursor} of {len(messages)} messages consumed)"
        )

    is_new = run.tag == "added"
    consumed = messages[acc.cursor:end]
    bucket = replace(acc.new_counts if is_new else acc.existing_counts)
    for message in consumed:
        bucket.increment(message.type)

    tagged = tuple(TaggedLine(message=message, is_new=is_new) for message in consumed)
    if is_new:
        return replace(
            acc, cursor=end, lines=acc.lines + tagged, new_counts=bucket, has_new=True
        )
    return replace(acc, cursor=end, lines=acc.lines + tagged, existing_counts=bucket)


def classify(runs: List[EditRun], messages_b: Sequence[LintMessage]) -> ClassificationResult:
    """
    Tag the second report's messages using the edit script.

    Parameters
    ----------
    runs : List[EditRun]
        Output of sequence_diff.diff(keys_a, keys_b).
    messages_b : Sequence[LintMessage]
        Canonical messages of the second report, aligned with keys_b.

    Returns
    -------
    ClassificationResult
        Lines in run order plus new / existing counts.
    """
    acc = reduce(partial(_apply_run, messages_b), runs, _Accumulator())

    if acc.cursor != len(messages_b):
        raise EditScriptMismatch(
            f"Edit script covers {acc.cursor} of {len(messages_b)} messages"
        )

    result = ClassificationResult(
        lines=list(acc.lines),
        new_counts=acc.new_counts,
        existing_counts=acc.existing_counts,
        has_new=acc.has_new,
    )
    logger.debug(
        "Classified %d messages: %d new, %d existing",
        len(result.lines), result.new_counts.total, result.existing_counts.total,
    )
    return result
