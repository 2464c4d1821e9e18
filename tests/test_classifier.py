"""
Unit Tests — Classifier
=======================
Tagging of the second report's messages from an edit script, per-bucket
counting, and the exactly-once coverage check.
"""
from dataclasses import FrozenInstanceError

import pytest

from lint_diff.core.exceptions import EditScriptMismatch
from lint_diff.models.edit_run import EditRun
from lint_diff.models.lint_message import LintMessage
from lint_diff.services.classifier import _Accumulator, _apply_run, classify
from lint_diff.services.sequence_diff import diff


def _msg(line, type_="warning", text="m"):
    return LintMessage(line=line, column=1, type=type_, message=text)


def _run(tag, count):
    return EditRun(tag=tag, count=count)


# ===========================================================================
# 1. Tagging
# ===========================================================================
class TestTagging:

    def test_unchanged_then_added(self):
        messages = [_msg(1, "error", "K1"), _msg(2, "warning", "K3")]
        result = classify([_run("unchanged", 1), _run("removed", 1), _run("added", 1)], messages)

        assert [(t.message.message, t.is_new) for t in result.lines] == [
            ("K1", False),
            ("K3", True),
        ]
        assert result.has_new is True

    def test_removed_consumes_nothing(self):
        messages = [_msg(1)]
        result = classify([_run("removed", 5), _run("unchanged", 1)], messages)
        assert len(result.lines) == 1
        assert result.lines[0].is_new is False
        assert result.has_new is False

    def test_interleave_follows_run_order(self):
        messages = [_msg(i, text=f"m{i}") for i in range(5)]
        runs = [_run("added", 1), _run("unchanged", 2), _run("added", 1), _run("unchanged", 1)]
        result = classify(runs, messages)
        assert [t.is_new for t in result.lines] == [True, False, False, True, False]
        assert [t.message.line for t in result.lines] == [0, 1, 2, 3, 4]

    def test_empty(self):
        result = classify([], [])
        assert result.lines == []
        assert result.has_new is False
        assert result.new_counts.total == 0
        assert result.existing_counts.total == 0


# ===========================================================================
# 2. Counting
# ===========================================================================
class TestCounting:

    def test_buckets_by_type(self):
        messages = [
            _msg(1, "error"),
            _msg(2, "warning"),
            _msg(3, "error"),
            _msg(4, "warning"),
            _msg(5, "warning"),
        ]
        result = classify([_run("unchanged", 2), _run("added", 3)], messages)

        assert (result.existing_counts.error, result.existing_counts.warning) == (1, 1)
        assert (result.new_counts.error, result.new_counts.warning) == (1, 2)

    def test_totals_match_tagged_lines(self):
        keys_a = ["a", "b", "c", "d"]
        keys_b = ["b", "x", "c", "y", "z", "a"]
        messages = [_msg(i, "error" if i % 2 else "warning") for i in range(len(keys_b))]

        result = classify(diff(keys_a, keys_b), messages)

        new_lines = [t for t in result.lines if t.is_new]
        old_lines = [t for t in result.lines if not t.is_new]
        assert result.new_counts.total == len(new_lines)
        assert result.existing_counts.total == len(old_lines)
        assert len(result.lines) == len(messages)

    def test_buckets_are_independent_per_call(self):
        first = classify([_run("added", 1)], [_msg(1, "error")])
        second = classify([_run("added", 1)], [_msg(1, "error")])
        assert first.new_counts.error == 1
        assert second.new_counts.error == 1
        assert first.new_counts is not second.new_counts


# ===========================================================================
# 3. Coverage check
# ===========================================================================
class TestCoverage:

    def test_overrun_raises(self):
        with pytest.raises(EditScriptMismatch):
            classify([_run("unchanged", 2)], [_msg(1)])

    def test_underrun_raises(self):
        with pytest.raises(EditScriptMismatch):
            classify([_run("added", 1)], [_msg(1), _msg(2)])

    def test_every_message_visited_once_in_order(self):
        messages = [_msg(i) for i in range(6)]
        runs = diff(["a", "b", "c"], ["a", "q", "b", "r", "s", "c"])
        result = classify(runs, messages)
        assert [t.message for t in result.lines] == messages


# ===========================================================================
# 4. Fold steps
# ===========================================================================
class TestFoldStep:

    def test_step_returns_new_accumulator_and_leaves_input_intact(self):
        messages = [_msg(1, "error"), _msg(2, "warning")]
        start = _Accumulator()
        after = _apply_run(messages, start, _run("added", 2))

        assert after is not start
        assert start == _Accumulator()
        assert after.cursor == 2
        assert after.has_new is True
        assert after.new_counts.error == 1
        assert after.new_counts.warning == 1

    def test_step_does_not_share_buckets(self):
        messages = [_msg(1, "error"), _msg(2, "error")]
        first = _apply_run(messages, _Accumulator(), _run("unchanged", 1))
        second = _apply_run(messages, first, _run("unchanged", 1))

        assert first.existing_counts.error == 1
        assert second.existing_counts.error == 2
        assert first.existing_counts is not second.existing_counts

    def test_accumulator_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            _Accumulator().cursor = 1

    def test_removed_run_is_identity(self):
        acc = _Accumulator()
        assert _apply_run([_msg(1)], acc, _run("removed", 3)) is acc
