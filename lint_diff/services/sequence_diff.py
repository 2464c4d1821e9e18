"""
Sequence Diff
=============
Minimal edit script between two key sequences (Myers O(ND) greedy walk).

Output:
    List[EditRun] — maximal runs tagged "unchanged", "removed" or "added".

Rules:
    - Minimal: unchanged runs cover exactly one LCS of the two sequences.
    - Left-greedy: after every edit the walk follows equal keys as far as
      they go, so matches are taken at the earliest point of the path.
      When a removal and an addition reach equally far, the removal wins.
    - Inside a change region the removed run precedes the added run.
    - Pure and deterministic: same inputs → same runs.

Coverage:
    sum(added + unchanged)   == len(keys_b)
    sum(removed + unchanged) == len(keys_a)

Cost is proportional to (n + m) * D where D is the number of edits, so two
large reports that differ by a handful of findings diff in near-linear time.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from lint_diff.models.edit_run import EditRun, EditTag

logger = logging.getLogger(__name__)

# (tag, count) before merging into runs
Segment = Tuple[EditTag, int]

# diagonal k → (x after the edit, x after following equal keys, edit tag)
_Step = Dict[int, Tuple[int, int, Optional[EditTag]]]


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    n = 0
    limit = min(len(a), len(b))
    while n < limit and a[n] == b[n]:
        n += 1
    return n


def _follow_matches(a: Sequence[str], b: Sequence[str], x: int, k: int) -> int:
    """Advance along diagonal k while keys are equal; return the new x."""
    y = x - k
    while x < len(a) and y < len(b) and a[x] == b[y]:
        x += 1
        y += 1
    return x


def _walk(a: Sequence[str], b: Sequence[str]) -> List[_Step]:
    """Forward Myers search; one step dict per edit distance d = 0..D."""
    n, m = len(a), len(b)
    start = _follow_matches(a, b, 0, 0)
    trace: List[_Step] = [{0: (0, start, None)}]
    frontier = {0: start}

    d = 0
    while frontier.get(n - m) != n:
        d += 1
        step: _Step = {}
        reached: Dict[int, int] = {}
        for k in range(-d, d + 1, 2):
            best: Optional[Tuple[int, EditTag]] = None
            if k + 1 in frontier and frontier[k + 1] - k <= m:
                best = (frontier[k + 1], "added")
            if k - 1 in frontier and frontier[k - 1] + 1 <= n:
                x = frontier[k - 1] + 1
                if best is None or x >= best[0]:
                    best = (x, "removed")
            if best is None:
                continue
            x, tag = best
            end = _follow_matches(a, b, x, k)
            step[k] = (x, end, tag)
            reached[k] = end
        trace.append(step)
        frontier = reached
    return trace


def _segments(a: Sequence[str], b: Sequence[str]) -> List[Segment]:
    """Backtrack the search into (tag, count) segments, front to back."""
    trace = _walk(a, b)
    segments: List[Segment] = []
    k = len(a) - len(b)
    for d in range(len(trace) - 1, 0, -1):
        x, end, tag = trace[d][k]
        if end > x:
            segments.append(("unchanged", end - x))
        segments.append((tag, 1))
        k = k + 1 if tag == "added" else k - 1
    _, start, _ = trace[0][0]
    if start:
        segments.append(("unchanged", start))
    segments.reverse()
    return segments


def _to_runs(segments: List[Segment]) -> List[EditRun]:
    """Merge segments into runs; each change region yields removed, then added."""
    runs: List[EditRun] = []
    unchanged = removed = added = 0

    for tag, count in segments:
        if tag == "unchanged":
            if removed:
                runs.append(EditRun(tag="removed", count=removed))
            if added:
                runs.append(EditRun(tag="added", count=added))
            removed = added = 0
            unchanged += count
        else:
            if unchanged:
                runs.append(EditRun(tag="unchanged", count=unchanged))
                unchanged = 0
            if tag == "removed":
                removed += count
            else:
                added += count

    if unchanged:
        runs.append(EditRun(tag="unchanged", count=unchanged))
    if removed:
        runs.append(EditRun(tag="removed", count=removed))
    if added:
        runs.append(EditRun(tag="added", count=added))
    return runs


def diff(keys_a: Sequence[str], keys_b: Sequence[str]) -> List[EditRun]:
    """
    Compute the edit script turning keys_a into keys_b.

    Parameters
    ----------
    keys_a : Sequence[str]
        Dedup keys of the earlier report.
    keys_b : Sequence[str]
        Dedup keys of the later report.

    Returns
    -------
    List[EditRun]
        Runs in alignment order; empty when both inputs are empty.
    """
    prefix = _common_prefix(keys_a, keys_b)

    segments: List[Segment] = [("unchanged", prefix)] if prefix else []
    segments.extend(_segments(keys_a[prefix:], keys_b[prefix:]))

    runs = _to_runs(segments)
    logger.debug(
        "Diffed %d vs %d keys: %d runs (common prefix=%d)",
        len(keys_a), len(keys_b), len(runs), prefix,
    )
    return runs
