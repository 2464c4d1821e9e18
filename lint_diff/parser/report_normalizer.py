"""
Report Normalizer
=================
Converts one tool-specific lint report into a NormalizedReport.

Pipeline:
    1. Detect the report shape structurally (detect_shape)
    2. Dispatch to the shape's normalizer
    3. Validate each finding against its pydantic model
    4. Build canonical messages + index-aligned dedup keys

Shapes:
    FILE_KEYED — PHP_CodeSniffer.  Input order is kept.  Only the LAST file
                 in the mapping is reported (one file per invocation); the
                 others are ignored with a warning, never merged.
    FLAT       — ESLint.  Only raw[0] is reported.  Messages are sorted by
                 (line, column, severity, message) first because ESLint does
                 not emit them in a deterministic order.

Dedup keys:
    FILE_KEYED: type + severity + source + message
    FLAT:       ruleId + severity + source + message   (undecorated message)

Contract:
    - DETERMINISTIC: same report → same keys, regardless of flat input order.
    - Fails loudly: UnsupportedFormat / UnsupportedComparisonType.
"""
import logging
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from lint_diff.core.constants import ERROR_SEVERITY_THRESHOLD
from lint_diff.core.exceptions import UnsupportedComparisonType, UnsupportedFormat
from lint_diff.models.lint_message import LintMessage, NormalizedReport
from lint_diff.models.raw_report import (
    EslintMessage,
    PhpcsFinding,
    PhpcsReport,
    ReportShape,
)

logger = logging.getLogger(__name__)

# Flat-shape sort order
SORT_FIELDS: tuple[str, ...] = ("line", "column", "severity", "message")


# ===================================================================
# Shape Detection
# ===================================================================
def detect_shape(raw: Any) -> str:
    """
    Return the ReportShape of a decoded JSON document.

    Raises
    ------
    UnsupportedFormat
        If the document is neither file-keyed nor flat.
    """
    if isinstance(raw, dict):
        if isinstance(raw.get("files"), dict):
            return ReportShape.FILE_KEYED
        raise UnsupportedFormat("Report object has no 'files' mapping")

    if isinstance(raw, list):
        if not raw:
            raise UnsupportedFormat("Report array is empty")
        first = raw[0]
        if isinstance(first, dict) and isinstance(first.get("messages"), list):
            return ReportShape.FLAT
        raise UnsupportedFormat("First report entry has no 'messages' list")

    raise UnsupportedFormat(
        f"Report must be a JSON object or array, got {type(raw).__name__}"
    )


# ===================================================================
# Typed Comparator
# ===================================================================
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(field: str, left: Any, right: Any) -> int:
    """
    Three-way compare two sort-field values of the same kind.

    Numbers compare numerically, strings lexicographically.  Anything else,
    or a string against a number, raises UnsupportedComparisonType.
    """
    if _is_number(left) and _is_number(right):
        pass
    elif isinstance(left, str) and isinstance(right, str):
        pass
    else:
        raise UnsupportedComparisonType(field, left, right)

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare_messages(a: Dict[str, Any], b: Dict[str, Any]) -> int:
    """Compare two raw flat-shape messages field by field over SORT_FIELDS."""
    for field in SORT_FIELDS:
        result = compare_values(field, a.get(field), b.get(field))
        if result != 0:
            return result
    return 0


def sort_flat_messages(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Stable sort of raw flat-shape messages; returns a new list."""
    for entry in messages:
        if not isinstance(entry, dict):
            raise UnsupportedFormat(
                f"Report message must be an object, got {type(entry).__name__}"
            )
    return sorted(messages, key=cmp_to_key(compare_messages))


# ===================================================================
# Dedup Keys
# ===================================================================
def file_keyed_key(finding: PhpcsFinding) -> str:
    return f"{finding.type}{finding.severity}{finding.source or ''}{finding.message}"


def flat_key(message: EslintMessage) -> str:
    return f"{message.rule_id or ''}{message.severity}{message.source or ''}{message.message}"


# ===================================================================
# Shape Normalizers
# ===================================================================
def _validation_error(shape: str, exc: ValidationError) -> UnsupportedFormat:
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()))
    return UnsupportedFormat(
        f"Invalid {shape} report at '{where}': {first.get('msg', exc)}"
    )


def normalize_file_keyed(raw: Dict[str, Any]) -> NormalizedReport:
    """PHP_CodeSniffer report → NormalizedReport (last file wins)."""
    try:
        report = PhpcsReport.model_validate(raw)
    except ValidationError as exc:
        raise _validation_error(ReportShape.FILE_KEYED, exc) from exc

    if not report.files:
        raise UnsupportedFormat("Report 'files' mapping is empty")

    file_names = list(report.files)
    file_name = file_names[-1]
    if len(file_names) > 1:
        logger.warning(
            "Report lists %d files; only '%s' is compared, ignoring: %s",
            len(file_names), file_name, ", ".join(file_names[:-1]),
        )

    messages: list[LintMessage] = []
    keys: list[str] = []
    for finding in report.files[file_name].messages:
        try:
            messages.append(LintMessage(
                line=finding.line,
                column=finding.column,
                type=finding.type.lower(),
                message=finding.message,
            ))
        except ValidationError as exc:
            raise _validation_error(ReportShape.FILE_KEYED, exc) from exc
        keys.append(file_keyed_key(finding))

    return NormalizedReport(file_name=file_name, messages=messages, keys=keys)


def normalize_flat(raw: List[Dict[str, Any]]) -> NormalizedReport:
    """ESLint report → NormalizedReport (sorted, first entry only)."""
    entry = raw[0]
    file_name = entry.get("filePath")
    if not isinstance(file_name, str):
        raise UnsupportedFormat("First report entry has no 'filePath' string")
    if len(raw) > 1:
        logger.warning(
            "Report lists %d files; only '%s' is compared", len(raw), file_name
        )

    messages: list[LintMessage] = []
    keys: list[str] = []
    for raw_message in sort_flat_messages(entry["messages"]):
        try:
            parsed = EslintMessage.model_validate(raw_message)
        except ValidationError as exc:
            raise _validation_error(ReportShape.FLAT, exc) from exc

        text = parsed.message
        if parsed.rule_id is not None:
            text = f"{text} ({parsed.rule_id})"

        messages.append(LintMessage(
            line=parsed.line,
            column=parsed.column,
            type="error" if parsed.severity > ERROR_SEVERITY_THRESHOLD else "warning",
            message=text,
        ))
        keys.append(flat_key(parsed))

    return NormalizedReport(file_name=file_name, messages=messages, keys=keys)


_NORMALIZERS: dict[str, Callable[[Any], NormalizedReport]] = {
    ReportShape.FILE_KEYED: normalize_file_keyed,
    ReportShape.FLAT: normalize_flat,
}


# ===================================================================
# Public Entry Point
# ===================================================================
def normalize(raw: Any, label: Optional[str] = None) -> NormalizedReport:
    """
    Normalize a decoded lint report.

    Parameters
    ----------
    raw : Any
        Decoded JSON document (file-keyed object or flat array).
    label : str, optional
        Name used in debug logs (e.g. the source path).

    Returns
    -------
    NormalizedReport
    """
    shape = detect_shape(raw)
    report = _NORMALIZERS[shape](raw)
    logger.debug(
        "Normalized %s report%s: file=%s messages=%d",
        shape, f" '{label}'" if label else "", report.file_name, len(report.messages),
    )
    return report
