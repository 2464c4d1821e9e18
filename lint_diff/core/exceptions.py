"""
Exceptions
==========
Error hierarchy for the lint-diff pipeline.

Every failure is fatal: lower layers raise, never swallow.  The CLI and the
HTTP API catch LintDiffError at the boundary and map it to exit code 2 or
HTTP 422 respectively.

    LintDiffError
    ├── UnsupportedFormat          — report matches no known shape
    ├── UnsupportedComparisonType  — sort field is neither str nor number
    ├── ReportLoadError            — missing file / malformed JSON
    └── EditScriptMismatch         — edit runs do not cover the report
"""


class LintDiffError(Exception):
    """Base class for all lint-diff failures."""


class UnsupportedFormat(LintDiffError, ValueError):
    """Raised when a report is neither file-keyed nor flat, or a finding is malformed."""


class UnsupportedComparisonType(LintDiffError, TypeError):
    """Raised when a flat-report sort field cannot be compared."""

    def __init__(self, field: str, left, right):
        self.field = field
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare field '{field}': "
            f"{type(left).__name__} vs {type(right).__name__}"
        )


class ReportLoadError(LintDiffError):
    """Raised when a report file cannot be read or parsed as JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load report '{path}': {reason}")


class EditScriptMismatch(LintDiffError):
    """Raised when the edit runs do not account for every message exactly once."""
