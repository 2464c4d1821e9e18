"""
Report Loader
=============
Reads a lint report JSON file from disk.

Any I/O or decode failure is raised as ReportLoadError; nothing is retried.
"""
import json
import logging
from pathlib import Path
from typing import Any

from lint_diff.core.exceptions import ReportLoadError

logger = logging.getLogger(__name__)


def load_report(path: str) -> Any:
    """Return the decoded JSON document stored at `path`."""
    report_path = Path(path)
    try:
        content = report_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ReportLoadError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportLoadError(path, str(exc)) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ReportLoadError(
            path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc

    logger.debug("Loaded report %s (%d bytes)", report_path, len(content))
    return data
