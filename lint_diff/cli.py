"""
lint-diff command line
======================
    lint-diff BEFORE.json AFTER.json

Prints only when AFTER introduces findings absent from BEFORE.

Exit codes:
    0 — no new findings (nothing printed)
    1 — new findings (report printed to stdout)
    2 — fatal error (logged to stderr, nothing printed to stdout)
"""
import argparse
import logging
import sys
from typing import Optional, TextIO

from lint_diff.core import config
from lint_diff.core.constants import EXIT_FAILURE
from lint_diff.core.exceptions import LintDiffError
from lint_diff.services.report_comparator import compare_report_files
from lint_diff.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lint-diff",
        description="Report lint findings introduced between two ESLint or PHP_CodeSniffer JSON reports",
    )
    parser.add_argument("before", help="JSON lint report of the baseline")
    parser.add_argument("after", help="JSON lint report to check for new findings")
    return parser.parse_args(argv)


def use_color(stream: TextIO, mode: str = "auto") -> bool:
    """Resolve the configured color mode against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=config.LOG_LEVEL, log_dir=config.LOG_DIR)

    color = use_color(sys.stdout, config.COLOR_MODE)
    try:
        outcome = compare_report_files(args.before, args.after, color=color)
    except LintDiffError as e:
        logger.error("lint-diff failed: %s", e)
        return EXIT_FAILURE

    if outcome.output.text:
        sys.stdout.write(outcome.output.text)
        sys.stdout.flush()
    return outcome.exit_code


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())
