"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    LINT_DIFF_LOG_LEVEL  — Root log level for console/file logging (default: WARNING)
    LINT_DIFF_LOG_DIR    — Directory for daily log files; empty disables file logging
    LINT_DIFF_COLOR      — "auto" | "always" | "never" (default: auto)

Output Stream Philosophy:
    stdout carries the diff report and nothing else, so CI consumers can
    capture it verbatim. Logs always go to stderr (and optionally a file).
    The default level is WARNING so a clean run stays silent on both streams.

Color:
    "auto" highlights NEW lines and summaries only when stdout is a TTY.
    The HTTP API never colors its text payload.
"""
import os
from dotenv import load_dotenv

from lint_diff.core.constants import COLOR_MODES

load_dotenv()

LOG_LEVEL = os.getenv("LINT_DIFF_LOG_LEVEL", "WARNING").upper()
LOG_DIR = os.getenv("LINT_DIFF_LOG_DIR", "")

COLOR_MODE = os.getenv("LINT_DIFF_COLOR", "auto").lower()
if COLOR_MODE not in COLOR_MODES:
    COLOR_MODE = "auto"
