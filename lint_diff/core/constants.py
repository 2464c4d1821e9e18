"""
Constants
Centralised storage for severity mapping, column widths, labels and exit codes.
"""

# Flat-shape severities above this threshold are errors
ERROR_SEVERITY_THRESHOLD = 1

LOCATION_WIDTH = 8
TYPE_WIDTH = 8
NEW_MARKER = "NEW "
EXISTING_MARKER = "    "

EXIT_CLEAN = 0
EXIT_NEW_FINDINGS = 1
EXIT_FAILURE = 2

COLOR_MODES = ("auto", "always", "never")
