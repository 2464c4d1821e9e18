"""
Raw Report Models
=================
Pydantic models for the two tool-specific report shapes accepted as input.

FILE_KEYED (PHP_CodeSniffer ``--report=json``):
    {"files": {"<path>": {"messages": [
        {"message", "source", "severity", "type", "line", "column", ...}
    ]}}}

FLAT (ESLint ``--format json``):
    [{"filePath": "<path>", "messages": [
        {"ruleId", "severity", "message", "line", "column", ...}
    ]}]

Unknown keys are ignored.  ``source`` is optional on both shapes and
contributes an empty string to the dedup key when absent.  Finding fields are
validated strictly: "3" is not a line number and true is not a severity.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReportShape:
    """Recognised raw report shapes."""
    FILE_KEYED = "file_keyed"
    FLAT = "flat"


class PhpcsFinding(BaseModel):
    model_config = ConfigDict(strict=True)

    line: int
    column: int
    type: str
    severity: int
    message: str
    source: Optional[str] = None


class PhpcsFile(BaseModel):
    messages: List[PhpcsFinding] = []


class PhpcsReport(BaseModel):
    files: Dict[str, PhpcsFile]


class EslintMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    line: int
    column: int
    severity: int
    message: str
    rule_id: Optional[str] = Field(default=None, alias="ruleId")
    source: Optional[str] = None
