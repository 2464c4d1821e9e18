"""
Lint Message Models
===================
Pydantic models for the canonical, tool-independent view of a lint report.

LintMessage (CanonicalMessage):
    line      — 1-based line reported by the linter
    column    — column reported by the linter
    type      — "error" | "warning"
    message   — display text (flat shape appends " (<ruleId>)")

NormalizedReport:
    file_name — primary file of the report (shown as the output header)
    messages  — canonical messages in deterministic order
    keys      — dedup keys, index-aligned with messages

Dedup keys deliberately exclude line/column so unrelated edits that shift
line numbers do not register as new or removed findings.
"""
from typing import List, Literal

from pydantic import BaseModel, model_validator

MessageType = Literal["error", "warning"]


class LintMessage(BaseModel):
    line: int
    column: int
    type: MessageType
    message: str

    @property
    def location(self) -> str:
        return f"{self.line}:{self.column}"


class NormalizedReport(BaseModel):
    file_name: str
    messages: List[LintMessage] = []
    keys: List[str] = []

    @model_validator(mode="after")
    def _keys_parallel_to_messages(self):
        if len(self.messages) != len(self.keys):
            raise ValueError(
                f"messages ({len(self.messages)}) and keys ({len(self.keys)}) "
                f"must be index-aligned"
            )
        return self
