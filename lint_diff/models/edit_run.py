"""
Edit Run Model
==============
One maximal stretch of the edit script produced by the sequence differ.

    tag   — "added" (only in the second report), "removed" (only in the
            first), or "unchanged" (aligned in both)
    count — number of consecutive keys in the run, always >= 1
"""
from typing import Literal

from pydantic import BaseModel, Field

EditTag = Literal["added", "removed", "unchanged"]


class EditRun(BaseModel):
    tag: EditTag
    count: int = Field(ge=1)

    @property
    def consumes_second(self) -> bool:
        """True if the run walks messages of the second report."""
        return self.tag != "removed"
