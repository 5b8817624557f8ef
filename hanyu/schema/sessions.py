"""Per-day study activity records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class StudySession:
    """Number of quiz runs completed on one calendar day."""
    date: str  # YYYY-MM-DD
    count: int

    def __post_init__(self):
        if not _DATE_RE.match(self.date):
            raise ValueError(f"date must be YYYY-MM-DD, got '{self.date}'")
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")

    def incremented(self) -> "StudySession":
        return StudySession(date=self.date, count=self.count + 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudySession":
        date = data.get("date")
        count = data.get("count")
        if not isinstance(date, str):
            raise ValueError("field 'date' must be a string")
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValueError("field 'count' must be an integer")
        return cls(date=date, count=count)

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "count": self.count}
