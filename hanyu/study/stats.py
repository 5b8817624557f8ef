"""Study statistics: last seven days of activity plus a few totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Union

from hanyu.schema.sessions import StudySession
from hanyu.schema.words import WordEntry


WINDOW_DAYS = 7


@dataclass(frozen=True)
class DailyActivity:
    date: str  # YYYY-MM-DD
    count: int

    @property
    def label(self) -> str:
        """Chart label, MM-DD."""
        return self.date[5:]


@dataclass(frozen=True)
class StudyStats:
    daily: List[DailyActivity] = field(default_factory=list)
    total_words: int = 0
    unique_study_days: int = 0
    most_recent_study_date: Optional[str] = None


def last_n_days(today: date, n: int = WINDOW_DAYS) -> List[str]:
    """The ``n`` calendar dates ending at ``today``, oldest first."""
    return [(today - timedelta(days=offset)).isoformat() for offset in range(n - 1, -1, -1)]


def compute_stats(
    sessions: Sequence[StudySession],
    words: Sequence[WordEntry],
    today: Union[date, str],
) -> StudyStats:
    if isinstance(today, str):
        today = date.fromisoformat(today)

    counts: Dict[str, int] = {}
    for session in sessions:
        # first record wins, matching a lookup by date
        counts.setdefault(session.date, session.count)

    daily = [DailyActivity(date=day, count=counts.get(day, 0)) for day in last_n_days(today)]

    # YYYY-MM-DD strings order the same as the dates they name
    most_recent = max(counts) if counts else None

    return StudyStats(
        daily=daily,
        total_words=len(words),
        unique_study_days=len(counts),
        most_recent_study_date=most_recent,
    )
