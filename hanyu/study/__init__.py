"""Study tools: quiz runs and activity statistics."""

from hanyu.study.quiz import (
    QuizState,
    QuizStateError,
    QuizEngine,
    draw_queue,
)
from hanyu.study.stats import (
    WINDOW_DAYS,
    DailyActivity,
    StudyStats,
    compute_stats,
    last_n_days,
)

__all__ = [
    # quiz
    "QuizState",
    "QuizStateError",
    "QuizEngine",
    "draw_queue",
    # stats
    "WINDOW_DAYS",
    "DailyActivity",
    "StudyStats",
    "compute_stats",
    "last_n_days",
]
