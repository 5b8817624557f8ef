"""Record types for saved words, study sessions and character details."""

from hanyu.schema.words import (
    WordCandidate,
    WordEntry,
)
from hanyu.schema.sessions import StudySession
from hanyu.schema.chars import (
    RelatedWord,
    CharDetail,
)

__all__ = [
    # words
    "WordCandidate",
    "WordEntry",
    # sessions
    "StudySession",
    # chars
    "RelatedWord",
    "CharDetail",
]
