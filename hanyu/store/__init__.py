"""Persisted stores: saved words and the study log."""

from hanyu.store.words import WordStore
from hanyu.store.sessions import SessionLog

__all__ = [
    "WordStore",
    "SessionLog",
]
