"""Application state and the actions that change it.

All state a front end needs lives in one ``AppState``; ``HanyuApp`` owns the
stores, the lookup gateway and the quiz, and is the only thing that mutates
the state. Each search is tagged with a sequence number so a reply that
arrives after a newer search was issued is ignored.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from hanyu.common.config import DEFAULT_QUIZ_SIZE, AppConfig, get_data_dir
from hanyu.common.logging import log_event
from hanyu.lookup.errors import CharacterAnalysisFailure, LookupFailure
from hanyu.lookup.gateway import LookupGateway
from hanyu.schema.chars import CharDetail
from hanyu.schema.words import WordCandidate, WordEntry
from hanyu.store.sessions import SessionLog
from hanyu.store.words import WordStore
from hanyu.study.quiz import QuizEngine
from hanyu.study.stats import StudyStats, compute_stats

LOG_PREFIX = "app"

SEARCH_FAILED_NOTICE = "Search failed. Please try again."


class ViewState(enum.Enum):
    SEARCH = "search"
    LIST = "list"
    QUIZ = "quiz"
    STATS = "stats"


class CharStatus(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    UNAVAILABLE = "unavailable"


@dataclass
class AppState:
    view: ViewState = ViewState.SEARCH
    query: str = ""
    results: List[WordCandidate] = field(default_factory=list)
    is_searching: bool = False
    notice: Optional[str] = None
    search_seq: int = 0
    selected_char: Optional[str] = None
    char_detail: Optional[CharDetail] = None
    char_status: Optional[CharStatus] = None


class HanyuApp:
    def __init__(
        self,
        words: WordStore,
        sessions: SessionLog,
        gateway: LookupGateway,
        quiz_size: int = DEFAULT_QUIZ_SIZE,
        rng: Optional[random.Random] = None,
        verbose: bool = False,
    ) -> None:
        self.words = words
        self.sessions = sessions
        self.gateway = gateway
        self.quiz_size = quiz_size
        self.rng = rng or random.Random()
        self.verbose = verbose
        self.state = AppState()
        self.quiz: Optional[QuizEngine] = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        config_folder: Optional[Path] = None,
        verbose: bool = False,
        debug: bool = False,
    ) -> "HanyuApp":
        data_dir = get_data_dir(config, config_folder)
        log_event(verbose, LOG_PREFIX, "file", f"Data folder: {data_dir}")
        return cls(
            words=WordStore.in_dir(data_dir, verbose=verbose),
            sessions=SessionLog.in_dir(data_dir, verbose=verbose),
            gateway=LookupGateway(
                model=config.model,
                meaning_language=config.meaning_language,
                verbose=verbose,
                debug=debug,
            ),
            quiz_size=config.quiz_size,
            verbose=verbose,
        )

    # Navigation

    def navigate(self, view: ViewState) -> None:
        self.state.view = view
        if view is ViewState.QUIZ:
            # every visit to the quiz starts a fresh run over the current words
            self.quiz = QuizEngine(
                self.words,
                on_complete=self.sessions.record_today,
                size=self.quiz_size,
                rng=self.rng,
            )
            self.quiz.start()

    # Search

    def begin_search(self, query: str) -> int:
        """Mark a search as in flight and return its sequence number."""
        self.state.search_seq += 1
        self.state.query = query
        self.state.results = []
        self.state.notice = None
        self.state.is_searching = True
        return self.state.search_seq

    def _is_stale(self, seq: int) -> bool:
        if seq != self.state.search_seq:
            log_event(self.verbose, LOG_PREFIX, "stale", f"Ignoring reply #{seq} (latest is #{self.state.search_seq})")
            return True
        return False

    def finish_search(self, seq: int, results: List[WordCandidate]) -> bool:
        """Apply results of search ``seq``. Returns False if it was superseded."""
        if self._is_stale(seq):
            return False
        self.state.results = list(results)
        self.state.is_searching = False
        return True

    def fail_search(self, seq: int, error: LookupFailure) -> bool:
        """Apply a failed search ``seq``. Returns False if it was superseded."""
        if self._is_stale(seq):
            return False
        log_event(self.verbose, LOG_PREFIX, "error", str(error))
        self.state.results = []
        self.state.is_searching = False
        self.state.notice = SEARCH_FAILED_NOTICE
        return True

    def submit_search(self, query: str) -> List[WordCandidate]:
        """Run a search to completion and return the results now in the state."""
        if not query.strip():
            # clearing the box supersedes any search still in flight
            self.begin_search(query)
            self.state.is_searching = False
            return []
        seq = self.begin_search(query)
        try:
            results = self.gateway.search(query)
        except LookupFailure as e:
            self.fail_search(seq, e)
        else:
            self.finish_search(seq, results)
        return list(self.state.results)

    # Saved words

    def add_word(self, candidate: WordCandidate) -> Optional[WordEntry]:
        return self.words.add(candidate)

    def add_result(self, index: int) -> Optional[WordEntry]:
        """Save the search result at ``index``."""
        return self.add_word(self.state.results[index])

    def is_word_added(self, simplified: str) -> bool:
        return self.words.contains(simplified)

    def remove_word(self, entry_id: str) -> bool:
        return self.words.remove(entry_id)

    # Character detail

    def open_character(self, char: str) -> Optional[CharDetail]:
        """Open the detail view for ``char`` and load its analysis.

        A failed analysis leaves the view open with an unavailable status.
        """
        self.state.selected_char = char
        self.state.char_detail = None
        self.state.char_status = CharStatus.LOADING
        try:
            detail = self.gateway.analyze_character(char)
        except CharacterAnalysisFailure as e:
            log_event(self.verbose, LOG_PREFIX, "error", str(e))
            self.state.char_status = CharStatus.UNAVAILABLE
            return None
        self.state.char_detail = detail
        self.state.char_status = CharStatus.READY
        return detail

    def close_character(self) -> None:
        self.state.selected_char = None
        self.state.char_detail = None
        self.state.char_status = None

    # Stats

    def stats(self) -> StudyStats:
        return compute_stats(self.sessions.list(), self.words.list(), self.sessions.today())
