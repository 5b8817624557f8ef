"""Saved vocabulary, persisted as one JSON file.

Entries are kept most-recent-first. ``simplified`` identifies a word: the
store refuses to add a second entry with the same ``simplified`` value.
"""

from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional

from hanyu.common.logging import log_event
from hanyu.common.storage import WORDS_FILENAME, read_collection, write_collection
from hanyu.common.utils import new_entry_id, now_millis, simplified_to_traditional
from hanyu.schema.words import WordCandidate, WordEntry

LOG_PREFIX = "words"


class WordStore:
    def __init__(
        self,
        path: Path,
        verbose: bool = False,
        id_factory: Callable[[], str] = new_entry_id,
        clock: Callable[[], int] = now_millis,
        derive_traditional: bool = True,
    ) -> None:
        self.path = path
        self.verbose = verbose
        self._id_factory = id_factory
        self._clock = clock
        self._derive_traditional = derive_traditional
        self._entries: List[WordEntry] = self._load()

    @classmethod
    def in_dir(cls, data_dir: Path, **kwargs) -> "WordStore":
        return cls(data_dir / WORDS_FILENAME, **kwargs)

    def _load(self) -> List[WordEntry]:
        entries: List[WordEntry] = []
        for record in read_collection(self.path, verbose=self.verbose, log_prefix=LOG_PREFIX):
            try:
                entries.append(WordEntry.from_dict(record))
            except ValueError as e:
                log_event(self.verbose, LOG_PREFIX, "skip", f"Dropping bad record: {e}")
        return entries

    def _save(self) -> None:
        write_collection(
            self.path,
            [entry.to_dict() for entry in self._entries],
            verbose=self.verbose,
            log_prefix=LOG_PREFIX,
        )

    def add(self, candidate: WordCandidate) -> Optional[WordEntry]:
        """Save a search result. Returns the new entry, or None if nothing was added.

        ``candidate.simplified`` must be non-empty; an empty one is ignored,
        as is a word that is already saved.
        """
        if not candidate.simplified.strip():
            return None
        if self.contains(candidate.simplified):
            log_event(self.verbose, LOG_PREFIX, "skip", f"Already saved: {candidate.simplified}")
            return None
        if not candidate.traditional and self._derive_traditional:
            candidate = replace(candidate, traditional=simplified_to_traditional(candidate.simplified))
        entry = WordEntry.from_candidate(candidate, self._id_factory(), self._clock())
        self._entries.insert(0, entry)
        self._save()
        log_event(self.verbose, LOG_PREFIX, "ok", f"Added {entry.simplified} ({entry.pinyin})")
        return entry

    def contains(self, simplified: str) -> bool:
        return any(entry.simplified == simplified for entry in self._entries)

    def get(self, entry_id: str) -> Optional[WordEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def list(self) -> List[WordEntry]:
        """All saved words, most recently added first."""
        return list(self._entries)

    def remove(self, entry_id: str) -> bool:
        """Remove an entry by id. Returns False if no entry had that id."""
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        self._entries = remaining
        self._save()
        log_event(self.verbose, LOG_PREFIX, "ok", f"Removed {entry_id}")
        return True

    def __len__(self) -> int:
        return len(self._entries)
