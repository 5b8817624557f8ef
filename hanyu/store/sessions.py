"""Study log: how many quiz runs were completed on each calendar day."""

from datetime import date
from pathlib import Path
from typing import Callable, List

from hanyu.common.logging import log_event
from hanyu.common.storage import SESSIONS_FILENAME, read_collection, write_collection
from hanyu.schema.sessions import StudySession

LOG_PREFIX = "sessions"


class SessionLog:
    def __init__(
        self,
        path: Path,
        verbose: bool = False,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.path = path
        self.verbose = verbose
        self._today = today
        self._sessions: List[StudySession] = self._load()

    @classmethod
    def in_dir(cls, data_dir: Path, **kwargs) -> "SessionLog":
        return cls(data_dir / SESSIONS_FILENAME, **kwargs)

    def _load(self) -> List[StudySession]:
        sessions: List[StudySession] = []
        seen = set()
        for record in read_collection(self.path, verbose=self.verbose, log_prefix=LOG_PREFIX):
            try:
                session = StudySession.from_dict(record)
            except ValueError as e:
                log_event(self.verbose, LOG_PREFIX, "skip", f"Dropping bad record: {e}")
                continue
            if session.date in seen:
                log_event(self.verbose, LOG_PREFIX, "skip", f"Dropping duplicate day {session.date}")
                continue
            seen.add(session.date)
            sessions.append(session)
        return sessions

    def _save(self) -> None:
        write_collection(
            self.path,
            [session.to_dict() for session in self._sessions],
            verbose=self.verbose,
            log_prefix=LOG_PREFIX,
        )

    def today(self) -> str:
        """Current local calendar date as YYYY-MM-DD."""
        return self._today().isoformat()

    def record_today(self) -> StudySession:
        """Count one completed quiz run for today and persist."""
        day = self.today()
        for idx, session in enumerate(self._sessions):
            if session.date == day:
                updated = session.incremented()
                self._sessions[idx] = updated
                break
        else:
            updated = StudySession(date=day, count=1)
            self._sessions.append(updated)
        self._save()
        log_event(self.verbose, LOG_PREFIX, "ok", f"{day}: {updated.count} run(s)")
        return updated

    def list(self) -> List[StudySession]:
        """All records in stored order."""
        return list(self._sessions)
