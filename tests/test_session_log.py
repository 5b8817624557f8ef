import json
from datetime import date

import pytest

from hanyu.schema.sessions import StudySession
from hanyu.store.sessions import SessionLog


def test_same_day_increments(session_log):
    session_log.record_today()
    session_log.record_today()
    assert session_log.list() == [StudySession(date="2024-01-01", count=2)]


def test_distinct_days_create_records(session_log, clock):
    for day in (1, 2, 3):
        clock.today = date(2024, 1, day)
        session_log.record_today()
    sessions = session_log.list()
    assert len(sessions) == 3
    assert all(s.count == 1 for s in sessions)
    assert [s.date for s in sessions] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_record_persists(session_log, clock):
    session_log.record_today()
    reloaded = SessionLog(session_log.path, today=clock)
    assert reloaded.list() == [StudySession(date="2024-01-01", count=1)]


def test_stored_order_is_kept(tmp_path, clock):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps([
        {"date": "2024-01-05", "count": 1},
        {"date": "2023-12-30", "count": 4},
    ]), encoding="utf-8")
    assert [s.date for s in SessionLog(path, today=clock).list()] == ["2024-01-05", "2023-12-30"]


def test_bad_and_duplicate_records_are_dropped(tmp_path, clock):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps([
        {"date": "2024-01-01", "count": 2},
        {"date": "2024-01-01", "count": 9},
        {"date": "yesterday", "count": 1},
        {"date": "2024-01-02", "count": 0},
    ]), encoding="utf-8")
    assert SessionLog(path, today=clock).list() == [StudySession(date="2024-01-01", count=2)]


def test_missing_file_is_empty(tmp_path):
    assert SessionLog(tmp_path / "none.json").list() == []


def test_session_rejects_zero_count():
    with pytest.raises(ValueError):
        StudySession(date="2024-01-01", count=0)
