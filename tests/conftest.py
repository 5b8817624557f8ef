import itertools
import os
import random
import sys
from datetime import date

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hanyu.lookup.gateway import LookupGateway
from hanyu.schema.words import WordCandidate
from hanyu.store.sessions import SessionLog
from hanyu.store.words import WordStore


class FakeClient:
    """Stands in for OpenAIClient; replays queued replies in order."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.calls = []

    def complete_structured(self, system, user, schema):
        self.calls.append({"system": system, "user": user, "schema": schema["name"]})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class Clock:
    """Settable 'today' for the study log."""

    def __init__(self, today):
        self.today = today

    def __call__(self):
        return self.today


def make_candidate(simplified, **overrides):
    fields = {
        "simplified": simplified,
        "pinyin": "pīnyīn",
        "meaning": f"meaning of {simplified}",
        "example": f"{simplified}。",
        "example_meaning": "example",
        "traditional": simplified,
    }
    fields.update(overrides)
    return WordCandidate(**fields)


@pytest.fixture
def ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def word_store(tmp_path, ids):
    millis = itertools.count(1_700_000_000_000)
    return WordStore(tmp_path / "words.json", id_factory=ids, clock=lambda: next(millis))


@pytest.fixture
def clock():
    return Clock(date(2024, 1, 1))


@pytest.fixture
def session_log(tmp_path, clock):
    return SessionLog(tmp_path / "sessions.json", today=clock)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def gateway(fake_client):
    return LookupGateway(client_factory=lambda: fake_client)
