import json
from types import SimpleNamespace

import pytest

from hanyu.common.openai import OpenAIClient
from hanyu.lookup.errors import CharacterAnalysisFailure, LookupFailure
from hanyu.lookup.gateway import LookupGateway, parse_search_response

from conftest import FakeClient


def _word(simplified, **extra):
    data = {
        "simplified": simplified,
        "pinyin": "nǐ hǎo",
        "meaning": "안녕하세요",
        "example": "你好，老师！",
        "exampleMeaning": "안녕하세요, 선생님!",
    }
    data.update(extra)
    return data


def test_empty_query_skips_the_service(gateway, fake_client):
    assert gateway.search("") == []
    assert gateway.search("   ") == []
    assert fake_client.calls == []


def test_search_parses_candidates(gateway, fake_client):
    fake_client.replies.append({"words": [_word("你好"), _word("您好")]})
    results = gateway.search("안녕")
    assert [r.simplified for r in results] == ["你好", "您好"]
    assert results[0].example_meaning == "안녕하세요, 선생님!"
    assert fake_client.calls[0]["schema"] == "word_search"
    assert "안녕" in fake_client.calls[0]["user"]
    assert "Korean" in fake_client.calls[0]["system"]


def test_meaning_language_goes_into_prompt(fake_client):
    gateway = LookupGateway(meaning_language="English", client_factory=lambda: fake_client)
    fake_client.replies.append({"words": [_word("你好")]})
    gateway.search("hello")
    assert "English" in fake_client.calls[0]["system"]


def test_results_are_capped_at_five():
    results = parse_search_response({"words": [_word(f"词{i}") for i in range(8)]})
    assert len(results) == 5


def test_incomplete_items_are_dropped():
    data = {"words": [{"simplified": "好"}, _word("  你好 "), _word("")]}
    results = parse_search_response(data)
    assert [r.simplified for r in results] == ["你好"]


@pytest.mark.parametrize("reply", [None, {}, {"words": []}, {"words": "nope"}, [{"simplified": "x"}]])
def test_empty_or_malformed_search_reply_fails(gateway, fake_client, reply):
    fake_client.replies.append(reply)
    with pytest.raises(LookupFailure):
        gateway.search("hello")


def test_client_errors_become_lookup_failures(gateway, fake_client):
    fake_client.replies.append(json.JSONDecodeError("bad", "doc", 0))
    with pytest.raises(LookupFailure):
        gateway.search("hello")


def test_missing_api_key_becomes_lookup_failure():
    def factory():
        raise RuntimeError("OPENAI_API_KEY is not set in environment")

    gateway = LookupGateway(client_factory=factory)
    with pytest.raises(LookupFailure):
        gateway.search("hello")


def test_analyze_character(gateway, fake_client):
    fake_client.replies.append({
        "char": "好",
        "pinyin": "hǎo",
        "meaning": "좋다",
        "relatedWords": [
            {"word": "你好", "pinyin": "nǐ hǎo", "meaning": "안녕하세요"},
            {"word": "好吃", "pinyin": "hǎo chī", "meaning": "맛있다"},
            {"word": "坏", "pinyin": ""},
        ],
    })
    detail = gateway.analyze_character("好")
    assert detail.char == "好"
    assert [rw.word for rw in detail.related_words] == ["你好", "好吃"]
    assert fake_client.calls[0]["schema"] == "char_detail"


def test_analyze_requires_one_character(gateway, fake_client):
    with pytest.raises(ValueError):
        gateway.analyze_character("你好")
    with pytest.raises(ValueError):
        gateway.analyze_character("")
    assert fake_client.calls == []


@pytest.mark.parametrize("reply", [
    None,
    {},
    {"char": "好", "pinyin": "hǎo", "meaning": "좋다"},
    {"char": "", "pinyin": "hǎo", "meaning": "좋다", "relatedWords": []},
])
def test_malformed_analysis_fails(gateway, fake_client, reply):
    fake_client.replies.append(reply)
    with pytest.raises(CharacterAnalysisFailure):
        gateway.analyze_character("好")


def test_reply_for_another_character_fails(gateway, fake_client):
    fake_client.replies.append({"char": "坏", "pinyin": "huài", "meaning": "나쁘다", "relatedWords": []})
    with pytest.raises(CharacterAnalysisFailure):
        gateway.analyze_character("好")


def _client_returning(resp, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    client = OpenAIClient(model="gpt-4o")
    completions = SimpleNamespace(create=lambda **kwargs: resp)
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def test_reply_without_choices_is_a_failure(monkeypatch):
    client = _client_returning(SimpleNamespace(choices=[]), monkeypatch)
    assert client.complete_structured(system="s", user="u", schema={"name": "word_search"}) is None

    gateway = LookupGateway(client_factory=lambda: client)
    with pytest.raises(LookupFailure):
        gateway.search("hello")
    with pytest.raises(CharacterAnalysisFailure):
        gateway.analyze_character("好")


def test_client_is_created_once():
    created = []

    def factory():
        client = FakeClient([{"words": [_word("你好")]}, {"words": [_word("好")]}])
        created.append(client)
        return client

    gateway = LookupGateway(client_factory=factory)
    gateway.search("a")
    gateway.search("b")
    assert len(created) == 1
