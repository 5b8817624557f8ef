"""Word search and character analysis via OpenAI."""

from typing import Any, Callable, List, Optional

from openai import OpenAIError

from hanyu.common.config import DEFAULT_MEANING_LANGUAGE
from hanyu.common.logging import log_debug, log_event
from hanyu.common.openai import CHAR_DETAIL_SCHEMA, WORD_SEARCH_SCHEMA, OpenAIClient
from hanyu.common.utils import _clean_value
from hanyu.lookup.errors import CharacterAnalysisFailure, LookupFailure
from hanyu.schema.chars import CharDetail
from hanyu.schema.words import WordCandidate

LOG_PREFIX = "lookup"

MAX_CANDIDATES = 5
RELATED_WORDS = 3


def search_prompts(query: str, meaning_language: str) -> tuple:
    """Return (system, user) prompts for a word search."""
    system = (
        "You are a Chinese dictionary for "
        f"{meaning_language}-speaking learners. "
        "The query may be a meaning in "
        f"{meaning_language}, Pinyin, or Chinese characters. "
        "Return JSON {\"words\": [...]} with the 3 to 5 most relevant Chinese words. "
        "For each word give the Simplified Chinese, Pinyin with tone marks (no numbers), "
        f"the {meaning_language} meaning, and one simple example sentence in Chinese "
        f"with its {meaning_language} translation."
    )
    user = f"Search for Chinese words matching the query: \"{query}\""
    return system, user


def analysis_prompts(char: str, meaning_language: str) -> tuple:
    """Return (system, user) prompts for a single-character analysis."""
    system = (
        "You analyze single Chinese characters for "
        f"{meaning_language}-speaking learners. "
        "Give the character's Pinyin with tone marks, its main "
        f"{meaning_language} meaning, and {RELATED_WORDS} common words containing it, "
        f"each with Pinyin and {meaning_language} meaning."
    )
    user = f"Analyze the Chinese character: \"{char}\""
    return system, user


def parse_search_response(data: Any) -> List[WordCandidate]:
    """Turn a search reply into candidates. Raises LookupFailure if none are usable."""
    items = data.get("words") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise LookupFailure("search reply has no word list")

    results: List[WordCandidate] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            candidate = WordCandidate.from_dict(
                {k: _clean_value(v).strip() if isinstance(v, str) else v for k, v in item.items()}
            )
        except ValueError:
            continue
        if not candidate.simplified:
            continue
        results.append(candidate)
        if len(results) >= MAX_CANDIDATES:
            break

    if not results:
        raise LookupFailure("search reply contained no usable words")
    return results


class LookupGateway:
    def __init__(
        self,
        model: Optional[str] = None,
        meaning_language: str = DEFAULT_MEANING_LANGUAGE,
        client_factory: Optional[Callable[[], Any]] = None,
        verbose: bool = False,
        debug: bool = False,
    ) -> None:
        self.model = model
        self.meaning_language = meaning_language
        self.verbose = verbose
        self.debug = debug
        self._client_factory = client_factory or (lambda: OpenAIClient(model=self.model))
        self._client: Any = None

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def _call(self, system: str, user: str, schema: dict) -> Any:
        log_debug(self.debug, f"{schema['name']}: {user}")
        return self._get_client().complete_structured(system=system, user=user, schema=schema)

    def search(self, query: str) -> List[WordCandidate]:
        """Find 3-5 candidate words for a free-text query.

        An empty query returns [] without calling the service.
        """
        query = query.strip()
        if not query:
            return []
        log_event(self.verbose, LOG_PREFIX, "api", f"Searching: {query}")
        system, user = search_prompts(query, self.meaning_language)
        try:
            data = self._call(system, user, WORD_SEARCH_SCHEMA)
        except (OpenAIError, RuntimeError, ValueError) as e:
            raise LookupFailure(f"search failed: {e}") from e
        if not data:
            raise LookupFailure("empty reply from search")
        results = parse_search_response(data)
        log_event(self.verbose, LOG_PREFIX, "ok", f"{len(results)} result(s) for {query}")
        return results

    def analyze_character(self, char: str) -> CharDetail:
        """Pinyin, meaning and related words for exactly one character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got '{char}'")
        log_event(self.verbose, LOG_PREFIX, "api", f"Analyzing: {char}")
        system, user = analysis_prompts(char, self.meaning_language)
        try:
            data = self._call(system, user, CHAR_DETAIL_SCHEMA)
        except (OpenAIError, RuntimeError, ValueError) as e:
            raise CharacterAnalysisFailure(f"analysis of '{char}' failed: {e}") from e
        if not data:
            raise CharacterAnalysisFailure(f"empty reply for '{char}'")
        try:
            detail = CharDetail.from_dict(data)
        except ValueError as e:
            raise CharacterAnalysisFailure(f"malformed reply for '{char}': {e}") from e
        if detail.char != char:
            raise CharacterAnalysisFailure(f"reply describes '{detail.char}', expected '{char}'")
        return detail
