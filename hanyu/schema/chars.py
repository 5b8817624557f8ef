"""Character analysis results. Held only while a detail view is open."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class RelatedWord:
    word: str
    pinyin: str
    meaning: str


@dataclass(frozen=True)
class CharDetail:
    char: str
    pinyin: str
    meaning: str
    related_words: List[RelatedWord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "CharDetail":
        """Build from a service response. Raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("character detail must be an object")
        values = {}
        for key in ("char", "pinyin", "meaning"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"field '{key}' is missing or empty")
            values[key] = value.strip()
        raw_related = data.get("relatedWords")
        if not isinstance(raw_related, list):
            raise ValueError("field 'relatedWords' must be a list")
        related: List[RelatedWord] = []
        for item in raw_related:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            pinyin = item.get("pinyin")
            meaning = item.get("meaning")
            if not all(isinstance(v, str) and v.strip() for v in (word, pinyin, meaning)):
                continue
            related.append(RelatedWord(word=word.strip(), pinyin=pinyin.strip(), meaning=meaning.strip()))
        return cls(related_words=related, **values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "char": self.char,
            "pinyin": self.pinyin,
            "meaning": self.meaning,
            "relatedWords": [
                {"word": rw.word, "pinyin": rw.pinyin, "meaning": rw.meaning}
                for rw in self.related_words
            ],
        }
