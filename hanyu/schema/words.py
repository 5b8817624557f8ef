"""Word records: search candidates and saved entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class WordCandidate:
    """A word body as returned by a search, before it is saved."""
    simplified: str
    pinyin: str
    meaning: str
    example: str
    example_meaning: str
    traditional: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordCandidate":
        """Build from a serialized body. Raises ValueError on missing fields."""
        if not isinstance(data, dict):
            raise ValueError("word body must be an object")
        traditional = data.get("traditional")
        return cls(
            simplified=_require_str(data, "simplified"),
            pinyin=_require_str(data, "pinyin"),
            meaning=_require_str(data, "meaning"),
            example=_require_str(data, "example"),
            example_meaning=_require_str(data, "exampleMeaning"),
            traditional=traditional if isinstance(traditional, str) and traditional else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"simplified": self.simplified}
        if self.traditional:
            data["traditional"] = self.traditional
        data.update({
            "pinyin": self.pinyin,
            "meaning": self.meaning,
            "example": self.example,
            "exampleMeaning": self.example_meaning,
        })
        return data


@dataclass(frozen=True)
class WordEntry:
    """A saved vocabulary item. Immutable once created."""
    id: str
    simplified: str
    pinyin: str
    meaning: str
    example: str
    example_meaning: str
    date_added: int  # millisecond epoch timestamp
    traditional: Optional[str] = None

    @classmethod
    def from_candidate(cls, candidate: WordCandidate, entry_id: str, date_added: int) -> "WordEntry":
        return cls(
            id=entry_id,
            simplified=candidate.simplified,
            pinyin=candidate.pinyin,
            meaning=candidate.meaning,
            example=candidate.example,
            example_meaning=candidate.example_meaning,
            date_added=date_added,
            traditional=candidate.traditional,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordEntry":
        """Build from a persisted record. Raises ValueError on bad records."""
        body = WordCandidate.from_dict(data)
        entry_id = _require_str(data, "id")
        date_added = data.get("dateAdded")
        if not isinstance(date_added, int) or isinstance(date_added, bool):
            raise ValueError("field 'dateAdded' must be an integer timestamp")
        return cls.from_candidate(body, entry_id, date_added)

    def to_candidate(self) -> WordCandidate:
        return WordCandidate(
            simplified=self.simplified,
            pinyin=self.pinyin,
            meaning=self.meaning,
            example=self.example,
            example_meaning=self.example_meaning,
            traditional=self.traditional,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        data.update(self.to_candidate().to_dict())
        data["dateAdded"] = self.date_added
        return data
