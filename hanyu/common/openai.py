import json
import os
from typing import Any, Dict, Optional

from openai import OpenAI


# JSON schemas for structured outputs
WORD_SEARCH_SCHEMA = {
    "name": "word_search",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "words": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "simplified": {"type": "string", "description": "Simplified Chinese characters"},
                        "pinyin": {"type": "string", "description": "Pinyin with tone marks"},
                        "meaning": {"type": "string", "description": "Meaning in the learner's language"},
                        "example": {"type": "string", "description": "A simple example sentence in Chinese"},
                        "exampleMeaning": {"type": "string", "description": "Translation of the example sentence"}
                    },
                    "required": ["simplified", "pinyin", "meaning", "example", "exampleMeaning"],
                    "additionalProperties": False
                },
                "description": "3 to 5 most relevant words"
            }
        },
        "required": ["words"],
        "additionalProperties": False
    }
}

CHAR_DETAIL_SCHEMA = {
    "name": "char_detail",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "char": {"type": "string"},
            "pinyin": {"type": "string", "description": "Pinyin with tone marks"},
            "meaning": {"type": "string", "description": "Main meaning in the learner's language"},
            "relatedWords": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "word": {"type": "string"},
                        "pinyin": {"type": "string"},
                        "meaning": {"type": "string"}
                    },
                    "required": ["word", "pinyin", "meaning"],
                    "additionalProperties": False
                },
                "description": "3 common words containing this character"
            }
        },
        "required": ["char", "pinyin", "meaning", "relatedWords"],
        "additionalProperties": False
    }
}


class OpenAIClient:
    def __init__(self, model: Optional[str] = None) -> None:
        self.model = model or os.environ.get("OPENAI_MODEL", "gpt-4o")
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not set in environment")
        self.client = OpenAI(api_key=api_key, timeout=60.0)

    def complete_structured(self, system: str, user: str, schema: Dict[str, Any]) -> Any:
        """Complete with structured outputs (JSON schema enforcement).

        Single attempt; callers decide what to do with a failure.
        """
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_completion_tokens=2048,
            response_format={"type": "json_schema", "json_schema": schema},
        )
        if not resp.choices:
            return None
        text = resp.choices[0].message.content
        if not text:
            return None
        return json.loads(text)
