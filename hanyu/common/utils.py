"""Common utility functions shared across the library."""

import os
import time
import uuid
from pathlib import Path
from typing import List


_DEF_ENV_LOADED = False


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    try:
        # Look for .env in hanyu/common/../.. (project root) or hanyu/
        here = Path(__file__).parent
        candidates = [
            here.parent.parent / ".env",
            here.parent / ".env",
        ]
        for p in candidates:
            if not p.exists():
                continue
            for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):].strip()
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                key = k.strip()
                val = v.strip().strip('"').strip("'")
                if key and os.environ.get(key) is None:
                    os.environ[key] = val
    except OSError:
        pass


# Call once on import
_load_env_file()


def is_cjk_char(ch: str) -> bool:
    """Check if a character is a CJK (Chinese/Japanese/Korean) character."""
    if ch == "〇":
        return True
    code = ord(ch)
    if 0x3400 <= code <= 0x9FFF:
        return True
    if 0xF900 <= code <= 0xFAFF:
        return True
    if 0x2E80 <= code <= 0x2EFF:
        return True
    if 0x2F00 <= code <= 0x2FDF:
        return True
    if 0x20000 <= code <= 0x2EBEF:
        return True
    if 0x30000 <= code <= 0x3134F:
        return True
    return False


def split_characters(word: str) -> List[str]:
    """Return the CJK characters of a word in order (duplicates kept)."""
    return [ch for ch in word if is_cjk_char(ch)]


def _clean_value(text: str) -> str:
    """Strip control characters that can render as odd glyphs."""
    if not isinstance(text, str):
        return text
    return "".join(ch for ch in text if (ch == "\n" or ch == "\t" or ord(ch) >= 32))


def new_entry_id() -> str:
    """Opaque unique id for a saved word."""
    return uuid.uuid4().hex


def now_millis() -> int:
    """Current time as a millisecond epoch timestamp."""
    return int(time.time() * 1000)


def simplified_to_traditional(text: str) -> str:
    """Convert simplified Chinese text to traditional Chinese.

    Uses the hanziconv library for character-level conversion.
    """
    if not text:
        return text
    from hanziconv import HanziConv
    return HanziConv.toTraditional(text)
