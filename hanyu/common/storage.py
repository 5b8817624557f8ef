"""JSON file storage for persisted collections.

Each collection is a single JSON array written whole after every mutation.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from hanyu.common.logging import log_event


WORDS_FILENAME = "hanyu_words.json"
SESSIONS_FILENAME = "hanyu_sessions.json"


def read_collection(
    path: Path,
    verbose: bool = False,
    log_prefix: str = "storage",
) -> List[Dict[str, Any]]:
    """Read a persisted collection. Returns [] if absent or unreadable.

    Args:
        path: JSON file holding the collection
        verbose: Enable verbose logging
        log_prefix: Prefix for log messages (e.g., "words", "sessions")
    """
    if not path.exists():
        log_event(verbose, log_prefix, "skip", f"No saved data at {path.name}, starting empty")
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log_event(verbose, log_prefix, "skip", f"Unreadable {path.name}, starting empty")
        return []
    if not isinstance(data, list):
        return []
    items = [item for item in data if isinstance(item, dict)]
    log_event(verbose, log_prefix, "file", f"Loaded {len(items)} records from {path.name}")
    return items


def write_collection(
    path: Path,
    items: List[Dict[str, Any]],
    verbose: bool = False,
    log_prefix: str = "storage",
) -> None:
    """Overwrite the persisted collection with ``items``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(items, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    log_event(verbose, log_prefix, "file", f"Saved {len(items)} records to {path.name}")


__all__ = [
    "WORDS_FILENAME",
    "SESSIONS_FILENAME",
    "read_collection",
    "write_collection",
]
