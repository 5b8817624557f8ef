"""Logging utilities for the study tool.

Lines are printed as ``[prefix] [tag] message``; a handful of status tags get
an emoji marker so a long verbose run is easy to scan.
"""

import sys
from typing import Optional, TextIO


_TAG_EMOJI = {
    "api": "🤖",
    "file": "💾",
    "skip": "⏭️",
    "ok": "✅",
    "error": "💥",
    "stale": "🕰️",
}


def _emoji_for(tag: str) -> str:
    return _TAG_EMOJI.get(tag, "")


def format_line(prefix: str, tag: str, message: str) -> str:
    """Build a tagged log line."""
    emoji = _emoji_for(tag)
    emoji_spacer = (emoji + " ") if emoji else ""
    return f"[{prefix}] [{tag}] {emoji_spacer}{message}"


def log_event(
    verbose: bool,
    prefix: str,
    tag: str,
    message: str,
    stream: Optional[TextIO] = None,
) -> None:
    """Print a tagged line if verbose logging is enabled."""
    if not verbose:
        return
    print(format_line(prefix, tag, message), file=stream or sys.stdout)


def log_error(prefix: str, message: str) -> None:
    """Errors are always printed, to stderr."""
    print(format_line(prefix, "error", message), file=sys.stderr)


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")
