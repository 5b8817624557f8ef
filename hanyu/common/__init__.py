"""Common utilities shared across the stores, study tools and lookup."""

from hanyu.common.utils import (
    is_cjk_char,
    split_characters,
    _load_env_file,
    _clean_value,
    new_entry_id,
    now_millis,
    simplified_to_traditional,
)
from hanyu.common.logging import (
    log_debug,
    log_event,
    log_error,
    format_line,
)
from hanyu.common.storage import (
    WORDS_FILENAME,
    SESSIONS_FILENAME,
    read_collection,
    write_collection,
)
from hanyu.common.openai import OpenAIClient

__all__ = [
    # utils
    "is_cjk_char",
    "split_characters",
    "_load_env_file",
    "_clean_value",
    "new_entry_id",
    "now_millis",
    "simplified_to_traditional",
    # logging
    "log_debug",
    "log_event",
    "log_error",
    "format_line",
    # storage
    "WORDS_FILENAME",
    "SESSIONS_FILENAME",
    "read_collection",
    "write_collection",
    # openai
    "OpenAIClient",
]
