"""Configuration for the study tool.

A -config.json file can specify:
- data_dir: folder holding the saved words and study log (default: ~/.hanyu)
- model: OpenAI model name (default: $OPENAI_MODEL, else gpt-4o)
- meaning_language: language used for meanings and translations (default: Korean)
- quiz_size: maximum cards per quiz run (default: 10)
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


CONFIG_FILENAME = "-config.json"
DEFAULT_DATA_DIR = "~/.hanyu"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_MEANING_LANGUAGE = "Korean"
DEFAULT_QUIZ_SIZE = 10


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


def _default_model() -> str:
    return os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL


@dataclass
class AppConfig:
    """Configuration for one study profile."""
    data_dir: str = DEFAULT_DATA_DIR
    model: str = field(default_factory=_default_model)
    meaning_language: str = DEFAULT_MEANING_LANGUAGE
    quiz_size: int = DEFAULT_QUIZ_SIZE

    def __post_init__(self):
        if not isinstance(self.quiz_size, int) or isinstance(self.quiz_size, bool) or self.quiz_size < 1:
            raise ConfigError(f"quiz_size must be a positive integer, got {self.quiz_size!r}")
        if not isinstance(self.meaning_language, str) or not self.meaning_language.strip():
            raise ConfigError("meaning_language must not be empty")
        if not isinstance(self.data_dir, str) or not self.data_dir.strip():
            raise ConfigError(f"data_dir must be a non-empty string, got {self.data_dir!r}")
        if not isinstance(self.model, str) or not self.model.strip():
            raise ConfigError(f"model must be a non-empty string, got {self.model!r}")


def load_app_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a -config.json file.

    Returns the defaults if the file doesn't exist.
    """
    if path is None or not path.exists():
        return AppConfig()

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")

    return AppConfig(
        data_dir=data.get("data_dir", DEFAULT_DATA_DIR),
        model=data.get("model") or _default_model(),
        meaning_language=data.get("meaning_language", DEFAULT_MEANING_LANGUAGE),
        quiz_size=data.get("quiz_size", DEFAULT_QUIZ_SIZE),
    )


def write_app_config(folder: Path, config: AppConfig) -> Path:
    """Write a configuration file to a folder."""
    config_path = folder / CONFIG_FILENAME
    data = {
        "data_dir": config.data_dir,
        "model": config.model,
        "meaning_language": config.meaning_language,
        "quiz_size": config.quiz_size,
    }
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return config_path


def get_data_dir(config: AppConfig, config_folder: Optional[Path] = None) -> Path:
    """Resolve the data directory; relative paths are relative to the config folder."""
    data_dir = Path(config.data_dir).expanduser()
    if not data_dir.is_absolute() and config_folder is not None:
        data_dir = config_folder / data_dir
    return data_dir.resolve()
