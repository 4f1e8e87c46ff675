# src/tarjimly/config.py
"""
Settings from the environment (and an optional .env file).

    TARJIMLY_LANGUAGES   path to a JSON {code: name} vocabulary
    TARJIMLY_LOG_LEVEL   DEBUG, INFO, WARNING (default), ...
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from tarjimly.core.languages import Vocabulary, default_vocabulary


LANGUAGES_VAR = "TARJIMLY_LANGUAGES"
LOG_LEVEL_VAR = "TARJIMLY_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    languages_path: Path | None = None
    log_level: int = logging.WARNING

    def vocabulary(self) -> Vocabulary:
        if self.languages_path is None:
            return default_vocabulary()
        return Vocabulary.from_json(self.languages_path)


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def load_settings(env_file: str | Path | None = None) -> Settings:
    # Variables already set in the environment win over .env
    load_dotenv(env_file or find_dotenv(usecwd=True))

    languages = os.environ.get(LANGUAGES_VAR)
    level = os.environ.get(LOG_LEVEL_VAR)

    return Settings(
        languages_path=Path(languages) if languages else None,
        log_level=parse_log_level(level) if level else logging.WARNING,
    )
