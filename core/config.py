# core/config.py

"""
Runtime configuration for Watson.

Values are read from environment variables, optionally seeded from a `.env`
file via python-dotenv. Variables already present in the environment take
precedence over the `.env` file.

Recognized variables:
- `WATSON_DATA_FILE`: path of the JSON data file (default `data/watson.json`)
- `WATSON_LOG_LEVEL`: logging level name (default `WARNING`)
- `WATSON_LOG_FILE`: optional path of a log file
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_FILE = os.path.join("data", "watson.json")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Config:
    data_file_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file_path: Path | None = None


def load_config(env_path: str | os.PathLike | None = None) -> Config:
    """
    Builds a `Config` from the environment.

    Args:
        env_path (str | os.PathLike | None): Optional `.env` file to load first. When None, python-dotenv searches upward from the working directory.

    Returns:
        Config: The resolved configuration.

    Raises:
        ValueError: If `WATSON_LOG_LEVEL` is not a known logging level.
    """
    if env_path is not None:
        load_dotenv(env_path)
    else:
        load_dotenv()

    log_level = os.getenv("WATSON_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")

    log_file = os.getenv("WATSON_LOG_FILE")

    return Config(
        data_file_path=Path(os.getenv("WATSON_DATA_FILE", DEFAULT_DATA_FILE)),
        log_level=log_level,
        log_file_path=Path(log_file) if log_file else None,
    )
