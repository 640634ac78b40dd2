"""Playground configuration, read from the environment and an optional .env file."""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


DEFAULT_SETTINGS_PATH = Path.home() / ".solid_playground" / "settings.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(name: str) -> str:
    """Normalize a logging level name, falling back to WARNING if it is unknown."""
    level = name.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


@dataclass
class PlaygroundConfig:
    """Runtime settings for the demo."""
    settings_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> PlaygroundConfig:
        settings_path = os.getenv("PLAYGROUND_SETTINGS_PATH")
        return cls(
            settings_path=Path(settings_path).expanduser() if settings_path else DEFAULT_SETTINGS_PATH,
            log_level=_log_level(os.getenv("PLAYGROUND_LOG_LEVEL", "WARNING")),
        )
