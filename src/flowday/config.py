"""Configuration management for Flowday."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.store import RECENTS_LIMIT

logger = logging.getLogger(__name__)

FLOWDAY_HOME = Path(os.environ.get("FLOWDAY_HOME", Path.home() / "flowday"))
CONFIG_FILE = FLOWDAY_HOME / "config" / "flowday.conf"
DATA_DIR = FLOWDAY_HOME / "data"


@dataclass
class Config:
    """Flowday configuration."""

    data_dir: str = ""
    recents_limit: int = RECENTS_LIMIT
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from flowday.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "recents_limit":
                try:
                    config.recents_limit = max(1, int(value))
                except ValueError:
                    logger.warning(f"Invalid RECENTS_LIMIT {value!r}, using {config.recents_limit}")
            case "log_level":
                config.log_level = value.upper()

    return config
