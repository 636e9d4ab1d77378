"""Configuration management for marktask."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MARKTASK_HOME = Path(os.environ.get("MARKTASK_HOME", Path.home() / ".config" / "marktask"))
CONFIG_FILE = MARKTASK_HOME / "marktask.conf"

OUTPUT_FORMATS = ("text", "json")
TRUE_WORDS = ("1", "true", "yes", "on")
FALSE_WORDS = ("0", "false", "no", "off")


@dataclass
class Config:
    """marktask configuration."""

    output: str = "text"
    show_overdue: bool = True
    # Date arguments (absolute or relative), resolved on each run
    default_from: str = ""
    default_to: str = ""


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from marktask.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "output":
                if value.lower() in OUTPUT_FORMATS:
                    config.output = value.lower()
                else:
                    logger.warning(f"Unknown OUTPUT format {value!r}, using {config.output}")
            case "show_overdue":
                config.show_overdue = _parse_bool(key, value, config.show_overdue)
            case "default_from":
                config.default_from = value
            case "default_to":
                config.default_to = value

    return config
