"""Configuration management for daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(os.environ.get("DAYBOOK_CONFIG", Path.home() / ".daybook.conf"))
JOURNALS_DIR = Path(os.environ.get("DAYBOOK_JOURNALS_DIR", Path.home() / ".journals"))


@dataclass
class Config:
    """daybook configuration."""

    user: str = ""
    journals_dir: str = ""
    view_limit: int | None = None


def get_journals_root(config: Config) -> Path:
    """Resolve the journals root directory from config."""
    if config.journals_dir:
        return Path(config.journals_dir).expanduser()
    return JOURNALS_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybook.conf file."""
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
            case "user":
                config.user = value
            case "journals_dir":
                config.journals_dir = value
            case "view_limit":
                try:
                    limit = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-integer VIEW_LIMIT: {value!r}")
                    continue
                if limit < 0:
                    logger.warning(f"Ignoring negative VIEW_LIMIT: {limit}")
                    continue
                config.view_limit = limit

    return config
