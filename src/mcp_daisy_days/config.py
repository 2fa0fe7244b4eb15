"""Configuration loading for the daisy-days server and command line."""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from mcp_daisy_days.index import DEFAULT_SEARCH_LIMIT

CONFIG_ENV_VAR = "DAISY_DAYS_CONFIG"
DEFAULT_CONFIG_FILE = "daisy-days.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseModel):
    """Settings for the server and command line, loaded from YAML."""

    log_level: LogLevel = "INFO"
    search_limit: int = Field(default=DEFAULT_SEARCH_LIMIT, gt=0)
    # Override the packaged corpus; both paths must be set together
    components_path: str | None = None
    concepts_path: str | None = None

    @property
    def resolved_corpus_paths(self) -> tuple[Path, Path] | None:
        """Return the corpus override paths, or None to use the packaged corpus."""
        if self.components_path is None or self.concepts_path is None:
            return None
        return Path(self.components_path).expanduser(), Path(self.concepts_path).expanduser()


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
