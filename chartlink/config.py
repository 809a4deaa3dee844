"""Configuration management for chartlink."""

import json
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_API_BASE = "http://chart.apis.google.com/chart"


class ChartlinkConfig(BaseModel):
    api_base: str = DEFAULT_API_BASE
    default_width: int = Field(default=300, gt=0)
    default_height: int = Field(default=200, gt=0)


def _config_dir() -> Path:
    return Path.home() / ".chartlink"


def _config_path() -> Path:
    return _config_dir() / "config.json"


def load_config() -> ChartlinkConfig:
    """Load config from ~/.chartlink/config.json, returning defaults if missing."""
    path = _config_path()
    if not path.exists():
        return ChartlinkConfig()
    return ChartlinkConfig.model_validate_json(path.read_text())


def save_config(config: ChartlinkConfig) -> None:
    """Save config to ~/.chartlink/config.json."""
    _config_dir().mkdir(parents=True, exist_ok=True)
    _config_path().write_text(json.dumps(config.model_dump(), indent=2) + "\n")
