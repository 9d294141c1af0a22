"""Load settings and env configuration."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobdash.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

DEFAULT_SETTINGS: dict[str, Any] = {
    "default_role": "developer",
    "default_location": "India",
    "proxy_default_location": "United States",
    "api_base_url": "http://localhost:8080",
    "request_timeout": 15,
    "activity_limit": 100,
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Built-in defaults overlaid with config/settings.yaml and env overrides."""
    settings = dict(DEFAULT_SETTINGS)
    path = path or SETTINGS_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict):
            settings.update({k: v for k, v in data.items() if v is not None})
        else:
            log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)

    api_url = get_env("JOBDASH_API_URL")
    if api_url:
        settings["api_base_url"] = api_url
    return settings


def data_dir() -> Path:
    """Where the local key/value documents live; JOBDASH_DATA_DIR overrides."""
    override = get_env("JOBDASH_DATA_DIR")
    return Path(override) if override else ROOT / "data"


def resume_dir() -> Path:
    return data_dir() / "resumes"


def ensure_dirs() -> None:
    for d in (data_dir(), resume_dir()):
        d.mkdir(parents=True, exist_ok=True)
