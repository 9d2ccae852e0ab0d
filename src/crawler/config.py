# src/crawler/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_CONFIG_PATH = Path("config/crawler.yml")

# env var -> CrawlerConfig field
ENV_OVERRIDES = {
    "CRAWLER_USER_AGENT": "user_agent",
    "CRAWLER_REQUEST_TIMEOUT": "request_timeout",
    "CRAWLER_DELAY": "delay",
    "NOMINATIM_URL": "nominatim_url",
    "NOMINATIM_PAUSE": "geocode_pause",
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class CrawlerConfig:
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    request_timeout: float = 10.0   # seconds, per request
    delay: float = 0.05             # seconds between detail page fetches
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    geocode_pause: float = 5.0      # seconds after each geocode call


def _coerce(name: str, value):
    kind = {f.name: f.type for f in fields(CrawlerConfig)}[name]
    if kind in ("float", float):
        try:
            out = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{name} must be a number, got {value!r}")
        if out < 0:
            raise ConfigError(f"{name} must not be negative, got {value!r}")
        return out
    if value is None or not str(value).strip():
        raise ConfigError(f"{name} must not be empty")
    return str(value).strip()


def load_config(path: Optional[Union[str, Path]] = None) -> CrawlerConfig:
    """
    Load crawler settings. Precedence: env vars > YAML file > defaults.

    YAML structure (all keys optional):
    crawler:
      user_agent: "..."
      request_timeout: 10
      delay: 0.05
    nominatim:
      url: https://nominatim.openstreetmap.org
      pause: 5
    """
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    data = {}
    if cfg_path.exists():
        try:
            data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {cfg_path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"{cfg_path} must contain a mapping")
    elif path:
        raise ConfigError(f"config not found: {cfg_path}")

    crawler = data.get("crawler") or {}
    nominatim = data.get("nominatim") or {}
    values = {k: v for k, v in crawler.items() if k in ("user_agent", "request_timeout", "delay")}
    if "url" in nominatim:
        values["nominatim_url"] = nominatim["url"]
    if "pause" in nominatim:
        values["geocode_pause"] = nominatim["pause"]

    for env, name in ENV_OVERRIDES.items():
        if os.getenv(env):
            values[name] = os.environ[env]

    return replace(CrawlerConfig(), **{k: _coerce(k, v) for k, v in values.items()})
