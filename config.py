#!/usr/bin/env python3
#
# module: config.py
# dependencies: none (stdlib tomllib)
#
# resources/Settings.toml:
#   lat = "50.6"
#   lon = "-3.4"
#   step = "900"
#   datum = "CD"
#   days = "3"
# resources/Secrets.toml:
#   key = "..."

import os
import tomllib
from dataclasses import dataclass

SETTINGS_FILE = "resources/Settings.toml"
SECRETS_FILE = "resources/Secrets.toml"

DEFAULT_STEP = "900"
DEFAULT_DATUM = "CD"
DEFAULT_DAYS = "3"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    lat: str
    lon: str
    step: str = DEFAULT_STEP
    datum: str = DEFAULT_DATUM
    days: str = DEFAULT_DAYS


def load_toml(path):
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Missing config file: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_settings(path=SETTINGS_FILE):
    raw = load_toml(path)
    missing = [k for k in ("lat", "lon") if k not in raw]
    if missing:
        raise ConfigError(f"{path} is missing: {', '.join(missing)}")
    return Settings(
        lat=str(raw["lat"]),
        lon=str(raw["lon"]),
        step=str(raw.get("step", DEFAULT_STEP)),
        datum=str(raw.get("datum", DEFAULT_DATUM)),
        days=str(raw.get("days", DEFAULT_DAYS)),
    )


def load_api_key(path=SECRETS_FILE):
    """WORLDTIDES_KEY wins over the secrets file."""
    key = os.environ.get("WORLDTIDES_KEY")
    if key:
        return key
    raw = load_toml(path)
    if not raw.get("key"):
        raise ConfigError(f"{path} has no API key")
    return str(raw["key"])
