#!/usr/bin/env python3
#
# module: fetcher.py
# dependencies: requests

import json
import logging
import os

import requests

from config import load_api_key, load_settings
from data_validator import DataValidator
from tide_model import ExtremeEvent, Sample

logger = logging.getLogger(__name__)

# Settings
DATA_FILE = "resources/tides.json"
BASE_URL = "https://www.worldtides.info/api/v2"
TIMEOUT = 30

HEADERS = {
    'User-Agent': 'TideClock/1.0 (Raspberry Pi; 128x32 OLED)'
}


class TideResponse:
    """Typed tide data: height samples and high/low events, oldest first."""

    def __init__(self, station="", samples=(), extremes=()):
        self.station = station
        self.samples = list(samples)
        self.extremes = list(extremes)

    @classmethod
    def empty(cls):
        return cls()

    def __bool__(self):
        return bool(self.samples)


# ---------- Helpers ----------

def save_json(data, path=DATA_FILE):
    """Atomic save so a half-written cache is never read back."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    temp_file = path + ".tmp"
    with open(temp_file, "w") as f:
        json.dump(data, f, indent=4)
    os.replace(temp_file, path)


def parse_response(data):
    """Turn raw WorldTides JSON into a TideResponse; anything unusable gives an empty one."""
    valid, msg = DataValidator.validate_structure(data)
    if not valid:
        logger.warning(f"!! Tide data rejected: {msg}")
        return TideResponse.empty()

    heights, dropped_heights = DataValidator.split_entries(data["heights"], DataValidator.validate_height_entry)
    extremes, dropped_extremes = DataValidator.split_entries(data["extremes"], DataValidator.validate_extreme_entry)
    if dropped_heights or dropped_extremes:
        logger.warning(f"!! Dropped {dropped_heights} height and {dropped_extremes} extreme entries")

    samples = [Sample(DataValidator.parse_timestamp(h), float(h["height"])) for h in heights]
    events = [
        ExtremeEvent(DataValidator.parse_timestamp(e), e["type"], float(e["height"]))
        for e in extremes
    ]
    samples.sort(key=lambda s: s.timestamp)
    events.sort(key=lambda e: e.timestamp)

    return TideResponse(str(data.get("station") or ""), samples, events)


# ---------- API Logic ----------

def build_url(settings, key):
    return (
        f"{BASE_URL}?heights&extremes&datum={settings.datum}&days={settings.days}"
        f"&lat={settings.lat}&lon={settings.lon}&step={settings.step}&key={key}"
    )


def fetch_tides(settings=None, key=None, data_file=DATA_FILE, session=None):
    """Download fresh tides, keep the raw JSON on disk and return the parsed response.

    Raises requests.RequestException on network/HTTP failure and ValueError
    when the body is not JSON.
    """
    settings = settings or load_settings()
    key = key or load_api_key()
    http = session or requests

    logger.info("--- Fetching tides from WorldTides ---")
    try:
        response = http.get(build_url(settings, key), headers=HEADERS, timeout=TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"!! Tide fetch failed, check wifi connection: {e}")
        raise
    data = response.json()

    # keep the raw body, it is the first thing to look at when parsing breaks
    try:
        save_json(data, data_file)
    except OSError as e:
        logger.warning(f"!! Could not write {data_file}: {e}")

    return parse_response(data)


def load_cached_tides(data_file=DATA_FILE):
    if not os.path.exists(data_file):
        logger.info(f"No cached tides at {data_file}, starting empty")
        return TideResponse.empty()
    try:
        with open(data_file, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"!! Failed to load {data_file}: {e}")
        return TideResponse.empty()
    return parse_response(data)
