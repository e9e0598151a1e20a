#!/usr/bin/env python3
"""
Data validation utilities.

Required files:
- data_validator.py
- tides.json (validated by this module before it reaches the tide model)

Dependencies:
- Python 3 (stdlib only)

Details:
- Checks the WorldTides response shape and each height/extreme entry
- Bad entries are dropped, a document with the wrong shape is rejected whole
"""

from datetime import datetime, timezone

DATE_FORMAT = "%Y-%m-%dT%H:%M%z"  # 2020-09-08T10:00+0000
EXTREME_TYPES = ("High", "Low")


class DataValidator:
    """Validates tides.json content with graceful error handling"""

    @staticmethod
    def validate_structure(data):
        """Validate that data has required structure"""
        if not isinstance(data, dict):
            return False, "Data is not a dictionary"

        if data.get("status") not in (None, 200):
            return False, f"API status {data.get('status')}: {data.get('error', 'unknown error')}"

        for key in ("heights", "extremes"):
            if key not in data:
                return False, f"Missing required key: {key}"
            if not isinstance(data[key], list):
                return False, f"Key '{key}' should be list, got {type(data[key])}"

        return True, "Valid structure"

    @staticmethod
    def parse_timestamp(entry):
        """Entry time from its 'date' string, falling back to the unix 'dt'."""
        date_str = entry.get("date")
        if isinstance(date_str, str):
            try:
                return datetime.strptime(date_str, DATE_FORMAT).astimezone(timezone.utc)
            except ValueError:
                pass
        dt = entry.get("dt")
        if isinstance(dt, int) and not isinstance(dt, bool):
            try:
                return datetime.fromtimestamp(dt, timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None
        return None

    @staticmethod
    def validate_height_entry(entry):
        """Validate a single height entry {dt, date, height}"""
        if not isinstance(entry, dict):
            return False
        height = entry.get("height")
        if isinstance(height, bool) or not isinstance(height, (int, float)):
            return False
        return DataValidator.parse_timestamp(entry) is not None

    @staticmethod
    def validate_extreme_entry(entry):
        """Validate a single extreme entry {dt, date, height, type}"""
        if not DataValidator.validate_height_entry(entry):
            return False
        return entry.get("type") in EXTREME_TYPES

    @staticmethod
    def split_entries(entries, validator):
        """Return (valid entries, number of dropped entries)"""
        valid = [e for e in entries if validator(e)]
        return valid, len(entries) - len(valid)
