"""Restriction table loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from importlib import resources
from importlib.resources.abc import Traversable

from ..const import RESTRICTIONS_FILENAME, SCHEMA_FILENAME
from ..exceptions import ConfigError, ValidationError
from ..models import Restriction, RestrictionTable, TimeWindow
from ..util import parse_clock_time

_LOGGER = logging.getLogger(__name__)
_TABLE_CACHE: RestrictionTable | None = None


def _rules_root() -> Traversable:
    return resources.files("pypicoyplaca.rules")


def load_restrictions_schema() -> dict:
    schema_path = _rules_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def load_restrictions_data() -> dict:
    data_path = _rules_root() / RESTRICTIONS_FILENAME
    try:
        return json.loads(data_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("Restriction table is not valid JSON.") from exc
    except FileNotFoundError as exc:
        raise ConfigError("Restriction table file was not found.") from exc


def _build_window(name: str, data: object) -> TimeWindow:
    if not isinstance(data, Mapping):
        raise ConfigError(f"Time window {name!r} must be a JSON object.")
    missing = [key for key in ("start", "end") if key not in data]
    if missing:
        raise ConfigError(f"Time window {name!r} missing keys: {', '.join(missing)}.")
    try:
        return TimeWindow(start=parse_clock_time(data["start"]), end=parse_clock_time(data["end"]))
    except ValidationError as exc:
        raise ConfigError(f"Time window {name!r} has an invalid clock time.") from exc


def _build_restriction(data: object, windows: Mapping[str, TimeWindow]) -> Restriction:
    if not isinstance(data, Mapping):
        raise ConfigError("Restriction entry must be a JSON object.")
    missing = [key for key in ("digit", "weekday", "windows") if key not in data]
    if missing:
        raise ConfigError(f"Restriction entry missing keys: {', '.join(missing)}.")
    digit = data["digit"]
    weekday = data["weekday"]
    window_names = data["windows"]
    if not isinstance(digit, int) or isinstance(digit, bool):
        raise ConfigError("Restriction digit must be an integer.")
    if not isinstance(weekday, int) or isinstance(weekday, bool):
        raise ConfigError("Restriction weekday must be an integer.")
    if not isinstance(window_names, list):
        raise ConfigError("Restriction windows must be a list of window names.")
    unknown = [name for name in window_names if not isinstance(name, str) or name not in windows]
    if unknown:
        raise ConfigError(f"Restriction references unknown windows: {', '.join(map(str, unknown))}.")
    return Restriction(
        digit=digit,
        weekday=weekday,
        windows=tuple(windows[name] for name in window_names),
    )


def build_restriction_table(data: Mapping) -> RestrictionTable:
    """Build a table from ``{"windows": {...}, "restrictions": [...]}`` data.

    Windows are declared once by name and referenced from each entry, so digits
    can share the default windows or use their own.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Restriction table must be a JSON object.")
    raw_windows = data.get("windows")
    raw_restrictions = data.get("restrictions")
    if not isinstance(raw_windows, Mapping) or not raw_windows:
        raise ConfigError("Restriction table must declare named windows.")
    if not isinstance(raw_restrictions, list) or not raw_restrictions:
        raise ConfigError("Restriction table must list restrictions.")
    windows = {name: _build_window(name, value) for name, value in raw_windows.items()}
    return RestrictionTable(
        restrictions=tuple(_build_restriction(entry, windows) for entry in raw_restrictions)
    )


def load_restriction_table() -> RestrictionTable:
    global _TABLE_CACHE
    if _TABLE_CACHE is not None:
        return _TABLE_CACHE
    table = build_restriction_table(load_restrictions_data())
    _LOGGER.debug("Loaded restriction table with %s entries", len(table.restrictions))
    _TABLE_CACHE = table
    return table


def clear_restriction_table_cache() -> None:
    """Clear the cached default table (used in tests)."""
    global _TABLE_CACHE
    _TABLE_CACHE = None
