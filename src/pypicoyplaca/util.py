"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from datetime import date, datetime

from .const import (
    DATE_FORMAT,
    DIGIT_PAD_CHAR,
    MAX_COMPACT_PLATE_CHARS,
    MAX_PLATE_DIGIT_CHARS,
    MAX_PLATE_WORD_CHARS,
    MIN_COMPACT_PLATE_CHARS,
    MIN_PLATE_DIGIT_CHARS,
    MIN_PLATE_WORD_CHARS,
    PLATE_SEPARATOR,
    TIME_FORMAT,
    WORD_PAD_CHAR,
)
from .exceptions import (
    EmptyFieldError,
    InvalidDateTimeError,
    InvalidPlateFormatError,
    PlateTooShortError,
)
from .models import ClockTime, Plate, TimeWindow

# Underscores survive the first pass and are dropped by the letter/digit filters.
_NON_WORD_RE = re.compile(r"\W", re.ASCII)
_NON_LETTER_RE = re.compile(r"[^A-Z]")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_LICENSE_PLATE_RE = re.compile(r"[^A-Z0-9]")
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def compact_license_plate(plate: str) -> str:
    if not isinstance(plate, str):
        raise InvalidPlateFormatError("License plate must be a string.")
    return _NON_WORD_RE.sub("", plate.upper())


def format_license_plate(plate: str) -> str:
    """Return the display form of a plate, e.g. ``"abc 1234"`` -> ``"ABC-1234"``.

    Inputs with fewer than three characters are returned compacted but without
    a separator. At most four characters are kept after the separator.
    """
    compact = compact_license_plate(plate)
    if len(compact) < MIN_PLATE_WORD_CHARS:
        return compact
    return _hyphenate(compact)


def parse_license_plate(plate: str) -> Plate:
    """Validate a raw plate and split it into its letter and digit groups.

    Legacy three-digit plates are left-padded with ``0`` so ``ABC-123`` becomes
    ``ABC-0123``. Parsing the string form of the result yields the same plate.
    """
    compact = _require_compact(plate)
    word_part, digit_part = _hyphenate(compact).split(PLATE_SEPARATOR, 1)
    letters = _NON_LETTER_RE.sub("", word_part)
    digits = _NON_DIGIT_RE.sub("", digit_part)
    if len(digits) >= MIN_PLATE_DIGIT_CHARS:
        digits = digits.rjust(MAX_PLATE_DIGIT_CHARS, DIGIT_PAD_CHAR)
    if len(letters) >= MIN_PLATE_WORD_CHARS:
        letters = letters.rjust(MAX_PLATE_WORD_CHARS, WORD_PAD_CHAR)
    if len(letters) != MAX_PLATE_WORD_CHARS or len(digits) != MAX_PLATE_DIGIT_CHARS:
        raise InvalidPlateFormatError(f"License plate {mask_license_plate(plate)} has an invalid format.")
    return Plate(letters=letters, digits=digits)


def plate_last_digit(plate: str) -> int:
    """Return the final character of the display form as an integer."""
    compact = _require_compact(plate)
    last = _hyphenate(compact)[-1]
    if not "0" <= last <= "9":
        raise InvalidPlateFormatError("License plate must end with a digit.")
    return int(last)


def mask_license_plate(plate: str) -> str:
    if not isinstance(plate, str):
        return "***"
    normalized = _LICENSE_PLATE_RE.sub("", plate.upper())
    if not normalized:
        return "***"
    if len(normalized) <= 2:
        return "*" * len(normalized)
    if len(normalized) <= 4:
        return f"{normalized[:1]}{'*' * (len(normalized) - 2)}{normalized[-1:]}"
    masked = "*" * (len(normalized) - 4)
    return f"{normalized[:2]}{masked}{normalized[-2:]}"


def parse_clock_time(value: str) -> ClockTime:
    if not isinstance(value, str) or not value.strip():
        raise EmptyFieldError("Time is required.")
    value = value.strip()
    if not _TIME_RE.fullmatch(value):
        raise InvalidDateTimeError(f"Time {value!r} is not a valid HH:MM value.")
    try:
        parsed = datetime.strptime(value, TIME_FORMAT)
    except ValueError as exc:
        raise InvalidDateTimeError(f"Time {value!r} is not a valid HH:MM value.") from exc
    return ClockTime(hour=parsed.hour, minute=parsed.minute)


def parse_query_datetime(raw_date: str | None, raw_time: str | None) -> datetime:
    """Combine form values ``YYYY-MM-DD`` and ``HH:MM`` into a naive local datetime."""
    if not _is_filled(raw_date) or not _is_filled(raw_time):
        raise EmptyFieldError("Date and time are required.")
    if not isinstance(raw_date, str) or not isinstance(raw_time, str):
        raise InvalidDateTimeError("Date and time must be strings.")
    if not _DATE_RE.fullmatch(raw_date.strip()):
        raise InvalidDateTimeError(f"Date {raw_date!r} is not a valid YYYY-MM-DD value.")
    try:
        parsed_date = datetime.strptime(raw_date.strip(), DATE_FORMAT)
    except ValueError as exc:
        raise InvalidDateTimeError(f"Date {raw_date!r} is not a valid YYYY-MM-DD value.") from exc
    clock = parse_clock_time(raw_time)
    return parsed_date.replace(hour=clock.hour, minute=clock.minute)


def weekday_index(value: date) -> int:
    """Return the day of week with Sunday as 0 and Saturday as 6."""
    return value.isoweekday() % 7


def window_contains(window: TimeWindow, timestamp: datetime) -> bool:
    return window.contains(timestamp)


def _is_filled(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _require_compact(plate: str) -> str:
    if isinstance(plate, str) and not plate.strip():
        raise EmptyFieldError("License plate is required.")
    compact = compact_license_plate(plate)
    if len(compact) < MIN_PLATE_WORD_CHARS:
        raise PlateTooShortError(f"License plate {mask_license_plate(plate)} is too short.")
    if not MIN_COMPACT_PLATE_CHARS <= len(compact) <= MAX_COMPACT_PLATE_CHARS:
        raise InvalidPlateFormatError(
            f"License plate {mask_license_plate(plate)} must have between "
            f"{MIN_COMPACT_PLATE_CHARS} and {MAX_COMPACT_PLATE_CHARS} characters."
        )
    return compact


def _hyphenate(compact: str) -> str:
    letters = compact[:MAX_PLATE_WORD_CHARS]
    digits = compact[MAX_PLATE_WORD_CHARS : MAX_PLATE_WORD_CHARS + MAX_PLATE_DIGIT_CHARS]
    return f"{letters}{PLATE_SEPARATOR}{digits}"
