"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .exceptions import ConfigError


class Outcome(StrEnum):
    CIRCULATE = "circulate"
    RESTRICTED = "restricted"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class ClockTime:
    hour: int
    minute: int

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Daily interval, inclusive on both ends."""

    start: ClockTime
    end: ClockTime

    def contains(self, timestamp: datetime) -> bool:
        """Return whether ``timestamp`` falls inside this window on its own date."""
        start = timestamp.replace(
            hour=self.start.hour,
            minute=self.start.minute,
            second=0,
            microsecond=0,
        )
        end = timestamp.replace(
            hour=self.end.hour,
            minute=self.end.minute,
            second=0,
            microsecond=0,
        )
        return start <= timestamp <= end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class Restriction:
    digit: int
    weekday: int
    windows: tuple[TimeWindow, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "windows", tuple(self.windows))


@dataclass(frozen=True, slots=True)
class RestrictionTable:
    """Immutable lookup of restrictions by last digit and weekday (Sunday = 0)."""

    restrictions: tuple[Restriction, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "restrictions", tuple(self.restrictions))
        for restriction in self.restrictions:
            _validate_restriction(restriction)

    def matching(self, digit: int, weekday: int) -> list[Restriction]:
        return [
            restriction
            for restriction in self.restrictions
            if restriction.digit == digit and restriction.weekday == weekday
        ]


@dataclass(frozen=True, slots=True)
class Plate:
    letters: str
    digits: str

    def __str__(self) -> str:
        return f"{self.letters}-{self.digits}"


@dataclass(frozen=True, slots=True)
class CheckResult:
    outcome: Outcome
    reason: str
    plate: str | None = None
    error_code: str | None = None

    @property
    def can_circulate(self) -> bool:
        return self.outcome is Outcome.CIRCULATE


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_clock_time(value: ClockTime) -> None:
    if not isinstance(value, ClockTime):
        raise ConfigError("Window bounds must be ClockTime values.")
    if not _is_int(value.hour) or not _is_int(value.minute):
        raise ConfigError("Clock time hour and minute must be integers.")
    if not 0 <= value.hour <= 23 or not 0 <= value.minute <= 59:
        raise ConfigError(f"Clock time {value.hour}:{value.minute} is out of range.")


def _validate_restriction(restriction: Restriction) -> None:
    if not isinstance(restriction, Restriction):
        raise ConfigError("Restriction table entries must be Restriction values.")
    if not _is_int(restriction.digit):
        raise ConfigError("Restriction digit must be an integer.")
    if not _is_int(restriction.weekday):
        raise ConfigError("Restriction weekday must be an integer.")
    if not 0 <= restriction.digit <= 9:
        raise ConfigError(f"Restriction digit {restriction.digit} must be between 0 and 9.")
    if not 0 <= restriction.weekday <= 6:
        raise ConfigError(f"Restriction weekday {restriction.weekday} must be between 0 and 6.")
    if not restriction.windows:
        raise ConfigError(f"Restriction for digit {restriction.digit} has no time windows.")
    for window in restriction.windows:
        if not isinstance(window, TimeWindow):
            raise ConfigError("Restriction windows must be TimeWindow values.")
        _validate_clock_time(window.start)
        _validate_clock_time(window.end)
        if window.end.total_minutes < window.start.total_minutes:
            raise ConfigError(f"Time window {window} ends before it starts.")
