"""pyPicoYPlaca package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .display import DisplayInfo, Severity, describe
from .engine import RestrictionEngine, check_restriction, evaluate_restriction
from .exceptions import (
    ConfigError,
    EmptyFieldError,
    InvalidDateTimeError,
    InvalidPlateError,
    InvalidPlateFormatError,
    PicoYPlacaError,
    PlateTooShortError,
    ValidationError,
)
from .models import CheckResult, ClockTime, Outcome, Plate, Restriction, RestrictionTable, TimeWindow

try:
    __version__ = version("pypicoyplaca")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "CheckResult",
    "ClockTime",
    "ConfigError",
    "DisplayInfo",
    "EmptyFieldError",
    "InvalidDateTimeError",
    "InvalidPlateError",
    "InvalidPlateFormatError",
    "Outcome",
    "PicoYPlacaError",
    "Plate",
    "PlateTooShortError",
    "Restriction",
    "RestrictionEngine",
    "RestrictionTable",
    "Severity",
    "TimeWindow",
    "ValidationError",
    "__version__",
    "check_restriction",
    "describe",
    "evaluate_restriction",
]
