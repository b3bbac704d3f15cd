"""Library exceptions."""

from __future__ import annotations

from .const import (
    MESSAGE_EMPTY_FIELD,
    MESSAGE_INVALID_DATE,
    MESSAGE_INVALID_PLATE,
)


class PicoYPlacaError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None
    default_user_message: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        if detail is None:
            detail = message
        super().__init__(message if message is not None else (detail or ""))
        self.error_code = error_code or self.default_error_code
        self.detail = detail
        self.user_message = user_message or self.default_user_message


class ValidationError(PicoYPlacaError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class EmptyFieldError(ValidationError):
    """Raised when a required input field is missing or blank."""

    default_error_code = "empty_field"
    default_user_message = MESSAGE_EMPTY_FIELD


class InvalidDateTimeError(ValidationError):
    """Raised when the date or time cannot be parsed."""

    default_error_code = "invalid_date_time"
    default_user_message = MESSAGE_INVALID_DATE


class InvalidPlateError(ValidationError):
    """Raised when a license plate cannot be normalized."""

    default_error_code = "invalid_plate"
    default_user_message = MESSAGE_INVALID_PLATE


class PlateTooShortError(InvalidPlateError):
    """Raised when fewer than three plate characters remain after stripping."""

    default_error_code = "plate_too_short"


class InvalidPlateFormatError(InvalidPlateError):
    """Raised when the plate does not match the letters-digits layout."""

    default_error_code = "invalid_plate_format"


class ConfigError(PicoYPlacaError):
    """Raised when the restriction table is misconfigured."""

    error_type = "config"
    default_error_code = "config_error"
