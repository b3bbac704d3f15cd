"""Restriction evaluation."""

from __future__ import annotations

import logging
from datetime import datetime

from .const import (
    MESSAGE_CIRCULATE,
    MESSAGE_RESTRICTED,
    MESSAGE_UNEXPECTED,
    UNEXPECTED_ERROR_CODE,
)
from .exceptions import ValidationError
from .models import CheckResult, Outcome, Plate, RestrictionTable
from .rules.loader import load_restriction_table
from .util import (
    mask_license_plate,
    parse_license_plate,
    parse_query_datetime,
    plate_last_digit,
    weekday_index,
    window_contains,
)

_LOGGER = logging.getLogger(__name__)

_OUTCOME_MESSAGES = {
    Outcome.CIRCULATE: MESSAGE_CIRCULATE,
    Outcome.RESTRICTED: MESSAGE_RESTRICTED,
    Outcome.INVALID: MESSAGE_UNEXPECTED,
}


def evaluate_restriction(
    table: RestrictionTable,
    plate: Plate,
    last_digit: int,
    timestamp: datetime,
) -> Outcome:
    """Return whether ``plate`` may circulate at ``timestamp``.

    The vehicle is restricted when any window of an entry matching its last
    digit and the timestamp's weekday contains the timestamp.
    """
    if not isinstance(timestamp, datetime):
        return Outcome.INVALID
    if not isinstance(last_digit, int) or isinstance(last_digit, bool) or not 0 <= last_digit <= 9:
        return Outcome.INVALID
    weekday = weekday_index(timestamp)
    for restriction in table.matching(last_digit, weekday):
        for window in restriction.windows:
            if window_contains(window, timestamp):
                _LOGGER.debug(
                    "Plate %s restricted on weekday %s by window %s",
                    mask_license_plate(str(plate)),
                    weekday,
                    window,
                )
                return Outcome.RESTRICTED
    return Outcome.CIRCULATE


class RestrictionEngine:
    """Evaluates plates against a restriction table."""

    def __init__(self, table: RestrictionTable | None = None) -> None:
        self._table = table

    @property
    def table(self) -> RestrictionTable:
        """The configured table, or the packaged default loaded on first use."""
        if self._table is None:
            self._table = load_restriction_table()
        return self._table

    def evaluate(self, plate: Plate, last_digit: int, timestamp: datetime) -> Outcome:
        return evaluate_restriction(self.table, plate, last_digit, timestamp)

    def check(self, raw_plate: str, raw_date: str, raw_time: str) -> CheckResult:
        """Validate raw form values and evaluate them.

        Never raises: validation failures and unexpected errors both surface as
        an ``Outcome.INVALID`` result carrying the message to display.
        """
        masked = mask_license_plate(raw_plate)
        _LOGGER.debug("Restriction check started for plate %s", masked)
        try:
            timestamp = parse_query_datetime(raw_date, raw_time)
            plate = parse_license_plate(raw_plate)
            last_digit = plate_last_digit(raw_plate)
            outcome = self.evaluate(plate, last_digit, timestamp)
        except ValidationError as exc:
            _LOGGER.debug("Restriction check rejected for plate %s: %s", masked, exc.detail)
            return CheckResult(
                outcome=Outcome.INVALID,
                reason=exc.user_message or MESSAGE_UNEXPECTED,
                plate=None,
                error_code=exc.error_code,
            )
        except Exception:
            _LOGGER.exception("Could not check the traffic restriction of plate %s", masked)
            return CheckResult(
                outcome=Outcome.INVALID,
                reason=MESSAGE_UNEXPECTED,
                plate=None,
                error_code=UNEXPECTED_ERROR_CODE,
            )
        _LOGGER.debug("Restriction check completed for plate %s: %s", masked, outcome)
        return CheckResult(
            outcome=outcome,
            reason=_OUTCOME_MESSAGES[outcome],
            plate=str(plate),
        )


def check_restriction(raw_plate: str, raw_date: str, raw_time: str) -> CheckResult:
    """Check form values against the packaged restriction table."""
    return RestrictionEngine().check(raw_plate, raw_date, raw_time)
