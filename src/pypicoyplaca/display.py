"""Display metadata for check results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .models import CheckResult, Outcome


class Severity(StrEnum):
    VALID = "valid-message"
    WARNING = "warning-message"
    ERROR = "error-message"


@dataclass(frozen=True, slots=True)
class DisplayInfo:
    message: str
    severity: Severity
    color: str


SEVERITY_COLORS = {
    Severity.VALID: "#00701a",
    Severity.WARNING: "#e69500",
    Severity.ERROR: "#e60000",
}

_OUTCOME_SEVERITY = {
    Outcome.CIRCULATE: Severity.VALID,
    Outcome.RESTRICTED: Severity.WARNING,
    Outcome.INVALID: Severity.ERROR,
}


def describe(result: CheckResult) -> DisplayInfo:
    severity = _OUTCOME_SEVERITY[result.outcome]
    return DisplayInfo(message=result.reason, severity=severity, color=SEVERITY_COLORS[severity])
