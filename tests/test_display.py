from pypicoyplaca.display import DisplayInfo, Severity, describe
from pypicoyplaca.engine import check_restriction
from pypicoyplaca.models import CheckResult, Outcome


def test_describe_circulate() -> None:
    info = describe(check_restriction("ABC-1234", "2024-06-03", "08:00"))
    assert info == DisplayInfo(
        message="Yes. You can drive your car.",
        severity=Severity.VALID,
        color="#00701a",
    )


def test_describe_restricted() -> None:
    info = describe(check_restriction("ABC-1231", "2024-06-03", "08:00"))
    assert info.severity is Severity.WARNING
    assert info.color == "#e69500"


def test_describe_invalid() -> None:
    info = describe(CheckResult(Outcome.INVALID, "Please enter a valid license plate."))
    assert info.severity is Severity.ERROR
    assert info.color == "#e60000"
    assert info.message == "Please enter a valid license plate."
    assert str(Severity.ERROR) == "error-message"
