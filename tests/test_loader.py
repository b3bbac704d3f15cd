import pytest

from pypicoyplaca.exceptions import ConfigError
from pypicoyplaca.models import ClockTime, TimeWindow
from pypicoyplaca.rules import loader as loader_module

MORNING = TimeWindow(ClockTime(7, 0), ClockTime(9, 30))
AFTERNOON = TimeWindow(ClockTime(16, 0), ClockTime(19, 30))


def test_default_table_covers_every_digit_once() -> None:
    loader_module.clear_restriction_table_cache()
    table = loader_module.load_restriction_table()
    digits = sorted(restriction.digit for restriction in table.restrictions)
    assert digits == list(range(10))
    for restriction in table.restrictions:
        assert restriction.windows == (MORNING, AFTERNOON)


def test_default_table_weekday_rotation() -> None:
    table = loader_module.load_restriction_table()
    rotation = {0: [], 1: [1, 2], 2: [3, 4], 3: [5, 6], 4: [7, 8], 5: [0, 9], 6: []}
    for weekday, expected in rotation.items():
        digits = [digit for digit in range(10) if table.matching(digit, weekday)]
        assert digits == expected


def test_load_restriction_table_uses_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_restriction_table_cache()
    calls = {"count": 0}
    original = loader_module.load_restrictions_data

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "load_restrictions_data", wrapped)

    first = loader_module.load_restriction_table()
    second = loader_module.load_restriction_table()

    assert calls["count"] == 1
    assert first is second


def test_clear_restriction_table_cache_forces_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_restriction_table_cache()
    calls = {"count": 0}
    original = loader_module.load_restrictions_data

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "load_restrictions_data", wrapped)

    loader_module.load_restriction_table()
    loader_module.clear_restriction_table_cache()
    loader_module.load_restriction_table()

    assert calls["count"] == 2


def test_build_restriction_table_with_per_digit_windows() -> None:
    table = loader_module.build_restriction_table(
        {
            "windows": {
                "morning": {"start": "07:00", "end": "09:30"},
                "evening": {"start": "18:00", "end": "21:00"},
            },
            "restrictions": [
                {"digit": 1, "weekday": 1, "windows": ["morning"]},
                {"digit": 2, "weekday": 1, "windows": ["morning", "evening"]},
            ],
        }
    )
    assert table.matching(1, 1)[0].windows == (MORNING,)
    assert table.matching(2, 1)[0].windows[1] == TimeWindow(ClockTime(18, 0), ClockTime(21, 0))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"restrictions": [{"digit": 1, "weekday": 1, "windows": ["a"]}]},
        {"windows": {"a": {"start": "07:00", "end": "09:00"}}, "restrictions": []},
        {
            "windows": {"a": {"start": "07:00"}},
            "restrictions": [{"digit": 1, "weekday": 1, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "late"}},
            "restrictions": [{"digit": 1, "weekday": 1, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "09:00", "end": "07:00"}},
            "restrictions": [{"digit": 1, "weekday": 1, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "09:00"}},
            "restrictions": [{"digit": 1, "weekday": 1, "windows": ["b"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "09:00"}},
            "restrictions": [{"digit": "1", "weekday": 1, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "09:00"}},
            "restrictions": [{"digit": 1, "weekday": True, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "09:00"}},
            "restrictions": [{"digit": 1, "weekday": 9, "windows": ["a"]}],
        },
        {
            "windows": {"a": {"start": "07:00", "end": "09:00"}},
            "restrictions": [{"digit": 1, "windows": ["a"]}],
        },
    ],
)
def test_build_restriction_table_rejects_bad_config(data) -> None:
    with pytest.raises(ConfigError):
        loader_module.build_restriction_table(data)


def test_load_restrictions_data_invalid_json(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    (tmp_path / "restrictions.json").write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(loader_module, "_rules_root", lambda: tmp_path)
    with pytest.raises(ConfigError):
        loader_module.load_restrictions_data()


def test_load_restrictions_data_missing_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setattr(loader_module, "_rules_root", lambda: tmp_path)
    with pytest.raises(ConfigError):
        loader_module.load_restrictions_data()
