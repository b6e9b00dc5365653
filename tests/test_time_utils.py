from datetime import date

from sanger_rename.services.time_utils import shift_days, shift_months, today_local


def test_today_local_is_a_date() -> None:
    assert isinstance(today_local(), date)


def test_shift_days_crosses_month() -> None:
    assert shift_days(date(2025, 6, 30), 1) == date(2025, 7, 1)
    assert shift_days(date(2025, 6, 3), -7) == date(2025, 5, 27)


def test_shift_months_clamps_day() -> None:
    assert shift_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)


def test_shift_months_crosses_year() -> None:
    assert shift_months(date(2025, 12, 6), 1) == date(2026, 1, 6)
    assert shift_months(date(2025, 1, 6), -1) == date(2024, 12, 6)
