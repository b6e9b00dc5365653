from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def today_local() -> date:
    return datetime.now().astimezone().date()


def shift_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def shift_months(day: date, months: int) -> date:
    """Move by whole calendar months, clamping the day to the target month."""

    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))
