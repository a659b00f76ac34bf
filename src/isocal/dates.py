"""Checked arithmetic on ``datetime.date``.

Python's date range is 0001-01-01 through 9999-12-31. Every helper here
raises ``CalendarOverflowError`` when a result would leave that range instead
of letting ``OverflowError``/``ValueError`` escape from the stdlib.
"""

from datetime import MAXYEAR, MINYEAR, date, timedelta

from .errors import CalendarOverflowError


def year_in_range(year):
    return MINYEAR <= year <= MAXYEAR


def add_days(d, n):
    try:
        return d + timedelta(days=n)
    except OverflowError:
        raise CalendarOverflowError(f"adding {n} day(s)", d.isoformat()) from None


def add_weeks(d, n):
    try:
        return d + timedelta(weeks=n)
    except OverflowError:
        raise CalendarOverflowError(f"adding {n} week(s)", d.isoformat()) from None


def next_day(d):
    if d == date.max:
        raise CalendarOverflowError("next day", d.isoformat())
    return d + timedelta(days=1)


def weeks_in_iso_year(iso_year):
    if not year_in_range(iso_year):
        raise CalendarOverflowError("counting ISO weeks", f"year {iso_year}")
    # 28 December always falls in the last ISO week of its year
    return date(iso_year, 12, 28).isocalendar()[1]


def from_iso_week_weekday(iso_year, week, weekday):
    """Return the date of ``weekday`` (1=Mon..7=Sun) in ISO week ``(iso_year, week)``."""
    if not 1 <= weekday <= 7:
        raise ValueError(f"invalid ISO weekday {weekday}, expected 1..7")
    if not year_in_range(iso_year):
        raise CalendarOverflowError(
            "resolving ISO week", f"{iso_year}-W{week:02d}-{weekday}"
        )
    if not 1 <= week <= weeks_in_iso_year(iso_year):
        raise ValueError(f"ISO year {iso_year} has no week {week}")

    jan4 = date(iso_year, 1, 4)
    week1_monday = jan4 - timedelta(days=jan4.isoweekday() - 1)
    try:
        return week1_monday + timedelta(weeks=week - 1, days=weekday - 1)
    except OverflowError:
        raise CalendarOverflowError(
            "resolving ISO week", f"{iso_year}-W{week:02d}-{weekday}"
        ) from None
