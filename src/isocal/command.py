"""Turn command-line arguments and environment defaults into a list of months."""

import os
from dataclasses import dataclass

from .errors import EnvParseError, InvalidMonthError
from .months import CalendarMonth
from .shared import ENV_DEFAULTS


@dataclass(frozen=True)
class MonthRange:
    center: CalendarMonth
    before: int
    after: int

    def months(self):
        start = self.center
        for _ in range(self.before):
            start = start.previous()

        months = [start]
        for _ in range(self.before + self.after):
            months.append(months[-1].next())
        return months


@dataclass(frozen=True)
class FullYear:
    year: int

    def months(self):
        return [CalendarMonth(self.year, month) for month in range(1, 13)]


def read_env_count(name, environ=None):
    if environ is None:
        environ = os.environ

    raw = environ.get(name)
    if raw is None:
        return ENV_DEFAULTS[name]
    try:
        value = int(raw.strip())
    except ValueError:
        raise EnvParseError(name, raw) from None
    if value < 0:
        raise EnvParseError(name, raw)
    return value


def resolve_command(
    year=None,
    month=None,
    before=None,
    after=None,
    count=None,
    today=None,
    environ=None,
    logger=None,
):
    if month is not None and year is None:
        raise AssertionError("a month was supplied without a year")

    if year is not None and month is None:
        if logger:
            logger.debug(f"Resolved full-year view for {year}.")
        return FullYear(year)

    if month is not None and not 1 <= month <= 12:
        raise InvalidMonthError(month)

    suffix = "ARGS" if year is not None else "NOARGS"
    if before is None:
        before = count
    if before is None:
        before = read_env_count(f"DATE_BEFORE_{suffix}", environ)
    if after is None:
        after = count
    if after is None:
        after = read_env_count(f"DATE_AFTER_{suffix}", environ)

    if year is not None:
        center = CalendarMonth(year, month)
    else:
        center = CalendarMonth.from_date(today)

    if logger:
        logger.debug(
            f"Resolved month range around {center}: {before} before, {after} after."
        )
    return MonthRange(center, before, after)
