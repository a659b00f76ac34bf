import calendar
from dataclasses import dataclass
from datetime import date

from .dates import year_in_range
from .errors import CalendarOverflowError, InvalidMonthError
from .weeks import to_iso_week


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A (year, month) pair. ``month`` is always within 1..12."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidMonthError(self.month)

    @classmethod
    def from_date(cls, d):
        return cls(d.year, d.month)

    @property
    def name(self):
        return calendar.month_name[self.month]

    def first_date(self):
        if not year_in_range(self.year):
            raise CalendarOverflowError("first day of month", str(self))
        return date(self.year, self.month, 1)

    def first_week(self):
        return to_iso_week(self.first_date())

    def contains_date(self, d):
        return d.year == self.year and d.month == self.month

    def contains_week(self, week):
        """True if the week's Monday or Sunday falls within this month.

        Weeks straddling a month boundary therefore belong to both months.
        """
        for endpoint in (week.first_date, week.last_date):
            try:
                if self.contains_date(endpoint()):
                    return True
            except CalendarOverflowError:
                continue
        return False

    def previous(self):
        if self.month == 1:
            return self._checked(self.year - 1, 12, "previous month")
        return CalendarMonth(self.year, self.month - 1)

    def next(self):
        if self.month == 12:
            return self._checked(self.year + 1, 1, "next month")
        return CalendarMonth(self.year, self.month + 1)

    def _checked(self, year, month, operation):
        if not year_in_range(year):
            raise CalendarOverflowError(operation, str(self))
        return CalendarMonth(year, month)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}"
