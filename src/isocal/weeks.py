from dataclasses import dataclass

from .dates import add_weeks, from_iso_week_weekday, next_day


@dataclass(frozen=True, order=True)
class ISOWeek:
    iso_year: int
    week: int

    @classmethod
    def from_date(cls, d):
        iso_year, week, _ = d.isocalendar()
        return cls(iso_year, week)

    def first_date(self):
        return from_iso_week_weekday(self.iso_year, self.week, 1)

    def last_date(self):
        return from_iso_week_weekday(self.iso_year, self.week, 7)

    def next_week(self):
        # ISO years have 52 or 53 weeks, so step through a real date
        return to_iso_week(add_weeks(self.first_date(), 1))

    def weekdays(self):
        days = [self.first_date()]
        while len(days) < 7:
            days.append(next_day(days[-1]))
        return tuple(days)

    def __str__(self):
        return f"{self.iso_year:04d}-W{self.week:02d}"


def to_iso_week(d):
    return ISOWeek.from_date(d)
