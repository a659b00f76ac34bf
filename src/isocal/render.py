from rich.text import Text

from .shared import BLANK_LINE, BLOCK_HEIGHT, STYLES, WEEKDAY_HEADER


def render_title(month):
    return Text(f"   {month.name:^21}")


def render_week(month, week, today):
    line = Text()
    line.append(f"{week.week:>2} ", style=STYLES["week_number"])

    for day in week.weekdays():
        field = f"{day.day:>3}"
        if not month.contains_date(day):
            line.append(field, style=STYLES["outside"])
        elif day == today:
            line.append(field, style=STYLES["today"])
        else:
            line.append(field)
    return line


def render_month(month, today):
    """Render ``month`` as a block of exactly BLOCK_HEIGHT lines.

    Weeks that do not exist for the month leave blank filler rows so that
    blocks placed side by side stay aligned.
    """
    block = [Text(BLANK_LINE) for _ in range(BLOCK_HEIGHT)]
    block[0] = render_title(month)
    block[1] = Text(WEEKDAY_HEADER)

    week = month.first_week()
    pos = 2
    while month.contains_week(week):
        block[pos] = render_week(month, week, today)
        week = week.next_week()
        pos += 1

    return tuple(block)
