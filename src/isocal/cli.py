import argparse
import sys
from datetime import datetime

from colorama import Fore, Style

from . import __version__
from .command import resolve_command
from .errors import CalendarError
from .layout import compose
from .render import render_month
from .shared import console, resolve_log_level, setup_logging


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="isocal",
        description="Display a multi-month calendar with ISO week numbers",
    )
    parser.add_argument("year", type=int, nargs="?", help="Year to display")
    parser.add_argument(
        "month", type=int, nargs="?", help="Month to center the view on (1-12)"
    )
    parser.add_argument(
        "-b", "--before", type=non_negative_int, help="Months to show before"
    )
    parser.add_argument(
        "-a", "--after", type=non_negative_int, help="Months to show after"
    )
    parser.add_argument(
        "-c",
        "--context",
        type=non_negative_int,
        help="Months to show both before and after",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Write trace output to the log"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_today():
    return datetime.now().date()


def render_calendar(months, today, logger):
    blocks = []
    for month in months:
        logger.trace(f"Rendering {month}.")
        blocks.append(render_month(month, today))
    return compose(blocks)


def main(argv=None):
    args = build_parser().parse_args(argv)

    logger = setup_logging(resolve_log_level(verbose=args.verbose))
    today = resolve_today()
    logger.info(f"--- isocal started, today is {today} ---")

    try:
        command = resolve_command(
            year=args.year,
            month=args.month,
            before=args.before,
            after=args.after,
            count=args.context,
            today=today,
            logger=logger,
        )
        lines = render_calendar(command.months(), today, logger)
    except CalendarError as e:
        logger.error(f"Could not render calendar: {e}")
        print(f"{Fore.RED}isocal: {e}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        console.print(line, soft_wrap=True)


if __name__ == "__main__":
    main()
