import logging
import os
import sys

from colorama import Fore, Style, just_fix_windows_console
from rich.console import Console

just_fix_windows_console()

BLOCK_HEIGHT = 8
BLOCK_WIDTH = 24
BLANK_LINE = " " * BLOCK_WIDTH
WEEKDAY_HEADER = "    Mo Tu We Th Fr Sa Su"
SEPARATOR = "    "
MONTHS_PER_ROW = 3

# before/after window sizes, keyed by whether positional args were given
ENV_DEFAULTS = {
    "DATE_BEFORE_NOARGS": 1,
    "DATE_AFTER_NOARGS": 4,
    "DATE_BEFORE_ARGS": 4,
    "DATE_AFTER_ARGS": 4,
}

STYLES = {
    "week_number": "dim",
    "outside": "dim italic",
    "today": "bold red",
}

TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class MyLogger(logging.Logger):
    def trace(self, message, *args, **kws):
        if self.isEnabledFor(TRACE_LEVEL_NUM):
            self._log(TRACE_LEVEL_NUM, message, args, **kws)


logging.setLoggerClass(MyLogger)

console = Console(highlight=False)


def resolve_log_level(environ=None, verbose=False):
    if verbose:
        return TRACE_LEVEL_NUM
    if environ is None:
        environ = os.environ

    name = environ.get("ISOCAL_LOG_LEVEL", "INFO").strip().upper()
    if name == "TRACE":
        return TRACE_LEVEL_NUM
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level, log_filename="isocal.log"):
    cache_dir = os.environ.get("XDG_CACHE_HOME", os.path.expanduser("~/.cache"))
    log_dir = os.path.join(cache_dir, "isocal")
    log_file_path = os.path.join(log_dir, log_filename)

    logger = logging.getLogger("isocal")
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(log_file_path)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    except OSError as e:
        print(
            f"{Fore.YELLOW}Failed to configure logging to '{log_file_path}': {e}{Style.RESET_ALL}",
            file=sys.stderr,
        )
        logger.addHandler(logging.NullHandler())

    return logger
