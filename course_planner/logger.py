import os
import sys
import inspect
import datetime
from functools import partialmethod
from pathlib import Path
from typing import Literal, NamedTuple

LoggerSeverity = Literal["debug", "info", "warn", "error"]


class Level(NamedTuple):
    rank: int
    color: str


LEVELS = {
    "debug": Level(0, "\033[94m"),
    "info": Level(1, ""),
    "warn": Level(2, "\033[33m"),
    "error": Level(3, "\033[31m"),
}
RESET = "\033[0m"

DEFAULT_LOG_FILE = Path("logs") / "course_planner.log"


def get_timestamp() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="milliseconds")


def caller_location() -> str:
    """function@file:line of the first frame outside this module."""
    frame = inspect.currentframe()
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return "<unknown>"
    filename = os.path.basename(frame.f_code.co_filename)
    return f"{frame.f_code.co_name}@{filename}:{frame.f_lineno}"


def should_log(level: LoggerSeverity) -> bool:
    threshold = LEVELS.get(os.getenv("LOG_LEVEL", "info").lower(), LEVELS["info"])
    return LEVELS[level].rank >= threshold.rank


def format_message(level: LoggerSeverity, message: str) -> str:
    prefix = f"[{get_timestamp()}] {level.upper()}"
    if os.getenv("LOG_VERBOSITY", "detailed").lower() == "detailed":
        prefix += f" [{caller_location()}]"
    return f"{prefix}: {message}"


def append_to_file(line: str) -> None:
    log_path = Path(os.getenv("LOG_FILE") or DEFAULT_LOG_FILE)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as err:
        print(f"Failed to write log to {log_path}: {err}", file=sys.stderr)
        print(line, file=sys.stderr)


class Logger:
    """Console logger in development, file logger elsewhere, silent under ENV=test.

    Console output goes to stderr; stdout belongs to the menu.
    """

    def log(self, level: LoggerSeverity, message: str) -> None:
        env = os.getenv("ENV", "development").lower()
        if env == "test" or not should_log(level):
            return

        line = format_message(level, message)
        if env != "development":
            append_to_file(line)
            return

        color = LEVELS[level].color
        print(f"{color}{line}{RESET}" if color else line, file=sys.stderr)

    debug = partialmethod(log, "debug")
    info = partialmethod(log, "info")
    warn = partialmethod(log, "warn")
    error = partialmethod(log, "error")


logger = Logger()
