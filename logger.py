import os
import sys
import inspect
import datetime
from pathlib import Path
from typing import TypedDict, Literal

LoggerSeverity = Literal["debug", "info", "warn", "error"]


class CallSite(TypedDict):
    function: str
    file: str
    line: str


DEFAULT_LOG_FILE = Path(__file__).resolve().parent / "logs" / "logs.log"

LEVELS = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
}

COLORS = {
    "debug": "\033[94m",
    "warn": "\033[33m",
    "error": "\033[31m",
    "reset": "\033[0m",
}


def get_timestamp() -> str:
    # UTC, millisecond precision
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.strftime("%Y-%m-%d-%H:%M:%S.%f")[:-3]


def get_log_file() -> Path:
    override = os.getenv("LOG_FILE")
    if override:
        return Path(override)
    return DEFAULT_LOG_FILE


def get_call_site() -> CallSite:
    # 0 = get_call_site, 1 = format_message, 2 = _log, 3 = Logger method, 4 = caller
    stack = inspect.stack()
    if len(stack) <= 4:
        return {
            "function": "<unknown>",
            "file": "<unknown>",
            "line": "<unknown>",
        }

    frame = stack[4]
    file_name = os.path.basename(frame.filename) if frame.filename else "<unknown>"

    return {
        "file": file_name,
        "function": frame.function or "<anonymous>",
        "line": str(frame.lineno) if frame.lineno else "<unknown>",
    }


def should_log(level: LoggerSeverity) -> bool:
    threshold = os.getenv("LOG_LEVEL", "debug").lower()
    return LEVELS.get(level, 0) >= LEVELS.get(threshold, 0)


def format_message(level: LoggerSeverity, message: str) -> str:
    timestamp = get_timestamp()
    verbosity = os.getenv("LOG_VERBOSITY", "detailed").lower()

    if verbosity == "simple":
        return f"[{timestamp}] {level.upper()}: {message}"

    site = get_call_site()
    return (
        f"[{timestamp}] {level.upper()} "
        f"[{site['function']}@{site['file']}:{site['line']}]: {message}"
    )


def _write_to_file(log_message: str) -> None:
    log_file = get_log_file()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message + "\n")
    except OSError as err:
        # Fall back to the console
        print(f"Failed to write log to file: {err}", file=sys.stderr)
        print(log_message, file=sys.stderr)


def _log(level: LoggerSeverity, message: str) -> None:
    if not should_log(level):
        return

    env = os.getenv("ENV", "development").lower()
    if env == "test":
        return

    log_message = format_message(level, message)

    if env == "development":
        stream = sys.stderr if level == "error" else sys.stdout
        if level in COLORS:
            print(COLORS[level] + log_message + COLORS["reset"], file=stream)
        else:
            print(log_message, file=stream)
    else:
        _write_to_file(log_message)


class Logger:
    @staticmethod
    def info(message: str) -> None:
        _log("info", message)

    @staticmethod
    def warn(message: str) -> None:
        _log("warn", message)

    @staticmethod
    def error(message: str) -> None:
        _log("error", message)

    @staticmethod
    def debug(message: str) -> None:
        _log("debug", message)


logger = Logger()
