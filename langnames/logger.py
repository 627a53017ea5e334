# langnames/logger.py
"""
Diagnostic logger for langnames.
Provides:
 - Plain console messages on stderr, colored by level (not in CI or when not a TTY)
 - Optional rotating log files (info + JSON debug) when LANGNAMES_LOG_DIR is set
 - Child loggers per module (langnames.main, langnames.stream, ...)

stdout is reserved for the name tables, so nothing here ever writes to it.
"""

import logging
import logging.handlers
import os
import sys
import json
import time

# -------------------------------------------------------------------
# CONFIG
# -------------------------------------------------------------------

LOG_LEVEL = os.getenv("LANGNAMES_LOG_LEVEL", "WARNING")
LOG_DIR = os.getenv("LANGNAMES_LOG_DIR") or None

ENABLE_COLOR = os.getenv("CI", "false").lower() != "true"


# -------------------------------------------------------------------
# COLOR FORMATTING
# -------------------------------------------------------------------

COLOR = {
    "grey": "\x1b[38;21m",
    "yellow": "\x1b[33;21m",
    "red": "\x1b[31;21m",
    "cyan": "\x1b[36;21m",
    "green": "\x1b[32;21m",
    "reset": "\x1b[0m",
}


def colorize(level, message, enabled=True):
    if not enabled:
        return message
    if level >= logging.ERROR:
        return f"{COLOR['red']}{message}{COLOR['reset']}"
    elif level >= logging.WARNING:
        return f"{COLOR['yellow']}{message}{COLOR['reset']}"
    elif level >= logging.INFO:
        return f"{COLOR['green']}{message}{COLOR['reset']}"
    elif level >= logging.DEBUG:
        return f"{COLOR['cyan']}{message}{COLOR['reset']}"
    else:
        return f"{COLOR['grey']}{message}{COLOR['reset']}"


class ColorFormatter(logging.Formatter):
    """Bare message on the console, colored by level when stderr is a terminal."""
    def __init__(self, use_color=None):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        use_color = self.use_color
        if use_color is None:
            use_color = ENABLE_COLOR and sys.stderr.isatty()
        return colorize(record.levelno, record.getMessage(), use_color)


class StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time, like logging.lastResort."""
    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


class JsonFormatter(logging.Formatter):
    """Structured lines for the debug log file."""
    def format(self, record):
        payload = {
            "timestamp": record.created,
            "ts": time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.pathname,
            "line": record.lineno,
        }
        return json.dumps(payload, ensure_ascii=False)


# -------------------------------------------------------------------
# LOGGER FACTORY
# -------------------------------------------------------------------

def get_logger(name="langnames", level=None, log_dir=None):
    logger = logging.getLogger(name)

    # Avoid double-attaching handlers
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    # root handlers would print every line twice
    logger.propagate = False

    level = level or LOG_LEVEL
    log_dir = log_dir or LOG_DIR

    # ------------------------------
    # Console Handler (stderr)
    # ------------------------------
    ch = StderrHandler()
    ch.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    ch.setFormatter(ColorFormatter())
    logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        # ------------------------------
        # Info Rotating Log
        # ------------------------------
        ih = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "langnames_info.log"),
            maxBytes=10_000_000, backupCount=5, encoding="utf-8",
        )
        ih.setLevel(logging.INFO)
        ih.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s"))
        logger.addHandler(ih)

        # ------------------------------
        # Debug Rotating Log (JSON structured)
        # ------------------------------
        dh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "langnames_debug.log"),
            maxBytes=15_000_000, backupCount=5, encoding="utf-8",
        )
        dh.setLevel(logging.DEBUG)
        dh.setFormatter(JsonFormatter())
        logger.addHandler(dh)

    logger.debug("Logger initialized for '%s'", name)
    return logger


def event(logger, name, **data):
    """Machine-parsable event."""
    logger.debug("EVENT %s | %s", name, json.dumps(data, ensure_ascii=False))
