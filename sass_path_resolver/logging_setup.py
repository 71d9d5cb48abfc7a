"""
Logging bootstrap for the CLI.

Installs a plain stderr handler on the ``sass_path_resolver`` logger and,
optionally, a JSONL sink that records one object per log record.
"""

import json
import logging
import sys
from datetime import UTC
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "sass_path_resolver"

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "logger": record.name,
                "event": getattr(record, "event", None),
                "message": record.getMessage(),
            }
            for key, value in record.__dict__.items():
                if key in _RESERVED_ATTRS:
                    continue
                payload.setdefault(key, value)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_logging(level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure the sass_path_resolver logger.

    Replaces handlers installed by a previous call.

    Args:
        level: Level name (DEBUG, INFO, ...)
        log_file: Optional JSONL file to append records to

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(stream_handler)

    if log_file:
        logger.addHandler(JsonlHandler(log_file))

    return logger
