"""
Logging setup for the Golf wager engine.

Engine modules log through `logging.getLogger(__name__)` and never
configure handlers themselves; the embedding application calls
`setup_logging()` once.

Match context reaches log lines two ways:
    - `match_context(match_id=..., user_id=...)` sets ContextVars for the
      duration of a block (build_match_report uses it, so every format
      engine's debug line carries the match id)
    - `extra={...}` on a single call, or a ContextLogger built with
      `get_logger(__name__).with_context(...)`

Production output is one JSON object per line; development output is a
colored single line with the context in brackets.
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional

from config import config

match_id_var: ContextVar[Optional[str]] = ContextVar("match_id", default=None)
user_id_var: ContextVar[Optional[str]] = ContextVar("user_id", default=None)

# Record attributes copied into the output when present, in output order
CONTEXT_FIELDS = ("match_id", "user_id", "match_format")


@contextmanager
def match_context(match_id: Optional[str] = None, user_id: Optional[str] = None) -> Iterator[None]:
    """Tag every log line emitted inside the block with a match / user."""
    tokens = []
    if match_id is not None:
        tokens.append((match_id_var, match_id_var.set(match_id)))
    if user_id is not None:
        tokens.append((user_id_var, user_id_var.set(user_id)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def context_fields(record: logging.LogRecord) -> dict[str, str]:
    """
    Collect match context for a record.

    Values passed with `extra=` win over the ContextVars.
    """
    fields = {
        "match_id": match_id_var.get(),
        "user_id": user_id_var.get(),
    }
    for name in CONTEXT_FIELDS:
        value = getattr(record, name, None)
        if value:
            fields[name] = value
    return {name: fields[name] for name in CONTEXT_FIELDS if fields.get(name)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **context_fields(record),
        }

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable single line with level colors and match context."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    # Ids are shortened to keep lines readable
    ID_WIDTH = 8
    LABELS = {"match_id": "match", "user_id": "user", "match_format": "format"}

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]

        parts = []
        for name, value in context_fields(record).items():
            if name != "match_format":
                value = str(value)[:self.ID_WIDTH]
            parts.append(f"{self.LABELS[name]}={value}")
        context = f" [{', '.join(parts)}]" if parts else ""

        output = f"{timestamp} {color}{record.levelname:8}{reset} {record.name}{context} - {record.getMessage()}"
        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)
        return output


def setup_logging(level: Optional[str] = None, environment: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to config.LOG_LEVEL.
        environment: "production" selects JSON output; defaults to
            config.ENVIRONMENT.
    """
    level = level or config.LOG_LEVEL
    environment = environment or config.ENVIRONMENT

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if environment == "production" else DevelopmentFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, environment={environment}")


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter carrying fixed match context.

    Usage:
        log = get_logger(__name__).with_context(match_id=match.id)
        log.debug("Classified match")
    """

    def __init__(self, logger: logging.Logger, extra: Optional[dict] = None):
        super().__init__(logger, extra or {})

    def with_context(self, **kwargs) -> "ContextLogger":
        return ContextLogger(self.logger, {**self.extra, **kwargs})

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    return ContextLogger(logging.getLogger(name))
