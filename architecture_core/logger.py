"""
Structured logging setup for the Architecture Advisor.

Every record is written as one JSON object per line. Keyword arguments given to
the module-level helpers end up under the "context" key, e.g.

    info("Compared architecture patterns", pattern_ids=["a", "b"], best_pattern="b")
"""

import json
import logging
from typing import Any, Dict, Optional

from architecture_core import config

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset([
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "id", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread", "threadName",
    "taskName",
])


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        )

        # Context values such as sets or enums fall back to str()
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger, attaching the JSON handler on first use.

    The level comes from config.LOG_LEVEL (DEBUG=true forces DEBUG).
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# Shared logger behind the helpers below
logger = get_logger("architecture_advisor")


def _context_extra(context: Optional[Dict[str, Any]], fields: Dict[str, Any]) -> Dict[str, Any]:
    if context:
        fields.update(context)
    return {"context": fields} if fields else {}


def log_with_context(
    level: int,
    msg: str,
    context: Optional[Dict[str, Any]] = None,
    **kwargs: Any
) -> None:
    """
    Log `msg` at `level` with structured context.

    Args:
        level: A logging level such as logging.INFO
        msg: The log message
        context: Context values as a dict
        **kwargs: Context values as keyword arguments; `context` wins on clashes
    """
    logger.log(level, msg, extra=_context_extra(context, kwargs))


def info(msg: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
    log_with_context(logging.INFO, msg, context, **kwargs)


def warning(msg: str, context: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
    log_with_context(logging.WARNING, msg, context, **kwargs)


def exception(
    msg: str,
    exc: Optional[BaseException] = None,
    context: Optional[Dict[str, Any]] = None,
    **kwargs: Any
) -> None:
    """
    Log an error together with the exception that caused it.

    The exception's type and message are added to the context and its
    traceback is rendered under "exception".
    """
    if exc is not None:
        kwargs["exception_type"] = type(exc).__name__
        kwargs["exception_message"] = str(exc)

    logger.error(msg, exc_info=exc, extra=_context_extra(context, kwargs))
