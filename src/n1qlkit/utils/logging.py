"""Structured logging helpers for n1qlkit."""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Optional

LOG_LEVEL_ENV_VAR = "N1QLKIT_LOG_LEVEL"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def resolve_log_level(default: int = logging.INFO) -> int:
    value = os.getenv(LOG_LEVEL_ENV_VAR)
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


def configure_logging(level: int | None = None) -> None:
    logger = logging.getLogger("n1qlkit")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else resolve_log_level())


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"n1qlkit.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid
