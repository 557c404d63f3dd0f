"""
Dialect strategy registry.
"""

from __future__ import annotations

from typing import Callable

from ..errors import UnknownDialectError
from .base import (
    ISO8601_FORMAT,
    DateValue,
    Dialect,
    DialectCapabilities,
    ExpressionFallback,
    FormattedDate,
    Millis,
    StandardExpressionFallback,
    TrimMode,
    as_date_value,
)
from .couchbase import CouchbaseN1QLDialect, get_couchbase_dialect

DialectFactory = Callable[[], Dialect]

_REGISTRY: dict[str, DialectFactory] = {}


def register_dialect(name: str, factory: DialectFactory) -> None:
    key = name.strip().lower()
    if not key:
        raise ValueError("Dialect name must not be empty.")
    _REGISTRY[key] = factory


def get_dialect(name: str) -> Dialect:
    factory = _REGISTRY.get(name.strip().lower())
    if factory is None:
        available = ", ".join(available_dialects()) or "none"
        raise UnknownDialectError(f"No dialect registered as {name!r} (available: {available}).")
    return factory()


def available_dialects() -> list[str]:
    return sorted(_REGISTRY)


register_dialect(CouchbaseN1QLDialect.PLATFORM_NAME, get_couchbase_dialect)

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DateValue",
    "ExpressionFallback",
    "FormattedDate",
    "ISO8601_FORMAT",
    "Millis",
    "StandardExpressionFallback",
    "TrimMode",
    "as_date_value",
    "CouchbaseN1QLDialect",
    "available_dialects",
    "get_dialect",
    "register_dialect",
]
