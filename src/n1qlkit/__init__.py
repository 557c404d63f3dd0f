"""
n1qlkit public package initialization.

Translates database-agnostic schema and expression requests into Couchbase
N1QL text through the dialect registry.
"""

from .config import DialectConfig  # noqa: F401
from .dialects import (
    CouchbaseN1QLDialect,
    Dialect,
    DialectCapabilities,
    FormattedDate,
    Millis,
    TrimMode,
    available_dialects,
    get_dialect,
    register_dialect,
)  # noqa: F401
from .errors import (
    ConfigurationError,
    DialectError,
    InvalidArgumentError,
    UnknownDialectError,
    UnsupportedArgumentError,
    UnsupportedOperationError,
)  # noqa: F401
from .schema import Column, ForeignKeyConstraint, Index, SchemaBuilder, Table, UniqueConstraint  # noqa: F401

__all__ = [
    "CouchbaseN1QLDialect",
    "Dialect",
    "DialectCapabilities",
    "DialectConfig",
    "FormattedDate",
    "Millis",
    "TrimMode",
    "available_dialects",
    "get_dialect",
    "register_dialect",
    "Column",
    "ForeignKeyConstraint",
    "Index",
    "SchemaBuilder",
    "Table",
    "UniqueConstraint",
    "ConfigurationError",
    "DialectError",
    "InvalidArgumentError",
    "UnknownDialectError",
    "UnsupportedArgumentError",
    "UnsupportedOperationError",
]
