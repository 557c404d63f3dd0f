"""
Schema objects and DDL builder.
"""

from .builder import SchemaBuilder
from .objects import Column, ForeignKeyConstraint, Identifier, Index, Table, UniqueConstraint

__all__ = [
    "SchemaBuilder",
    "Column",
    "ForeignKeyConstraint",
    "Identifier",
    "Index",
    "Table",
    "UniqueConstraint",
]
