"""
Schema builder converting table metadata into dialect-specific DDL statements.
"""

from __future__ import annotations

from typing import List

from ..dialects.base import Dialect
from ..utils import get_logger
from .objects import Index, Table


class SchemaBuilder:
    """
    Produces dialect-specific statements for a table's indexes.
    """

    def __init__(self, dialect: Dialect, *, use_gsi: bool = False) -> None:
        self.dialect = dialect
        self.use_gsi = use_gsi
        self.logger = get_logger("schema.builder")

    def create_table_sql(self, table: Table) -> str:
        return self.dialect.create_table_sql(table)

    def create_index_statements(self, table: Table) -> List[str]:
        """
        Render CREATE statements for every index, primary index first.
        """

        return [self.dialect.create_index_sql(index, table) for index in self._ordered_indexes(table)]

    def create_index_sql(self, table: Table, index_name: str) -> str:
        return self.dialect.create_index_sql(table.get_index(index_name), table)

    def drop_index_statements(self, table: Table) -> List[str]:
        return [self._drop(index, table) for index in reversed(self._ordered_indexes(table))]

    def drop_index_sql(self, table: Table, index_name: str) -> str:
        return self._drop(table.get_index(index_name), table)

    def _drop(self, index: Index, table: Table) -> str:
        sql = self.dialect.drop_index_sql(index, table, use_gsi=self.use_gsi)
        self.logger.warning(
            "DROP INDEX generated for %s on %s; confirm destructive change before applying.",
            index.name,
            table.name,
        )
        return sql

    def _ordered_indexes(self, table: Table) -> List[Index]:
        primary = [index for index in table.indexes if index.primary]
        secondary = [index for index in table.indexes if not index.primary]
        return primary + secondary
