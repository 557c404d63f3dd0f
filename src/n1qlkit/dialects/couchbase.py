"""
Couchbase N1QL dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final, Mapping, Sequence

from ..errors import InvalidArgumentError, UnsupportedArgumentError, UnsupportedOperationError
from ..schema.objects import Column, ForeignKeyConstraint, Index, Table, UniqueConstraint
from ..utils import get_logger
from .base import (
    ISO8601_FORMAT,
    Dialect,
    DialectCapabilities,
    ExpressionFallback,
    Millis,
    StandardExpressionFallback,
    TrimMode,
    as_date_value,
)

DATE_PARTS: Final[frozenset[str]] = frozenset(
    {
        "millennium",
        "century",
        "decade",
        "year",
        "quarter",
        "month",
        "week",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
    }
)

_NOW_FUNCTIONS: Final[dict[str | None, str]] = {
    "timestamp": "NOW_TZ()",
    "local": "NOW_LOCAL()",
    "millis": "NOW_MILLIS()",
}

_TRIM_FUNCTIONS: Final[dict[TrimMode, str]] = {
    TrimMode.LEADING: "LTRIM",
    TrimMode.TRAILING: "RTRIM",
}


class CouchbaseN1QLDialect:
    """
    Dialect for the Couchbase N1QL query language.

    Couchbase is schemaless at the column level and has no transactional or
    locking surface, so most structural DDL raises
    :class:`~n1qlkit.errors.UnsupportedOperationError`. Secondary and partial
    indexes are the only schema objects it can render.
    """

    PLATFORM_NAME: Final[str] = "couchbase-n1ql"

    name: Final[str] = PLATFORM_NAME
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_partial_indexes=True,
        supports_alter_table=False,
        supports_transactions=False,
        supports_savepoints=False,
        supports_release_savepoints=False,
        supports_primary_constraints=False,
        supports_foreign_key_constraints=False,
        supports_foreign_key_on_update=False,
        supports_inline_column_comments=False,
        supports_create_drop_database=False,
        supports_getting_affected_rows=False,
    )

    def __init__(self, fallback: ExpressionFallback | None = None) -> None:
        self.fallback: ExpressionFallback = fallback or StandardExpressionFallback()
        self.logger = get_logger("dialects.couchbase")

    def _not_supported(self, operation: str, detail: str | None = None) -> UnsupportedOperationError:
        self.logger.debug("Rejected %s for %s", operation, self.name)
        return UnsupportedOperationError(operation, platform=self.name, detail=detail)

    # ------------------------------------------------------------------ #
    # Identifiers and comments
    # ------------------------------------------------------------------ #
    def identifier_quote_character(self) -> str:
        return "`"

    def quote_single_identifier(self, identifier: str) -> str:
        quote = self.identifier_quote_character()
        escaped = identifier.replace(quote, quote + quote)
        return f"{quote}{escaped}{quote}"

    def quote_identifier(self, identifier: str) -> str:
        return self.quote_single_identifier(identifier)

    def format_table(self, table_name: str) -> str:
        return ".".join(self.quote_single_identifier(part) for part in table_name.split("."))

    def sql_comment_start_string(self) -> str:
        return "/* "

    def sql_comment_end_string(self) -> str:
        return " */"

    def inline_comment(self, text: str) -> str:
        return f"{self.sql_comment_start_string()}{text}{self.sql_comment_end_string()}"

    # ------------------------------------------------------------------ #
    # Scalar expressions
    # ------------------------------------------------------------------ #
    def regexp_expression(self, expression: str, pattern: str) -> str:
        return f"REGEXP_CONTAINS({expression}, {pattern})"

    def guid_expression(self) -> str:
        return "UUID()"

    def md5_expression(self, column: str) -> str:
        raise self._not_supported("md5_expression")

    def mod_expression(self, expression1: str, expression2: str) -> str:
        raise self._not_supported("mod_expression")

    def trim_expression(
        self,
        value: str,
        mode: TrimMode = TrimMode.UNSPECIFIED,
        char: str | None = None,
    ) -> str:
        trim_char = f", {char}" if char is not None else ""
        function = _TRIM_FUNCTIONS.get(mode, "TRIM")
        return f"{function}({value}, {trim_char})"

    def locate_expression(self, value: str, substring: str, start_pos: int | None = None) -> str:
        # POSITION() always searches from the first character.
        if start_pos is not None:
            self.logger.debug("Rejected locate_expression start_pos=%r for %s", start_pos, self.name)
            raise UnsupportedArgumentError("locate_expression", "start_pos", platform=self.name)
        return f"POSITION({value}, {substring})"

    def now_expression(self, kind: str | None = "timestamp") -> str:
        return _NOW_FUNCTIONS.get(kind, "NOW_UTC()")

    def substring_expression(
        self,
        value: str,
        start: str | int,
        length: str | int | None = None,
    ) -> str:
        if length is None:
            return f"SUBSTR({value}, {start})"
        return f"SUBSTR({value}, {start}, {length})"

    def not_expression(self, expression: str) -> str:
        raise self._not_supported("not_expression")

    def date_diff_expression(self, date1: Any, date2: Any) -> str:
        return self.fallback.date_diff_expression(as_date_value(date1), as_date_value(date2))

    def date_arithmetic_interval_expression(
        self,
        date: Any,
        operator: str,
        interval: int | str,
        unit: str,
    ) -> str:
        """
        Render a date shifted by ``interval`` units.

        The fragment starts with a comma and has the form
        ``,DATE_ADD_MILLIS(<millis>,<n><unit>)`` or
        ``,DATE_ADD_STR("<date>",<n><unit>)``; callers splice it after a
        preceding argument.
        """

        value = as_date_value(date)
        if isinstance(value, Millis):
            call = f"DATE_ADD_MILLIS({value}"
        else:
            call = f'DATE_ADD_STR("{value}"'

        if operator == "-":
            call += f",-{interval}"
        else:
            call += f",{interval}"

        return f",{call}{unit.lower()})"

    def date_add_interval_expression(self, date: Any, interval: int | str, unit: str) -> str:
        return self.date_arithmetic_interval_expression(
            date, "+", interval, self._date_part(unit, "date_add_interval_expression")
        )

    def date_sub_interval_expression(self, date: Any, interval: int | str, unit: str) -> str:
        return self.date_arithmetic_interval_expression(
            date, "-", interval, self._date_part(unit, "date_sub_interval_expression")
        )

    def _date_part(self, unit: str, operation: str) -> str:
        part = unit.lower()
        if part not in DATE_PARTS:
            raise InvalidArgumentError(
                f"Unknown date part {unit!r}; expected one of {', '.join(sorted(DATE_PARTS))}.",
                operation=operation,
            )
        return part

    def bit_and_comparison_expression(self, value1: str, value2: str) -> str:
        return f"BITAND({value1}, {value2})"

    def bit_or_comparison_expression(self, value1: str, value2: str) -> str:
        return f"BITOR({value1}, {value2})"

    def is_missing_expression(self, expression: str) -> str:
        return f"{expression} IS MISSING"

    def is_not_missing_expression(self, expression: str) -> str:
        return f"{expression} IS NOT MISSING"

    def is_null_expression(self, expression: str) -> str:
        return f"{expression} IS NULL"

    def is_not_null_expression(self, expression: str) -> str:
        return f"{expression} IS NOT NULL"

    def between_expression(self, expression: str, lower: str, upper: str) -> str:
        return f"{expression} BETWEEN {lower} AND {upper}"

    def in_expression(self, expression: str, values: Sequence[str]) -> str:
        if not values:
            raise InvalidArgumentError("IN requires at least one value.", operation="in_expression")
        return f"{expression} IN [{', '.join(str(value) for value in values)}]"

    def length_expression(self, expression: str) -> str:
        return f"LENGTH({expression})"

    def lower_expression(self, expression: str) -> str:
        return f"LOWER({expression})"

    def upper_expression(self, expression: str) -> str:
        return f"UPPER({expression})"

    def concat_expression(self, *parts: str) -> str:
        if not parts:
            raise InvalidArgumentError("CONCAT requires at least one part.", operation="concat_expression")
        return " || ".join(parts)

    def count_expression(self, expression: str) -> str:
        return f"COUNT({expression})"

    def sum_expression(self, expression: str) -> str:
        return f"SUM({expression})"

    def avg_expression(self, expression: str) -> str:
        return f"AVG({expression})"

    def min_expression(self, expression: str) -> str:
        return f"MIN({expression})"

    def max_expression(self, expression: str) -> str:
        return f"MAX({expression})"

    # ------------------------------------------------------------------ #
    # Type declarations
    # ------------------------------------------------------------------ #
    def boolean_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("boolean_type_declaration_sql")

    def integer_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("integer_type_declaration_sql")

    def bigint_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("bigint_type_declaration_sql")

    def smallint_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("smallint_type_declaration_sql")

    def common_integer_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("common_integer_type_declaration_sql")

    def clob_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("clob_type_declaration_sql")

    def blob_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("blob_type_declaration_sql")

    def decimal_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("decimal_type_declaration_sql")

    def varchar_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("varchar_type_declaration_sql")

    def binary_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("binary_type_declaration_sql")

    def guid_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("guid_type_declaration_sql")

    def json_type_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("json_type_declaration_sql")

    def default_value_declaration_sql(self, field: Mapping[str, Any]) -> str:
        raise self._not_supported("default_value_declaration_sql")

    def check_declaration_sql(self, definition: Mapping[str, Any]) -> str:
        raise self._not_supported("check_declaration_sql")

    def unique_constraint_declaration_sql(self, name: str, index: Index) -> str:
        raise self._not_supported("unique_constraint_declaration_sql")

    # ------------------------------------------------------------------ #
    # Index DDL
    # ------------------------------------------------------------------ #
    def _table_name(self, table: Table | str | None) -> str:
        if isinstance(table, Table):
            return table.quoted_name(self)
        if table is None:
            return ""
        return str(table)

    def create_index_sql(self, index: Index, table: Table | str) -> str:
        table_name = self._table_name(table)
        if not table_name:
            raise InvalidArgumentError(
                f"A bucket name is required to create an index on {self.name}.",
                operation="create_index_sql",
            )
        name = index.quoted_name(self)
        columns = index.quoted_columns(self)

        # GSI has no uniqueness constraint.
        if index.unique:
            self.logger.debug("Rejected create_index_sql unique=True for %s", self.name)
            raise UnsupportedArgumentError("create_index_sql", "unique", platform=self.name)

        if index.primary:
            if columns:
                raise InvalidArgumentError(
                    f"Cannot specify columns to create primary index {name}.",
                    operation="create_index_sql",
                )
            return f"CREATE PRIMARY INDEX {name} ON {table_name}"

        if not columns:
            raise InvalidArgumentError(
                f"Incomplete definition for index {name}: 'columns' required.",
                operation="create_index_sql",
            )

        return (
            f"CREATE INDEX {name} ON {table_name} "
            f"({self.index_field_declaration_list_sql(columns)}){self.partial_index_sql(index)}"
        )

    def create_index_sql_flags(self, index: Index) -> str:
        # TODO: render WITH {"defer_build": ...} and USING GSI/VIEW once Index carries options.
        raise self._not_supported("create_index_sql_flags")

    def index_field_declaration_list_sql(self, columns: Sequence[str]) -> str:
        return ", ".join(columns)

    def partial_index_sql(self, index: Index) -> str:
        if self.supports_partial_indexes() and index.where:
            return f" WHERE {index.where}"
        return ""

    def drop_index_sql(
        self,
        index: Index | str,
        table: Table | str | None = None,
        *,
        use_gsi: bool = False,
    ) -> str:
        table_name = self._table_name(table)
        if not table_name:
            raise InvalidArgumentError(
                f"A bucket name is required to drop an index on {self.name}.",
                operation="drop_index_sql",
            )
        index_name = index.quoted_name(self) if isinstance(index, Index) else str(index)
        sql = f"DROP INDEX {table_name}.{index_name}"
        if use_gsi:
            sql += " USING GSI"
        return sql

    # ------------------------------------------------------------------ #
    # Unsupported DDL and locking
    # ------------------------------------------------------------------ #
    def create_table_sql(self, table: Table) -> str:
        raise self._not_supported("create_table_sql")

    def drop_table_sql(self, table: Table | str) -> str:
        raise self._not_supported("drop_table_sql")

    def drop_temporary_table_sql(self, table: Table | str) -> str:
        raise self._not_supported("drop_temporary_table_sql")

    def create_temporary_table_snippet_sql(self) -> str:
        raise self._not_supported("create_temporary_table_snippet_sql")

    def create_database_sql(self, database: str) -> str:
        raise self._not_supported("create_database_sql")

    def drop_database_sql(self, database: str) -> str:
        raise self._not_supported("drop_database_sql")

    def create_constraint_sql(
        self,
        constraint: UniqueConstraint | ForeignKeyConstraint | Index,
        table: Table | str,
    ) -> str:
        raise self._not_supported("create_constraint_sql")

    def drop_constraint_sql(self, constraint: UniqueConstraint | ForeignKeyConstraint | str, table: Table | str) -> str:
        raise self._not_supported("drop_constraint_sql")

    def create_foreign_key_sql(self, foreign_key: ForeignKeyConstraint, table: Table | str) -> str:
        raise self._not_supported("create_foreign_key_sql")

    def drop_foreign_key_sql(self, foreign_key: ForeignKeyConstraint | str, table: Table | str) -> str:
        raise self._not_supported("drop_foreign_key_sql")

    def create_primary_key_sql(self, index: Index, table: Table | str) -> str:
        raise self._not_supported("create_primary_key_sql")

    def column_declaration_list_sql(self, columns: Sequence[Column]) -> str:
        raise self._not_supported("column_declaration_list_sql")

    def column_declaration_sql(self, name: str, column_def: Mapping[str, Any]) -> str:
        raise self._not_supported("column_declaration_sql")

    def comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str:
        raise self._not_supported("comment_on_column_sql")

    def for_update_sql(self) -> str:
        raise self._not_supported("for_update_sql")

    def append_lock_hint(self, from_clause: str, lock_mode: int | None) -> str:
        raise self._not_supported("append_lock_hint")

    def read_lock_sql(self) -> str:
        raise self._not_supported("read_lock_sql")

    def write_lock_sql(self) -> str:
        raise self._not_supported("write_lock_sql")

    # ------------------------------------------------------------------ #
    # Capabilities
    # ------------------------------------------------------------------ #
    def supports_partial_indexes(self) -> bool:
        return self.capabilities.supports_partial_indexes

    def supports_alter_table(self) -> bool:
        return self.capabilities.supports_alter_table

    def supports_transactions(self) -> bool:
        return self.capabilities.supports_transactions

    def supports_savepoints(self) -> bool:
        return self.capabilities.supports_savepoints

    def supports_release_savepoints(self) -> bool:
        return self.capabilities.supports_release_savepoints

    def supports_primary_constraints(self) -> bool:
        return self.capabilities.supports_primary_constraints

    def supports_foreign_key_constraints(self) -> bool:
        return self.capabilities.supports_foreign_key_constraints

    def supports_foreign_key_on_update(self) -> bool:
        return self.capabilities.supports_foreign_key_on_update

    def supports_inline_column_comments(self) -> bool:
        return self.capabilities.supports_inline_column_comments

    def supports_create_drop_database(self) -> bool:
        return self.capabilities.supports_create_drop_database

    def supports_getting_affected_rows(self) -> bool:
        return self.capabilities.supports_getting_affected_rows

    # ------------------------------------------------------------------ #
    # Temporal formats
    # ------------------------------------------------------------------ #
    def date_format_string(self) -> str:
        return ISO8601_FORMAT

    def time_format_string(self) -> str:
        return ISO8601_FORMAT

    def datetime_format_string(self) -> str:
        return ISO8601_FORMAT

    def datetime_tz_format_string(self) -> str:
        return ISO8601_FORMAT


def get_couchbase_dialect() -> Dialect:
    return CouchbaseN1QLDialect()
