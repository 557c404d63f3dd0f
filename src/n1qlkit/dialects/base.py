"""
Dialect strategy interfaces describing query-language translation behaviors.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence, Union

from ..errors import InvalidArgumentError, UnsupportedOperationError

if TYPE_CHECKING:
    from ..schema.objects import Column, ForeignKeyConstraint, Index, Table, UniqueConstraint


ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_partial_indexes: bool = False
    supports_alter_table: bool = True
    supports_transactions: bool = True
    supports_savepoints: bool = True
    supports_release_savepoints: bool = True
    supports_primary_constraints: bool = True
    supports_foreign_key_constraints: bool = True
    supports_foreign_key_on_update: bool = True
    supports_inline_column_comments: bool = False
    supports_create_drop_database: bool = True
    supports_getting_affected_rows: bool = True


class TrimMode(enum.IntEnum):
    UNSPECIFIED = 0
    LEADING = 1
    TRAILING = 2
    BOTH = 3


@dataclass(frozen=True)
class Millis:
    """
    A date expressed as epoch milliseconds.

    Digit-only strings are accepted and rendered verbatim so that values such
    as ``"007"`` survive untouched.
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            raise InvalidArgumentError("Millis value must be an integer, not a boolean.")
        if isinstance(self.value, str) and not (self.value and self.value.isascii() and self.value.isdigit()):
            raise InvalidArgumentError(f"Millis value must contain only digits, got {self.value!r}.")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FormattedDate:
    """A date expressed as a formatted date string."""

    value: str

    def __str__(self) -> str:
        return self.value


DateValue = Union[Millis, FormattedDate]


def as_date_value(value: Any) -> DateValue:
    """
    Classify a raw date argument into a tagged :data:`DateValue`.

    Integers and strings made only of ASCII digits are millisecond values;
    any other string is a formatted date.
    """

    if isinstance(value, (Millis, FormattedDate)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Millis(value)
    if isinstance(value, str):
        if value and value.isascii() and value.isdigit():
            return Millis(value)
        return FormattedDate(value)
    raise InvalidArgumentError(
        f"Date argument must be an int, a string or a DateValue, got {type(value).__name__}.",
        operation="as_date_value",
    )


class ExpressionFallback(Protocol):
    """
    Generic expression behavior a dialect delegates to when it has no
    rendering of its own.
    """

    def date_diff_expression(self, date1: DateValue, date2: DateValue) -> str: ...


class StandardExpressionFallback:
    """
    Fallback with no date difference rendering of its own.
    """

    def date_diff_expression(self, date1: DateValue, date2: DateValue) -> str:
        raise UnsupportedOperationError("date_diff_expression")


class Dialect(Protocol):
    """
    Strategy interface consumed across the schema and query layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    # Identifiers and comments
    def identifier_quote_character(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def quote_single_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def sql_comment_start_string(self) -> str: ...

    def sql_comment_end_string(self) -> str: ...

    def inline_comment(self, text: str) -> str: ...

    # Scalar expressions
    def regexp_expression(self, expression: str, pattern: str) -> str: ...

    def guid_expression(self) -> str: ...

    def md5_expression(self, column: str) -> str: ...

    def mod_expression(self, expression1: str, expression2: str) -> str: ...

    def trim_expression(self, value: str, mode: TrimMode = TrimMode.UNSPECIFIED, char: str | None = None) -> str: ...

    def locate_expression(self, value: str, substring: str, start_pos: int | None = None) -> str: ...

    def now_expression(self, kind: str | None = "timestamp") -> str: ...

    def substring_expression(self, value: str, start: str | int, length: str | int | None = None) -> str: ...

    def not_expression(self, expression: str) -> str: ...

    def date_diff_expression(self, date1: Any, date2: Any) -> str: ...

    def date_arithmetic_interval_expression(self, date: Any, operator: str, interval: int | str, unit: str) -> str: ...

    def date_add_interval_expression(self, date: Any, interval: int | str, unit: str) -> str: ...

    def date_sub_interval_expression(self, date: Any, interval: int | str, unit: str) -> str: ...

    def bit_and_comparison_expression(self, value1: str, value2: str) -> str: ...

    def bit_or_comparison_expression(self, value1: str, value2: str) -> str: ...

    def is_missing_expression(self, expression: str) -> str: ...

    def is_not_missing_expression(self, expression: str) -> str: ...

    def is_null_expression(self, expression: str) -> str: ...

    def is_not_null_expression(self, expression: str) -> str: ...

    def between_expression(self, expression: str, lower: str, upper: str) -> str: ...

    def in_expression(self, expression: str, values: Sequence[str]) -> str: ...

    def length_expression(self, expression: str) -> str: ...

    def lower_expression(self, expression: str) -> str: ...

    def upper_expression(self, expression: str) -> str: ...

    def concat_expression(self, *parts: str) -> str: ...

    def count_expression(self, expression: str) -> str: ...

    def sum_expression(self, expression: str) -> str: ...

    def avg_expression(self, expression: str) -> str: ...

    def min_expression(self, expression: str) -> str: ...

    def max_expression(self, expression: str) -> str: ...

    # Type declarations
    def boolean_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def integer_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def bigint_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def smallint_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def common_integer_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def clob_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def blob_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def decimal_type_declaration_sql(self, column_def: Mapping[str, Any]) -> str: ...

    def varchar_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def binary_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def guid_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def json_type_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def default_value_declaration_sql(self, field: Mapping[str, Any]) -> str: ...

    def check_declaration_sql(self, definition: Mapping[str, Any]) -> str: ...

    def unique_constraint_declaration_sql(self, name: str, index: "Index") -> str: ...

    # DDL
    def create_index_sql(self, index: "Index", table: "Table | str") -> str: ...

    def create_index_sql_flags(self, index: "Index") -> str: ...

    def index_field_declaration_list_sql(self, columns: Sequence[str]) -> str: ...

    def partial_index_sql(self, index: "Index") -> str: ...

    def drop_index_sql(self, index: "Index | str", table: "Table | str | None" = None, *, use_gsi: bool = False) -> str: ...

    def create_table_sql(self, table: "Table") -> str: ...

    def drop_table_sql(self, table: "Table | str") -> str: ...

    def drop_temporary_table_sql(self, table: "Table | str") -> str: ...

    def create_temporary_table_snippet_sql(self) -> str: ...

    def create_database_sql(self, database: str) -> str: ...

    def drop_database_sql(self, database: str) -> str: ...

    def create_constraint_sql(self, constraint: "UniqueConstraint | ForeignKeyConstraint | Index", table: "Table | str") -> str: ...

    def drop_constraint_sql(self, constraint: "UniqueConstraint | ForeignKeyConstraint | str", table: "Table | str") -> str: ...

    def create_foreign_key_sql(self, foreign_key: "ForeignKeyConstraint", table: "Table | str") -> str: ...

    def drop_foreign_key_sql(self, foreign_key: "ForeignKeyConstraint | str", table: "Table | str") -> str: ...

    def create_primary_key_sql(self, index: "Index", table: "Table | str") -> str: ...

    def column_declaration_list_sql(self, columns: Sequence["Column"]) -> str: ...

    def column_declaration_sql(self, name: str, column_def: Mapping[str, Any]) -> str: ...

    def comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str: ...

    def for_update_sql(self) -> str: ...

    def append_lock_hint(self, from_clause: str, lock_mode: int | None) -> str: ...

    def read_lock_sql(self) -> str: ...

    def write_lock_sql(self) -> str: ...

    # Capabilities
    def supports_partial_indexes(self) -> bool: ...

    def supports_alter_table(self) -> bool: ...

    def supports_transactions(self) -> bool: ...

    def supports_savepoints(self) -> bool: ...

    def supports_release_savepoints(self) -> bool: ...

    def supports_primary_constraints(self) -> bool: ...

    def supports_foreign_key_constraints(self) -> bool: ...

    def supports_foreign_key_on_update(self) -> bool: ...

    def supports_inline_column_comments(self) -> bool: ...

    def supports_create_drop_database(self) -> bool: ...

    def supports_getting_affected_rows(self) -> bool: ...

    # Temporal formats
    def date_format_string(self) -> str: ...

    def time_format_string(self) -> str: ...

    def datetime_format_string(self) -> str: ...

    def datetime_tz_format_string(self) -> str: ...
