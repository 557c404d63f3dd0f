import logging

import pytest

from n1qlkit.dialects import CouchbaseN1QLDialect
from n1qlkit.errors import InvalidArgumentError, UnsupportedOperationError
from n1qlkit.schema import Column, Index, SchemaBuilder, Table

dialect = CouchbaseN1QLDialect()
builder = SchemaBuilder(dialect)


def make_table() -> Table:
    return Table(
        "`travel-sample`",
        [Column("type"), Column("city")],
        [
            Index("idx_city", ["city"], where="type = 'hotel'"),
            Index("def_primary", primary=True),
            Index("idx_type", ["type"]),
        ],
    )


def test_create_index_statements_primary_first():
    statements = builder.create_index_statements(make_table())
    assert statements == [
        "CREATE PRIMARY INDEX def_primary ON `travel-sample`",
        "CREATE INDEX idx_city ON `travel-sample` (city) WHERE type = 'hotel'",
        "CREATE INDEX idx_type ON `travel-sample` (type)",
    ]


def test_create_index_sql_by_name():
    sql = builder.create_index_sql(make_table(), "idx_type")
    assert sql == "CREATE INDEX idx_type ON `travel-sample` (type)"


def test_create_index_sql_unknown_name():
    with pytest.raises(InvalidArgumentError):
        builder.create_index_sql(make_table(), "missing")


def test_drop_index_statements_reverse_order():
    statements = builder.drop_index_statements(make_table())
    assert statements == [
        "DROP INDEX `travel-sample`.idx_type",
        "DROP INDEX `travel-sample`.idx_city",
        "DROP INDEX `travel-sample`.def_primary",
    ]


def test_drop_index_with_gsi_builder():
    gsi_builder = SchemaBuilder(dialect, use_gsi=True)
    sql = gsi_builder.drop_index_sql(make_table(), "idx_city")
    assert sql == "DROP INDEX `travel-sample`.idx_city USING GSI"


def test_drop_index_logs_warning(caplog):
    caplog.set_level(logging.WARNING, logger="n1qlkit.schema.builder")
    local_builder = SchemaBuilder(CouchbaseN1QLDialect())
    local_builder.drop_index_sql(make_table(), "idx_type")
    assert any("DROP INDEX generated" in record.message for record in caplog.records)


def test_create_table_is_unsupported():
    with pytest.raises(UnsupportedOperationError) as excinfo:
        builder.create_table_sql(make_table())
    assert excinfo.value.operation == "create_table_sql"


def test_invalid_index_surfaces_from_builder():
    table = Table("bucket", indexes=[Index("idx_empty")])
    with pytest.raises(InvalidArgumentError):
        builder.create_index_statements(table)
