from n1qlkit.errors import (
    DialectError,
    InvalidArgumentError,
    UnsupportedArgumentError,
    UnsupportedOperationError,
)


def test_unsupported_operation_message_names_operation_and_platform():
    error = UnsupportedOperationError("md5_expression", platform="couchbase-n1ql")
    assert error.operation == "md5_expression"
    assert str(error) == "Operation 'md5_expression' is not supported by platform 'couchbase-n1ql'."
    assert isinstance(error, DialectError)
    assert not isinstance(error, ValueError)


def test_invalid_argument_is_a_value_error():
    error = InvalidArgumentError("bucket required", operation="drop_index_sql")
    assert isinstance(error, ValueError)
    assert error.operation == "drop_index_sql"
    assert str(error) == "bucket required"


def test_unsupported_argument_belongs_to_both_kinds():
    error = UnsupportedArgumentError("locate_expression", "start_pos", platform="couchbase-n1ql")
    assert isinstance(error, UnsupportedOperationError)
    assert isinstance(error, InvalidArgumentError)
    assert error.argument == "start_pos"
    assert str(error).endswith("Argument 'start_pos' cannot be expressed.")
