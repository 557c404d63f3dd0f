import logging

from n1qlkit.dialects import CouchbaseN1QLDialect
from n1qlkit.errors import UnsupportedOperationError
from n1qlkit.utils.logging import (
    LOG_LEVEL_ENV_VAR,
    get_correlation_id,
    get_logger,
    resolve_log_level,
    set_correlation_id,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_get_logger_namespaces_under_package():
    assert get_logger("tests.logging").name == "n1qlkit.tests.logging"


def test_resolve_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert resolve_log_level() == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "15")
    assert resolve_log_level() == 15
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    assert resolve_log_level(logging.WARNING) == logging.WARNING
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
    assert resolve_log_level() == logging.INFO


def test_rejected_operation_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="n1qlkit.dialects.couchbase")
    dialect = CouchbaseN1QLDialect()
    try:
        dialect.md5_expression("name")
    except UnsupportedOperationError:
        pass
    assert any("md5_expression" in record.message for record in caplog.records)
