import pytest

from n1qlkit import dialects
from n1qlkit.dialects import (
    CouchbaseN1QLDialect,
    FormattedDate,
    Millis,
    as_date_value,
    available_dialects,
    get_dialect,
    register_dialect,
)
from n1qlkit.errors import InvalidArgumentError, UnknownDialectError


def test_couchbase_dialect_is_registered():
    assert "couchbase-n1ql" in available_dialects()
    assert isinstance(get_dialect("couchbase-n1ql"), CouchbaseN1QLDialect)
    assert isinstance(get_dialect(" Couchbase-N1QL "), CouchbaseN1QLDialect)


def test_unknown_dialect_raises():
    with pytest.raises(UnknownDialectError) as excinfo:
        get_dialect("oracle")
    assert isinstance(excinfo.value, LookupError)
    assert "couchbase-n1ql" in str(excinfo.value)


def test_register_custom_dialect(monkeypatch):
    monkeypatch.setattr(dialects, "_REGISTRY", dict(dialects._REGISTRY))
    register_dialect("couchbase-test", CouchbaseN1QLDialect)
    assert isinstance(get_dialect("couchbase-test"), CouchbaseN1QLDialect)
    assert "couchbase-test" in available_dialects()


def test_as_date_value_classifies_raw_values():
    assert as_date_value(1000) == Millis(1000)
    assert as_date_value("007") == Millis("007")
    assert as_date_value("2020-01-01") == FormattedDate("2020-01-01")
    assert as_date_value("") == FormattedDate("")
    tagged = FormattedDate("123")
    assert as_date_value(tagged) is tagged


def test_as_date_value_rejects_other_types():
    with pytest.raises(InvalidArgumentError):
        as_date_value(1.5)
    with pytest.raises(InvalidArgumentError):
        as_date_value(True)


def test_millis_requires_digits():
    assert str(Millis("0042")) == "0042"
    with pytest.raises(InvalidArgumentError):
        Millis("12a")


def test_custom_registration_does_not_leak():
    assert "couchbase-test" not in available_dialects()


def test_millis_rejects_non_ascii_digits():
    for value in ("١٢", "²"):
        with pytest.raises(InvalidArgumentError):
            Millis(value)
