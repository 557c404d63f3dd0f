"""
Configuration selecting a dialect and its index options.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from .dialects import CouchbaseN1QLDialect, Dialect, get_dialect
from .errors import ConfigurationError, UnknownDialectError
from .schema import SchemaBuilder

SCHEME_ALIASES: dict[str, str] = {
    "couchbase": CouchbaseN1QLDialect.PLATFORM_NAME,
    "couchbases": CouchbaseN1QLDialect.PLATFORM_NAME,
    "n1ql": CouchbaseN1QLDialect.PLATFORM_NAME,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def resolve_dialect_name(scheme: str) -> str:
    normalized = scheme.strip().lower()
    return SCHEME_ALIASES.get(normalized, normalized)


@dataclass(frozen=True)
class DialectConfig:
    """
    Which dialect to build, and whether index drops target the GSI engine.

    Only the URL scheme and the ``use_gsi`` query option are read; host,
    credentials and bucket belong to the connection layer.
    """

    dialect: str
    use_gsi: bool = False

    @classmethod
    def from_url(cls, url: str, *, use_gsi: bool | None = None) -> "DialectConfig":
        """
        Build a config from a URL such as ``couchbase://host/bucket?use_gsi=true``.
        """

        parts = urlsplit(url)
        if not parts.scheme:
            raise ConfigurationError("URL is missing a scheme.")

        query = {key: values[-1] for key, values in parse_qs(parts.query).items()}
        if use_gsi is None and "use_gsi" in query:
            use_gsi = _parse_bool(query["use_gsi"], key="use_gsi")

        return cls(dialect=resolve_dialect_name(parts.scheme), use_gsi=bool(use_gsi))

    def create_dialect(self) -> Dialect:
        try:
            return get_dialect(self.dialect)
        except UnknownDialectError as exc:
            raise ConfigurationError(str(exc)) from exc

    def create_schema_builder(self) -> SchemaBuilder:
        return SchemaBuilder(self.create_dialect(), use_gsi=self.use_gsi)
