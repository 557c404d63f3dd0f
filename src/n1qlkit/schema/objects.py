"""
Schema object descriptors consumed by dialects when rendering DDL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Sequence

from ..errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..dialects.base import Dialect


_QUOTE_CHARACTERS = ("`", '"', "[", "]")


class Identifier:
    """
    Raw schema name that remembers whether it was written quoted.

    ``Identifier("`order`")`` is stored as ``order`` and rendered through the
    dialect quoting rule; ``Identifier("order")`` renders unchanged. Every
    quote character is stripped, so ``"`bucket`.`scope`"`` is stored as
    ``bucket.scope`` and re-quoted part by part.
    """

    __slots__ = ("name", "quoted")

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidArgumentError("Identifier name must not be empty.")
        quoted = any(part[:1] in _QUOTE_CHARACTERS for part in name.split(".") if part)
        for character in _QUOTE_CHARACTERS:
            name = name.replace(character, "")
        if not name or any(not part for part in name.split(".")):
            raise InvalidArgumentError(f"Identifier has an empty name part: {name!r}.")
        self.name = name
        self.quoted = quoted

    def quoted_name(self, dialect: "Dialect") -> str:
        if not self.quoted:
            return self.name
        return ".".join(dialect.quote_single_identifier(part) for part in self.name.split("."))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.name == other.name and self.quoted == other.quoted

    def __hash__(self) -> int:
        return hash((self.name, self.quoted))

    def __repr__(self) -> str:
        return f"Identifier({self.name!r}, quoted={self.quoted})"


@dataclass
class Column:
    name: str
    type_descriptor: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.identifier = Identifier(self.name)

    def quoted_name(self, dialect: "Dialect") -> str:
        return self.identifier.quoted_name(dialect)


@dataclass
class Index:
    """
    Index descriptor. Primary indexes carry no columns; ``where`` holds the
    predicate of a partial index.
    """

    name: str
    columns: Sequence[str] = ()
    primary: bool = False
    unique: bool = False
    where: str | None = None

    def __post_init__(self) -> None:
        self.columns = list(self.columns)
        self.identifier = Identifier(self.name)
        self.column_identifiers = [Identifier(column) for column in self.columns]

    def quoted_name(self, dialect: "Dialect") -> str:
        return self.identifier.quoted_name(dialect)

    def quoted_columns(self, dialect: "Dialect") -> List[str]:
        return [column.quoted_name(dialect) for column in self.column_identifiers]

    def is_partial(self) -> bool:
        return bool(self.where)


@dataclass
class UniqueConstraint:
    name: str
    columns: Sequence[str] = ()

    def __post_init__(self) -> None:
        self.columns = list(self.columns)
        self.identifier = Identifier(self.name)

    def quoted_name(self, dialect: "Dialect") -> str:
        return self.identifier.quoted_name(dialect)


@dataclass
class ForeignKeyConstraint:
    name: str
    local_columns: Sequence[str]
    foreign_table: str
    foreign_columns: Sequence[str]

    def __post_init__(self) -> None:
        self.local_columns = list(self.local_columns)
        self.foreign_columns = list(self.foreign_columns)
        self.identifier = Identifier(self.name)

    def quoted_name(self, dialect: "Dialect") -> str:
        return self.identifier.quoted_name(dialect)


class Table:
    """
    A bucket (or keyspace) with its declared columns and indexes.
    """

    def __init__(
        self,
        name: str,
        columns: Iterable[Column] = (),
        indexes: Iterable[Index] = (),
    ) -> None:
        self.identifier = Identifier(name)
        self.columns: List[Column] = list(columns)
        self._indexes: dict[str, Index] = {}
        for index in indexes:
            self.add_index(index)

    @property
    def name(self) -> str:
        return self.identifier.name

    def quoted_name(self, dialect: "Dialect") -> str:
        return self.identifier.quoted_name(dialect)

    def add_index(self, index: Index) -> Index:
        key = index.identifier.name.lower()
        if key in self._indexes:
            raise InvalidArgumentError(
                f"Index '{index.identifier.name}' already exists on table '{self.name}'."
            )
        if index.primary and self.primary_index is not None:
            raise InvalidArgumentError(f"Table '{self.name}' already has a primary index.")
        self._indexes[key] = index
        return index

    def get_index(self, name: str) -> Index:
        index = self._indexes.get(Identifier(name).name.lower())
        if index is None:
            raise InvalidArgumentError(f"Index '{name}' does not exist on table '{self.name}'.")
        return index

    def has_index(self, name: str) -> bool:
        return Identifier(name).name.lower() in self._indexes

    @property
    def indexes(self) -> List[Index]:
        return list(self._indexes.values())

    @property
    def primary_index(self) -> Index | None:
        for index in self._indexes.values():
            if index.primary:
                return index
        return None

    def __repr__(self) -> str:
        return f"Table({self.name!r}, indexes={[index.name for index in self.indexes]!r})"
