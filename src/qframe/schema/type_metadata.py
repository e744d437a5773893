"""Ordered, read-only collection of resolved field metadata for one concrete type."""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from qframe.schema.field_metadata import FieldMetadata


class TypeMetadata(Mapping[str, FieldMetadata]):
    """
    Field-name keyed metadata of a type, in declaration order (base fields first).

    Every entry is validated on construction, so a TypeMetadata only ever holds fields
    whose value type can represent a quantity value.

    Examples
    --------
    >>> metadata = registry.resolve_type_metadata(Box)
    >>> metadata["width"].unit.unit
    <LengthUnit.METER: 'meter'>
    >>> list(metadata)
    ['width', 'height', 'depth', 'weight', 'items', 'volume']
    """

    def __init__(self, type_: type, fields: Iterable[FieldMetadata], culture: str | None = None) -> None:
        self._type = type_
        self._culture = culture
        by_name: dict[str, FieldMetadata] = {}
        for metadata in fields:
            metadata.validate()
            by_name[metadata.field_name] = metadata
        self._by_name = MappingProxyType(by_name)

    @property
    def type(self) -> type:
        """type: The concrete type described."""
        return self._type

    @property
    def culture(self) -> str | None:
        """str or None: Culture the metadata was resolved for."""
        return self._culture

    @property
    def fields(self) -> tuple[FieldMetadata, ...]:
        """tuple[FieldMetadata, ...]: All entries in order."""
        return tuple(self._by_name.values())

    def units(self) -> dict[str, Enum | None]:
        """Map each field name to its declared unit value (or None)."""
        return {name: (m.unit.unit if m.unit else None) for name, m in self._by_name.items()}

    def __getitem__(self, name: str) -> FieldMetadata:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"TypeMetadata({self._type.__name__}, fields={list(self._by_name)})"
