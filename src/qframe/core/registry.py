"""Injectable owner of the unit registry, the metadata caches and the resolution pipeline."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pint

from qframe.config import load_unit_registry
from qframe.core.cache import MetadataCache
from qframe.core.converter import FieldSelector, QuantityConverter
from qframe.core.resolver import FieldMetadataResolver, SchemaEntry
from qframe.core.units import KindFactory, UnitResolver
from qframe.schema.config import RegistryConfig
from qframe.schema.descriptors import QuantityKindDescriptor, UnitDescriptor
from qframe.schema.quantity import Quantity
from qframe.schema.type_metadata import TypeMetadata
from qframe.utils.format import format_quantity
from qframe.utils.logging import get_logger


@dataclass(frozen=True)
class RegistryCaches:
    """The independent caches owned by one registry."""

    units: MetadataCache = field(default_factory=lambda: MetadataCache("units"))
    kinds: MetadataCache = field(default_factory=lambda: MetadataCache("kinds"))
    types: MetadataCache = field(default_factory=lambda: MetadataCache("types"))
    accessors: MetadataCache = field(default_factory=lambda: MetadataCache("accessors"))
    constructors: MetadataCache = field(default_factory=lambda: MetadataCache("constructors"))

    def all(self) -> tuple[MetadataCache, ...]:
        return (self.units, self.kinds, self.types, self.accessors, self.constructors)


class MetadataRegistry:
    """
    Entry point for resolving quantity metadata and materializing quantities.

    Build one at startup and pass it to the code that needs it; tests build a fresh one
    each so that caches and custom kinds never leak between them.

    Parameters
    ----------
    config : RegistryConfig, optional
        Default culture, verbosity and extra pint definitions.
    ureg : pint.UnitRegistry, optional
        Unit registry to use. A new one is loaded when omitted.

    Examples
    --------
    >>> registry = MetadataRegistry()
    >>> box = Box(width=1.0)
    >>> registry.convert_quantity(box, "width", LengthUnit.DECIMETER)
    Quantity(value=10.0, unit=<LengthUnit.DECIMETER: 'decimeter'>)
    """

    def __init__(self, config: RegistryConfig | None = None, ureg: pint.UnitRegistry | None = None) -> None:
        self.config = config or RegistryConfig()
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=self.config.verbose)

        if ureg is None:
            ureg = load_unit_registry(self.config.definitions)
        else:
            for line in self.config.definitions:
                ureg.define(line)
        self.ureg = ureg
        self.Q_ = self.ureg.Quantity

        self.caches = RegistryCaches()
        verbose = self.config.verbose
        self.units = UnitResolver(self.ureg, self.caches.units, self.caches.kinds, verbose=verbose)
        self.resolver = FieldMetadataResolver(self.units, self.caches.types, verbose=verbose)
        self.converter = QuantityConverter(
            self.resolver, self.units, self.caches.accessors, self.caches.constructors, verbose=verbose
        )

    def _culture(self, culture: str | None) -> str | None:
        """Return the requested culture if provided, otherwise fall back to the default."""
        return culture if culture else self.config.culture

    def register_custom_quantity_kind(
        self, quantity_type: type, factory: KindFactory | QuantityKindDescriptor | None = None
    ) -> QuantityKindDescriptor:
        """Register a custom quantity kind; see ``UnitResolver.register_custom_quantity_kind``."""
        return self.units.register_custom_quantity_kind(quantity_type, factory)

    def register_schema(self, type_: type, fields: Mapping[str, SchemaEntry]) -> None:
        """Declare quantity fields of `type_` with an explicit table.

        Metadata already cached for `type_` or its subclasses is dropped.
        """
        self.resolver.register_schema(type_, fields)
        self.caches.types.clear()

    def resolve_unit(self, unit: Enum, quantity_type: type | None = None) -> UnitDescriptor | None:
        """Descriptor of `unit`, or None."""
        return self.units.resolve_unit(unit, quantity_type)

    def resolve_quantity_kind(self, unit: Enum, quantity_type: type | None = None) -> QuantityKindDescriptor | None:
        """Quantity kind of `unit`, or None."""
        return self.units.resolve_quantity_kind(unit, quantity_type)

    def resolve_type_metadata(self, type_: type, culture: str | None = None) -> TypeMetadata:
        """Quantity metadata of `type_`, cached per ``(type, culture)``."""
        return self.resolver.resolve(type_, self._culture(culture))

    def get_object_metadata(self, obj: Any, culture: str | None = None) -> TypeMetadata:
        """
        Quantity metadata of a type, of an instance's type, or of the items of a collection.

        Parameters
        ----------
        obj : type, object or collection
            A type, an annotated record, or a non-empty list, tuple, set or iterator of
            records of one type. Other iterables (records defining ``__iter__``) are
            treated as records.

        Returns
        -------
        TypeMetadata
            Metadata of the described type.
        """
        if isinstance(obj, type):
            return self.resolve_type_metadata(obj, culture)

        if isinstance(obj, (list, tuple, set, frozenset, Iterator)):
            item_types = {type(item) for item in obj}
            if len(item_types) != 1:
                raise ValueError(f"Expected items of a single type, got {sorted(t.__name__ for t in item_types)}")
            return self.resolve_type_metadata(item_types.pop(), culture)

        return self.resolve_type_metadata(type(obj), culture)

    def get_quantity(self, instance: Any, field: FieldSelector, culture: str | None = None) -> Any:
        """Value of `field` as a quantity in its declared unit."""
        return self.converter.get_quantity(instance, field, self._culture(culture))

    def convert_quantity(self, instance: Any, field: FieldSelector, to: Enum, culture: str | None = None) -> Any:
        """Value of `field` converted to `to`, which must be allowed for the field."""
        return self.converter.convert_quantity(instance, field, to, self._culture(culture))

    def as_quantity(self, value: Any, unit: Enum, quantity_type: type | None = None) -> Any:
        """Quantity of `value` in `unit`."""
        return self.converter.as_quantity(value, unit, quantity_type)

    def format_quantity(self, quantity: Quantity) -> str:
        """Render a built-in quantity with its unit symbol, e.g. ``"6000 dm ** 3"``."""
        descriptor = self.resolve_unit(quantity.unit)
        abbreviation = descriptor.abbreviation if descriptor else str(quantity.unit.value)
        return format_quantity(quantity.value, abbreviation)

    def clear_caches(self) -> None:
        """Drop every cached descriptor, metadata, accessor and constructor."""
        for cache in self.caches.all():
            cache.clear()
        self.logger.debug("Cleared metadata caches")

    def __len__(self) -> int:
        """Number of types whose metadata is cached.

        Examples
        --------
        >>> registry.resolve_type_metadata(Box)
        >>> len(registry)
        1
        """
        return len(self.caches.types)
