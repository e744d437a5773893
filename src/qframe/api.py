"""
Module-level API bound to a default ``MetadataRegistry``.

Convenient for scripts; libraries and tests should build and pass their own registry.
"""

import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any

from qframe.core.converter import FieldSelector
from qframe.core.registry import MetadataRegistry
from qframe.core.resolver import SchemaEntry
from qframe.core.units import KindFactory
from qframe.schema.descriptors import QuantityKindDescriptor, UnitDescriptor
from qframe.schema.type_metadata import TypeMetadata

_default_registry: MetadataRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> MetadataRegistry:
    """Return the process-wide default registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = MetadataRegistry()
    return _default_registry


def set_default_registry(registry: MetadataRegistry | None) -> None:
    """Replace the default registry (``None`` resets it to a fresh one on next use)."""
    global _default_registry
    with _default_lock:
        _default_registry = registry


def resolve_type_metadata(type_: type, culture: str | None = None) -> TypeMetadata:
    return get_default_registry().resolve_type_metadata(type_, culture)


def get_object_metadata(obj: Any, culture: str | None = None) -> TypeMetadata:
    return get_default_registry().get_object_metadata(obj, culture)


def get_quantity(instance: Any, field: FieldSelector, culture: str | None = None) -> Any:
    return get_default_registry().get_quantity(instance, field, culture)


def convert_quantity(instance: Any, field: FieldSelector, to: Enum, culture: str | None = None) -> Any:
    return get_default_registry().convert_quantity(instance, field, to, culture)


def register_custom_quantity_kind(
    quantity_type: type, factory: KindFactory | QuantityKindDescriptor | None = None
) -> QuantityKindDescriptor:
    return get_default_registry().register_custom_quantity_kind(quantity_type, factory)


def register_schema(type_: type, fields: Mapping[str, SchemaEntry]) -> None:
    get_default_registry().register_schema(type_, fields)


def resolve_unit(unit: Enum, quantity_type: type | None = None) -> UnitDescriptor | None:
    return get_default_registry().resolve_unit(unit, quantity_type)


def resolve_quantity_kind(unit: Enum, quantity_type: type | None = None) -> QuantityKindDescriptor | None:
    return get_default_registry().resolve_quantity_kind(unit, quantity_type)


def as_quantity(value: Any, unit: Enum, quantity_type: type | None = None) -> Any:
    return get_default_registry().as_quantity(value, unit, quantity_type)


def clear_caches() -> None:
    get_default_registry().clear_caches()
