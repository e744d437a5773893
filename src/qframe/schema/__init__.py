"""Immutable data model: descriptors, annotations and resolved metadata."""

from qframe.schema.annotation import QuantityAnnotation
from qframe.schema.config import RegistryConfig
from qframe.schema.descriptors import QuantityKindDescriptor, UnitDescriptor
from qframe.schema.field_metadata import FieldMetadata, FieldRef
from qframe.schema.quantity import Quantity
from qframe.schema.type_metadata import TypeMetadata

__all__ = [
    "FieldMetadata",
    "FieldRef",
    "Quantity",
    "QuantityAnnotation",
    "QuantityKindDescriptor",
    "RegistryConfig",
    "TypeMetadata",
    "UnitDescriptor",
]
