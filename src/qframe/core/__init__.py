"""Resolution pipeline: caches, unit lookups, metadata resolution and conversion."""

from qframe.core.cache import MetadataCache
from qframe.core.converter import QuantityConverter
from qframe.core.provider import QuantityMetadataProvider
from qframe.core.registry import MetadataRegistry, RegistryCaches
from qframe.core.resolver import FieldMetadataResolver
from qframe.core.units import UnitResolver

__all__ = [
    "FieldMetadataResolver",
    "MetadataCache",
    "MetadataRegistry",
    "QuantityConverter",
    "QuantityMetadataProvider",
    "RegistryCaches",
    "UnitResolver",
]
