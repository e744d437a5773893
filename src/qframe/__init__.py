"""qframe package."""

from qframe._version import __version__
from qframe.api import (
    as_quantity,
    clear_caches,
    convert_quantity,
    get_default_registry,
    get_object_metadata,
    get_quantity,
    register_custom_quantity_kind,
    register_schema,
    resolve_quantity_kind,
    resolve_type_metadata,
    resolve_unit,
    set_default_registry,
)
from qframe.core import MetadataRegistry, QuantityMetadataProvider
from qframe.errors import (
    AccessorMissingError,
    ConversionNotAllowedError,
    MetadataMissingError,
    QFrameError,
    TypeIncompatibleError,
    UnknownQuantityKindError,
    UnknownUnitError,
)
from qframe.schema import (
    FieldMetadata,
    Quantity,
    QuantityAnnotation,
    QuantityKindDescriptor,
    RegistryConfig,
    TypeMetadata,
    UnitDescriptor,
)

__all__ = [
    "AccessorMissingError",
    "ConversionNotAllowedError",
    "FieldMetadata",
    "MetadataMissingError",
    "MetadataRegistry",
    "QFrameError",
    "Quantity",
    "QuantityAnnotation",
    "QuantityKindDescriptor",
    "QuantityMetadataProvider",
    "RegistryConfig",
    "TypeIncompatibleError",
    "TypeMetadata",
    "UnitDescriptor",
    "UnknownQuantityKindError",
    "UnknownUnitError",
    "__version__",
    "as_quantity",
    "clear_caches",
    "convert_quantity",
    "get_default_registry",
    "get_object_metadata",
    "get_quantity",
    "register_custom_quantity_kind",
    "register_schema",
    "resolve_quantity_kind",
    "resolve_type_metadata",
    "resolve_unit",
    "set_default_registry",
]
