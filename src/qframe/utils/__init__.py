"""Infrastructure helpers."""

from qframe.utils.format import format_quantity, format_unit_str, unit_display_name, unit_label
from qframe.utils.logging import get_logger
from qframe.utils.selector import extract_field_name
from qframe.utils.validation import (
    NUMERIC_TYPES,
    is_numeric_type,
    is_numeric_value,
    type_name,
    unwrap_value_type,
    validate_unit,
)

__all__ = [
    "NUMERIC_TYPES",
    "extract_field_name",
    "format_quantity",
    "format_unit_str",
    "get_logger",
    "is_numeric_type",
    "is_numeric_value",
    "type_name",
    "unit_display_name",
    "unit_label",
    "unwrap_value_type",
    "validate_unit",
]
