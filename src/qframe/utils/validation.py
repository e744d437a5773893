"""
Contains generic input validation utilities used across qframe modules.

These functions are stateless and reusable, designed to enforce type and value constraints
without introducing resolution or conversion logic.
"""

import types
import typing
from decimal import Decimal
from enum import Enum
from typing import Any, Union

import numpy as np

# value types a quantity can be built from; bool is deliberately absent
NUMERIC_TYPES: frozenset[type] = frozenset(
    {
        int,
        float,
        Decimal,
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.uint8,
        np.uint16,
        np.uint32,
        np.uint64,
        np.float16,
        np.float32,
        np.float64,
    }
)


def unwrap_value_type(hint: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers from a type hint."""
    if typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]

    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return unwrap_value_type(members[0])
    return hint


def is_numeric_type(value_type: Any) -> bool:
    """Return True if `value_type` is one of the types accepted as a quantity value."""
    return value_type in NUMERIC_TYPES


def is_numeric_value(value: Any) -> bool:
    """Return True if the runtime type of `value` is accepted as a quantity value."""
    return type(value) in NUMERIC_TYPES


def validate_unit(unit: Any, allow_none: bool = False) -> Enum | None:
    """
    Check that `unit` is an enum member.

    Parameters
    ----------
    unit : Any
        Candidate unit value.
    allow_none : bool, optional
        Accept ``None`` (deferred unit). Default False.

    Returns
    -------
    Enum or None
        The unit, unchanged.
    """
    if unit is None and allow_none:
        return None
    if not isinstance(unit, Enum):
        raise ValueError("Unit must be an enum value")
    return unit


def type_name(value_type: Any) -> str:
    """Readable name of a type or type hint."""
    return getattr(value_type, "__name__", None) or str(value_type)
