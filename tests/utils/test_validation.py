"""
Unit tests for validation and formatting helpers.

These tests validate:
- The numeric allow-list, including numpy scalar types and excluding bool
- Unwrapping of Annotated and Optional hints
- Unit labels, display names and pint symbols
"""

from decimal import Decimal
from typing import Annotated, Optional

import numpy as np
import pytest

from qframe.config import load_unit_registry
from qframe.units import LengthUnit, TorqueUnit, VolumeUnit
from qframe.utils import (
    format_quantity,
    format_unit_str,
    is_numeric_type,
    is_numeric_value,
    type_name,
    unit_display_name,
    unit_label,
    unwrap_value_type,
    validate_unit,
)


@pytest.mark.parametrize("value_type", [int, float, Decimal, np.int32, np.uint8, np.float32, np.float64])
def test_numeric_types(value_type):
    assert is_numeric_type(value_type)


@pytest.mark.parametrize("value_type", [bool, str, complex, np.bool_, list, None])
def test_non_numeric_types(value_type):
    assert not is_numeric_type(value_type)


def test_numeric_values():
    assert is_numeric_value(1)
    assert is_numeric_value(np.int16(3))
    assert not is_numeric_value(True)
    assert not is_numeric_value("1")


@pytest.mark.parametrize(
    "hint, expected",
    [
        (float, float),
        (Optional[int], int),
        (float | None, float),
        (Annotated[Optional[Decimal], "meta"], Decimal),
        (int | str, int | str),
    ],
)
def test_unwrap_value_type(hint, expected):
    assert unwrap_value_type(hint) == expected


def test_validate_unit():
    assert validate_unit(LengthUnit.METER) is LengthUnit.METER
    assert validate_unit(None, allow_none=True) is None
    with pytest.raises(ValueError, match="Unit must be an enum value"):
        validate_unit(None)


def test_names():
    assert type_name(float) == "float"
    assert unit_label(LengthUnit.METER) == "LengthUnit.METER"
    assert unit_display_name(VolumeUnit.CUBIC_METER) == "CubicMeter"


def test_format_unit_str():
    ureg = load_unit_registry()
    assert format_unit_str(ureg, "meter") == "m"
    assert format_unit_str(ureg, str(TorqueUnit.NEWTON_METER.value)) in ("N * m", "m * N")
    assert format_unit_str(ureg, "not_a_unit") == "not_a_unit"


def test_format_quantity():
    assert format_quantity(6000.0, "dm ** 3") == "6000 dm ** 3"
    assert format_quantity(2.5, "ft") == "2.5 ft"
    assert format_quantity(3, "") == "3"
