"""
Unit tests for the module-level API bound to the default registry.

These tests validate:
- The default registry is created lazily and can be replaced or reset
- Module functions delegate to the default registry
"""

import pytest

import qframe
from qframe import MetadataRegistry, Quantity
from qframe.units import LengthUnit
from sample_frames import Box, Coolness, CoolnessUnit


def test_default_registry_is_lazy_singleton():
    qframe.set_default_registry(None)
    try:
        first = qframe.get_default_registry()
        assert isinstance(first, MetadataRegistry)
        assert qframe.get_default_registry() is first
    finally:
        qframe.set_default_registry(None)


def test_set_default_registry(default_registry):
    assert qframe.get_default_registry() is default_registry


def test_module_functions_use_default(default_registry):
    box = Box(width=1.0)
    assert qframe.resolve_type_metadata(Box) is default_registry.resolve_type_metadata(Box)
    assert qframe.get_object_metadata(box) is default_registry.resolve_type_metadata(Box)
    assert qframe.get_quantity(box, "width") == Quantity(1.0, LengthUnit.METER)
    assert qframe.convert_quantity(box, "width", LengthUnit.CENTIMETER).value == pytest.approx(100.0)


def test_register_custom_quantity_kind(default_registry):
    kind = qframe.register_custom_quantity_kind(Coolness)
    assert kind is Coolness.quantity_kind
    assert default_registry.resolve_unit(CoolnessUnit.KILOFONZIE).kind is kind


def test_unit_and_schema_functions(default_registry):
    from sample_frames import LEGACY_SCHEMA, LegacyFrame

    assert qframe.resolve_unit(LengthUnit.METER) is default_registry.resolve_unit(LengthUnit.METER)
    assert qframe.resolve_quantity_kind(LengthUnit.METER).name == "Length"
    assert qframe.as_quantity(3, LengthUnit.FOOT) == Quantity(3.0, LengthUnit.FOOT)

    qframe.register_schema(LegacyFrame, LEGACY_SCHEMA)
    assert list(qframe.resolve_type_metadata(LegacyFrame)) == ["rpm", "speed"]

    qframe.clear_caches()
    assert len(default_registry) == 0
