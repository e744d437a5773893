"""
Unit tests for UnitResolver: unit and quantity-kind lookups.

These tests validate:
- Built-in units resolve to descriptors with names and pint abbreviations
- Lookups are cached and absence is reported as None, never raised
- Custom kinds are found through a static attribute, a static accessor, or registration
- A hinted kind expressed in another enum class is rejected
- Failing discovery code on a hinted type is reported as not found
- A hint takes precedence over a kind registered for the same unit enum
- The pint conversion primitive, including a round trip within tolerance
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

import pytest

from qframe import QuantityAnnotation, QuantityKindDescriptor, UnknownQuantityKindError, UnknownUnitError
from qframe.units import BUILTIN_KINDS, AngleUnit, LengthUnit, TemperatureUnit, VolumeUnit
from sample_frames import Coolness, CoolnessUnit, Rubbish, SmellUnit, Stale


class Flavor(Enum):
    SWEET = "sweet"


def test_builtin_unit(registry):
    """A built-in unit resolves without a hint."""
    descriptor = registry.resolve_unit(VolumeUnit.CUBIC_METER)
    assert descriptor.unit is VolumeUnit.CUBIC_METER
    assert descriptor.name == "CubicMeter"
    assert descriptor.kind.name == "Volume"
    assert descriptor.kind.builtin
    assert descriptor.abbreviation == "m ** 3"


def test_unit_lookup_is_cached(registry):
    """The same descriptor object is returned on every lookup."""
    first = registry.resolve_unit(LengthUnit.METER)
    assert registry.resolve_unit(LengthUnit.METER) is first
    assert LengthUnit.METER in registry.caches.units


def test_unknown_unit_is_none(registry):
    """Enums outside every kind resolve to None and are not cached."""
    assert registry.resolve_unit(Flavor.SWEET) is None
    assert registry.resolve_quantity_kind(Flavor.SWEET) is None
    assert Flavor.SWEET not in registry.caches.units


def test_non_enum_unit_is_none(registry):
    """Non-enum values are treated as not found."""
    assert registry.resolve_unit("meter") is None
    assert registry.resolve_quantity_kind(1.0) is None


def test_each_builtin_unit_belongs_to_one_kind():
    """No unit enum is shared between built-in kinds."""
    unit_types = [kind.unit_type for kind in BUILTIN_KINDS]
    assert len(unit_types) == len(set(unit_types))


def test_custom_kind_from_static_attribute(registry):
    """A class-level QuantityKindDescriptor on the hinted type is discovered."""
    kind = registry.resolve_quantity_kind(CoolnessUnit.FONZIE, Coolness)
    assert kind is Coolness.quantity_kind
    assert not kind.builtin
    assert "fonzie" in registry.ureg


def test_custom_kind_from_static_accessor(registry):
    """A zero-argument static method returning a descriptor is discovered."""
    kind = registry.resolve_quantity_kind(CoolnessUnit.MEGAFONZIE, Stale)
    assert kind.name == "Stale"
    assert kind.units == (CoolnessUnit.MEGAFONZIE,)


def test_custom_unit_outside_valid_units(registry):
    """The kind resolves but a unit it does not list does not."""
    assert registry.resolve_quantity_kind(CoolnessUnit.FONZIE, Stale) is not None
    assert registry.resolve_unit(CoolnessUnit.FONZIE, Stale) is None


def test_custom_kind_needs_hint(registry):
    """Without a hint or a registration, custom units stay unknown."""
    assert registry.resolve_unit(CoolnessUnit.FONZIE) is None


def test_hinted_kind_with_other_unit_type_is_rejected(registry):
    """A kind expressed in another enum class is not accepted for the unit."""
    assert registry.resolve_quantity_kind(SmellUnit.PONG, Coolness) is None


def test_default_instance_kind(registry):
    """A default-constructible type exposing `quantity_kind` on instances is discovered."""

    class Charm:
        def __init__(self, value: float = 0.0, unit: Enum | None = None) -> None:
            self.value = value
            self.unit = unit
            self.quantity_kind = QuantityKindDescriptor("Charm", CoolnessUnit, Charm, definitions=("fonzie = [coolness]",))

    kind = registry.resolve_quantity_kind(CoolnessUnit.KILOFONZIE, Charm)
    assert kind.name == "Charm"


def test_registered_kind_resolves_without_hint(registry):
    """Explicitly registered kinds are matched on the unit's enum class."""
    registry.register_custom_quantity_kind(Coolness, lambda: Coolness.quantity_kind)
    descriptor = registry.resolve_unit(CoolnessUnit.KILOFONZIE)
    assert descriptor.kind is Coolness.quantity_kind
    assert descriptor.name == "Kilofonzie"


def test_register_discovers_descriptor(registry):
    """Registering without a factory discovers the descriptor on the type."""
    kind = registry.register_custom_quantity_kind(Stale)
    assert kind.name == "Stale"


def test_register_without_descriptor_fails(registry):
    """Registration fails loudly when no descriptor can be found."""

    class Nothing:
        pass

    with pytest.raises(UnknownQuantityKindError, match="does not describe a quantity kind"):
        registry.register_custom_quantity_kind(Nothing)


def test_registered_kind_reports_unknown_unit(registry):
    """A registered kind that does not list a unit yields an unknown unit, not an unknown kind."""
    registry.register_custom_quantity_kind(Stale)

    assert registry.resolve_quantity_kind(CoolnessUnit.FONZIE).name == "Stale"
    assert registry.resolve_unit(CoolnessUnit.FONZIE) is None
    with pytest.raises(UnknownUnitError, match=r"CoolnessUnit\.FONZIE is not a known unit value\."):
        registry.as_quantity(1.0, CoolnessUnit.FONZIE)


class TickUnit(Enum):
    TICK = "tick"


class Fragile:
    """Default-constructible, but refuses to be built without a unit."""

    def __init__(self, value: float = 0.0, unit: TickUnit | None = None) -> None:
        if unit is None:
            raise ValueError("unit required")
        self.value = value
        self.unit = unit
        self.quantity_kind = QuantityKindDescriptor("Tick", TickUnit, Fragile, definitions=("tick = [clock]",))


class Brittle:
    """Static accessor that fails when called."""

    def __init__(self, value: float, unit: TickUnit) -> None:
        self.value = value
        self.unit = unit

    @staticmethod
    def info() -> QuantityKindDescriptor:
        raise RuntimeError("catalog unavailable")


@dataclass
class Metronome:
    beat: Annotated[float, QuantityAnnotation(TickUnit.TICK, quantity_type=Fragile)] = 0.0


@pytest.mark.parametrize("hint", [Fragile, Brittle])
def test_failing_discovery_is_not_found(registry, hint):
    """Exceptions raised by a hinted type during discovery are reported as None."""
    assert registry.resolve_quantity_kind(TickUnit.TICK, hint) is None
    assert registry.resolve_unit(TickUnit.TICK, hint) is None


def test_failing_discovery_is_soft_absence(registry):
    """A declared unit whose kind cannot be discovered is left unset."""
    assert registry.resolve_type_metadata(Metronome)["beat"].unit is None


def test_hint_wins_over_registered_kind(registry):
    """A kind registered for an enum class does not override a hinted type's own kind."""
    registry.register_custom_quantity_kind(Coolness)

    assert registry.resolve_unit(CoolnessUnit.MEGAFONZIE).kind is Coolness.quantity_kind
    assert registry.resolve_unit(CoolnessUnit.MEGAFONZIE, Stale).kind.name == "Stale"

    coolness = registry.resolve_type_metadata(Rubbish)["coolness"]
    assert coolness.unit.kind.name == "Stale"
    assert coolness.conversions == ()
    assert (CoolnessUnit.MEGAFONZIE, Stale) in registry.caches.units


def test_convert_value(registry):
    """The conversion primitive delegates to pint."""
    assert registry.units.convert_value(1, LengthUnit.METER, LengthUnit.CENTIMETER) == pytest.approx(100)
    assert registry.units.convert_value(0, TemperatureUnit.DEGREE_CELSIUS, TemperatureUnit.KELVIN) == pytest.approx(
        273.15
    )
    assert registry.units.convert_value(180, AngleUnit.DEGREE, AngleUnit.RADIAN) == pytest.approx(3.14159, rel=1e-5)


@pytest.mark.parametrize(
    "value, source, target",
    [
        (1.5, LengthUnit.METER, LengthUnit.INCH),
        (12.0, LengthUnit.MILE, LengthUnit.KILOMETER),
        (6.0, VolumeUnit.CUBIC_METER, VolumeUnit.CUBIC_INCH),
        (21.0, TemperatureUnit.DEGREE_CELSIUS, TemperatureUnit.DEGREE_FAHRENHEIT),
    ],
)
def test_round_trip(registry, value, source, target):
    """Converting there and back returns the original value within 1e-3 relative."""
    there = registry.units.convert_value(value, source, target)
    back = registry.units.convert_value(there, target, source)
    assert back == pytest.approx(value, rel=1e-3)


def test_custom_kind_from_classmethod_accessor(registry):
    """A zero-argument classmethod returning a descriptor is discovered."""

    class Chime:
        def __init__(self, value: float, unit: TickUnit) -> None:
            self.value = value
            self.unit = unit

        @classmethod
        def describe(cls) -> QuantityKindDescriptor:
            return QuantityKindDescriptor("Chime", TickUnit, cls, definitions=("tick = [clock]",))

    kind = registry.resolve_quantity_kind(TickUnit.TICK, Chime)
    assert kind.name == "Chime"
    assert registry.resolve_unit(TickUnit.TICK, Chime).kind is kind
