"""
Structured representation of quantity kinds and units.

Defines the QuantityKindDescriptor and UnitDescriptor dataclasses. Both are immutable and
are created once per kind or unit, then shared through the registry caches.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class QuantityKindDescriptor:
    """
    A kind of measurement (length, mass, or a host-defined kind such as "coolness").

    Attributes
    ----------
    name : str
        Kind name, e.g. ``"Length"``.
    unit_type : type[Enum]
        Enumeration whose members are this kind's unit values. Member values are pint
        unit expressions.
    quantity_type : type
        Runtime type representing quantities of this kind. Built-in kinds use
        ``qframe.schema.quantity.Quantity``; custom kinds use their own class.
    builtin : bool
        True for kinds in the built-in catalog.
    definitions : tuple[str, ...]
        pint definition lines the kind's units need (custom kinds only).
    valid_units : tuple[Enum, ...]
        Subset of ``unit_type`` members that belong to the kind. Empty means all members.

    Notes
    -----
    - A unit value belongs to exactly one kind: the kind owning its enum class.
    """

    name: str
    unit_type: type[Enum]
    quantity_type: type
    builtin: bool = False
    definitions: tuple[str, ...] = field(default_factory=tuple)
    valid_units: tuple[Enum, ...] = field(default_factory=tuple)

    @property
    def units(self) -> tuple[Enum, ...]:
        """tuple[Enum, ...]: The kind's unit values, in declaration order."""
        return self.valid_units if self.valid_units else tuple(self.unit_type)

    def accepts(self, unit: Enum) -> bool:
        """Return True if `unit` is represented by this kind's enumeration."""
        return type(unit) is self.unit_type

    def has_unit(self, unit: Enum) -> bool:
        """Return True if `unit` is one of the kind's units."""
        return self.accepts(unit) and unit in self.units


@dataclass(frozen=True)
class UnitDescriptor:
    """
    One concrete unit within a quantity kind.

    Attributes
    ----------
    unit : Enum
        The unit value.
    kind : QuantityKindDescriptor
        The kind the unit belongs to.
    name : str
        Human name, e.g. ``"CubicMeter"``.
    abbreviation : str
        Short symbol from pint, e.g. ``"m ** 3"``.
    """

    unit: Enum
    kind: QuantityKindDescriptor
    name: str
    abbreviation: str

    @property
    def expression(self) -> str:
        """str: pint unit expression of the unit."""
        return str(self.unit.value)

    def __str__(self) -> str:
        return self.name
