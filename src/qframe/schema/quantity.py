"""
Structured representation of a quantity value.

Defines the Quantity dataclass, the representation type of every built-in quantity kind:
a magnitude tagged with the unit it is expressed in.
"""

from dataclasses import dataclass
from enum import Enum

import pint


@dataclass(frozen=True)
class Quantity:
    """
    A magnitude with its unit.

    Attributes
    ----------
    value : float
        Magnitude expressed in `unit`.
    unit : Enum
        Unit value; its enum class identifies the quantity kind.

    Notes
    -----
    - Instances are produced by ``QuantityConverter``; build them directly only for
      comparison in host code.
    - Use ``to_pint`` to continue computing with pint.
    """

    value: float
    unit: Enum

    def to_pint(self, ureg: pint.UnitRegistry) -> pint.Quantity:
        """Return the equivalent ``pint.Quantity`` in `ureg`."""
        return ureg.Quantity(self.value, str(self.unit.value))

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"
