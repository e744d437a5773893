"""
Quantity annotation declared by host code on each field.

Used inside ``typing.Annotated``::

    @dataclass
    class Box:
        width: Annotated[float, QuantityAnnotation(LengthUnit.METER, LengthUnit.DECIMETER)]

or as a value of an explicit schema table passed to ``MetadataRegistry.register_schema``.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from qframe.utils.validation import validate_unit


@dataclass(frozen=True, init=False)
class QuantityAnnotation:
    """
    Declares a field as a quantity.

    Attributes
    ----------
    unit : Enum or None
        Declared unit. ``None`` defers to a dynamic metadata provider.
    conversions : tuple[Enum, ...]
        Ordered allow-list of units the value may be converted to.
    quantity_type : type or None
        Hint naming the runtime type of a custom quantity kind.
    display_name : str or None
        Human label of the field (e.g. "Engine Torque").
    description : str or None
        Free-text description.
    """

    unit: Enum | None
    conversions: tuple[Enum, ...] = field(default_factory=tuple)
    quantity_type: type | None = None
    display_name: str | None = None
    description: str | None = None

    def __init__(
        self,
        unit: Enum | None = None,
        *conversions: Enum,
        quantity_type: type | None = None,
        display_name: str | None = None,
        description: str | None = None,
    ) -> None:
        object.__setattr__(self, "unit", validate_unit(unit, allow_none=True))
        object.__setattr__(self, "conversions", tuple(validate_unit(c) for c in _flatten(conversions)))
        object.__setattr__(self, "quantity_type", quantity_type)
        object.__setattr__(self, "display_name", display_name)
        object.__setattr__(self, "description", description)

    @property
    def declares_conversions(self) -> bool:
        """bool: True if the annotation lists its own allow-list."""
        return bool(self.conversions)


def _flatten(values: Iterable[Any]) -> list[Any]:
    """Allow conversions to be given either as varargs or as one iterable."""
    flat = []
    for value in values:
        if isinstance(value, (list, tuple, set, frozenset)):
            flat.extend(value)
        else:
            flat.append(value)
    return flat
