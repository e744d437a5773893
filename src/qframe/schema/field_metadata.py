"""
Structured representation of resolved quantity metadata for one field.

Defines FieldRef (the field identity) and FieldMetadata (its declared unit and conversion
allow-list). Both are immutable; subclasses that override an inherited declaration get a
clone carrying the concrete field identity.
"""

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from qframe.errors import TypeIncompatibleError
from qframe.schema.descriptors import UnitDescriptor
from qframe.utils.validation import is_numeric_type, type_name


@dataclass(frozen=True)
class FieldRef:
    """
    Identity of a field.

    Attributes
    ----------
    name : str
        Field name.
    declaring_type : type
        Class that declares the field.
    value_type : Any
        Declared value type, with ``Annotated``/``Optional`` wrappers removed.
    accessor : Callable[[Any], Any]
        Reads the field from an instance.
    """

    name: str
    declaring_type: type
    value_type: Any
    accessor: Callable[[Any], Any] = field(compare=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if self.accessor is None:
            object.__setattr__(self, "accessor", operator.attrgetter(self.name))

    @property
    def qualified_name(self) -> str:
        """str: ``Type.field`` label used in messages."""
        return f"{self.declaring_type.__name__}.{self.name}"


@dataclass(frozen=True)
class FieldMetadata:
    """
    Unit metadata of one annotated field of a concrete type.

    Attributes
    ----------
    field : FieldRef
        Field identity.
    unit : UnitDescriptor or None
        Declared unit; ``None`` when the declaration could not be resolved or is
        supplied dynamically.
    conversions : tuple[UnitDescriptor, ...]
        Resolved allow-list of conversion targets.
    culture : str or None
        Culture the metadata was resolved for.
    display_name : str or None
        Human label.
    description : str or None
        Free-text description.
    """

    field: FieldRef
    unit: UnitDescriptor | None
    conversions: tuple[UnitDescriptor, ...] = ()
    culture: str | None = None
    display_name: str | None = None
    description: str | None = None

    @property
    def field_name(self) -> str:
        """str: Name of the field."""
        return self.field.name

    def validate(self) -> None:
        """Raise ``TypeIncompatibleError`` if the field's value type cannot hold a quantity value."""
        if not is_numeric_type(self.field.value_type):
            raise TypeIncompatibleError(
                f"{self.field.qualified_name} type of {type_name(self.field.value_type)} "
                "is not compatible with quantity values."
            )

    def find_conversion(self, unit: Any) -> UnitDescriptor | None:
        """Return the allow-list entry for `unit`, matched by unit identity."""
        for conversion in self.conversions:
            if conversion.unit is unit:
                return conversion
        return None

    def clone(
        self,
        field: FieldRef | None = None,
        unit: UnitDescriptor | None = None,
        conversions: Iterable[UnitDescriptor] | None = None,
        culture: str | None = None,
        display_name: str | None = None,
        description: str | None = None,
    ) -> "FieldMetadata":
        """Copy with overrides; arguments left as ``None`` keep the current value."""
        return replace(
            self,
            field=field or self.field,
            unit=unit or self.unit,
            conversions=self.conversions if conversions is None else tuple(conversions),
            culture=culture or self.culture,
            display_name=display_name or self.display_name,
            description=description or self.description,
        )
