"""
Materialize and convert field values as quantities.

Reads a field's raw numeric value through a cached accessor, checks the request against
the field's resolved metadata, and builds a quantity in the declared unit or in one of the
allowed conversion targets. Built-in kinds convert through pint; custom kinds convert
through the same primitive and are then built with their ``(value, unit)`` constructor.
"""

import inspect
import typing
from collections.abc import Callable
from enum import Enum
from typing import Any

from qframe.core.cache import MetadataCache
from qframe.core.provider import QuantityMetadataProvider
from qframe.core.resolver import FieldMetadataResolver
from qframe.core.units import UnitResolver
from qframe.errors import (
    AccessorMissingError,
    ConversionNotAllowedError,
    MetadataMissingError,
    TypeIncompatibleError,
    UnknownQuantityKindError,
    UnknownUnitError,
)
from qframe.schema.descriptors import QuantityKindDescriptor, UnitDescriptor
from qframe.schema.field_metadata import FieldMetadata, FieldRef
from qframe.schema.quantity import Quantity
from qframe.utils.format import unit_label
from qframe.utils.logging import get_logger
from qframe.utils.selector import extract_field_name
from qframe.utils.validation import is_numeric_type, is_numeric_value, type_name, unwrap_value_type

FieldSelector = str | Callable[[Any], Any]


class QuantityConverter:
    """
    Build quantity values from annotated fields.

    Parameters
    ----------
    resolver : FieldMetadataResolver
        Source of type metadata.
    units : UnitResolver
        Unit lookups and the numeric conversion primitive.
    accessor_cache : MetadataCache
        Validated accessors keyed by ``(declaring type, value type, field name)``.
    constructor_cache : MetadataCache
        Custom quantity constructors keyed by quantity type.
    verbose : bool, optional
        Log conversion steps at DEBUG level.
    """

    def __init__(
        self,
        resolver: FieldMetadataResolver,
        units: UnitResolver,
        accessor_cache: MetadataCache,
        constructor_cache: MetadataCache,
        verbose: bool = False,
    ) -> None:
        self.resolver = resolver
        self.units = units
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._accessors = accessor_cache
        self._constructors = constructor_cache

    def get_quantity(self, instance: Any, field: FieldSelector, culture: str | None = None) -> Any:
        """
        Return the value of `field` as a quantity in its declared unit.

        Parameters
        ----------
        instance : object
            Annotated record.
        field : str or callable
            Field name or selector (``lambda box: box.width``).
        culture : str, optional
            Culture to resolve metadata for.

        Returns
        -------
        Quantity or custom quantity type
            The field value tagged with its declared unit.
        """
        metadata = self.quantity_metadata(instance, field, culture)
        value = self._read_value(instance, metadata.field)
        self.logger.debug(f"{metadata.field.qualified_name} = {value} {metadata.unit.name}")
        return self._build_quantity(value, metadata.unit)

    def convert_quantity(self, instance: Any, field: FieldSelector, to: Enum, culture: str | None = None) -> Any:
        """
        Return the value of `field` converted to `to`.

        `to` must be the declared unit or one of the field's allowed conversions. A
        conversion to the declared unit returns the raw value without a pint round trip.
        Built-in quantities store their magnitude as ``float``, so a ``Decimal`` field is
        narrowed exactly as ``get_quantity`` narrows it.

        Raises
        ------
        ConversionNotAllowedError
            If `to` is not allowed for the field.
        """
        metadata = self.quantity_metadata(instance, field, culture)
        unit = metadata.unit

        if to is unit.unit:
            return self._build_quantity(self._read_value(instance, metadata.field), unit)

        target = metadata.find_conversion(to)
        if target is None or target.kind != unit.kind:
            self.logger.error(f"{metadata.field.qualified_name}: conversion to {to!r} is not allowed")
            raise ConversionNotAllowedError(
                f"{metadata.field.qualified_name} ({unit_label(unit.unit)}) cannot be converted to {_label(to)}."
            )

        value = self._read_value(instance, metadata.field)
        converted = self.units.convert_value(value, unit.unit, target.unit)
        self.logger.debug(f"{metadata.field.qualified_name}: {value} {unit.name} -> {converted} {target.name}")
        return self._build_quantity(converted, target)

    def as_quantity(self, value: Any, unit: Enum, quantity_type: type | None = None) -> Any:
        """
        Build a quantity from a number and a unit value.

        Raises
        ------
        UnknownQuantityKindError
            If the unit's kind cannot be resolved.
        UnknownUnitError
            If the kind is known but `unit` is not one of its units.
        """
        if self.units.resolve_quantity_kind(unit, quantity_type) is None:
            raise UnknownQuantityKindError(f"{type(unit).__name__} is not a known unit type.")
        descriptor = self.units.resolve_unit(unit, quantity_type)
        if descriptor is None:
            raise UnknownUnitError(f"{_label(unit)} is not a known unit value.")
        return self._build_quantity(value, descriptor)

    def quantity_metadata(self, instance: Any, field: FieldSelector, culture: str | None = None) -> FieldMetadata:
        """
        Return the metadata used to materialize `field` of `instance`.

        Static metadata is resolved for the instance's concrete type; if the instance is a
        ``QuantityMetadataProvider`` its answer is merged over it.

        Raises
        ------
        AccessorMissingError
            If `field` is not a public field of the instance's type.
        MetadataMissingError
            If no unit is declared or supplied for the field.
        """
        name = extract_field_name(field)
        owner = type(instance)
        metadata = self.resolver.resolve(owner, culture).get(name)

        if name.startswith("_") or (metadata is None and not hasattr(instance, name)):
            self.logger.error(f"{name} is not a field of {owner.__name__}")
            raise AccessorMissingError(f"{name} is not a field of {owner.__name__}.")

        if isinstance(instance, QuantityMetadataProvider):
            annotation = instance.get_quantity_metadata(name, culture)
            if annotation is not None:
                self.logger.debug(f"{owner.__name__}.{name}: using metadata supplied by the instance")
                field_ref = metadata.field if metadata else self._dynamic_field(instance, name)
                metadata = self.resolver.field_from_annotation(field_ref, annotation, culture, inherited=metadata)
                metadata.validate()

        if metadata is None or metadata.unit is None:
            qualified = metadata.field.qualified_name if metadata else f"{owner.__name__}.{name}"
            self.logger.error(f"Unit metadata does not exist for {qualified}")
            raise MetadataMissingError(f"Unit metadata does not exist for {qualified}.")

        return metadata

    @staticmethod
    def _dynamic_field(instance: Any, name: str) -> FieldRef:
        """Identity of a field that only the instance describes."""
        owner = type(instance)
        hints = typing.get_type_hints(owner)
        value_type = unwrap_value_type(hints[name]) if name in hints else type(getattr(instance, name))
        return FieldRef(name=name, declaring_type=owner, value_type=value_type)

    def _read_value(self, instance: Any, field: FieldRef) -> Any:
        accessor = self._accessors.get_or_add(
            (field.declaring_type, field.value_type, field.name),
            lambda key: self._find_accessor(field, type(instance)),
        )
        try:
            value = accessor(instance)
        except AttributeError as e:
            raise AccessorMissingError(f"{field.qualified_name} does not have a public getter.") from e

        if not is_numeric_value(value):
            self.logger.error(f"{field.qualified_name} holds a {type(value).__name__}")
            raise TypeIncompatibleError(
                f"{field.qualified_name} type of {type(value).__name__} is not compatible with quantity values."
            )
        return value

    def _find_accessor(self, field: FieldRef, owner: type) -> Callable[[Any], Any]:
        """Check that `field` can be read publicly and holds a numeric type."""
        self.logger.debug(f"Looking up accessor for {field.qualified_name}")
        attr = inspect.getattr_static(owner, field.name, None)
        if field.name.startswith("_") or (isinstance(attr, property) and attr.fget is None):
            raise AccessorMissingError(f"{field.qualified_name} does not have a public getter.")
        if not is_numeric_type(field.value_type):
            raise TypeIncompatibleError(
                f"{field.qualified_name} type of {type_name(field.value_type)} is not compatible with quantity values."
            )
        return field.accessor

    def _build_quantity(self, value: Any, unit: UnitDescriptor) -> Any:
        kind = unit.kind
        if kind.builtin or kind.quantity_type is Quantity:
            return Quantity(float(value), unit.unit)

        constructor, value_type = self._constructors.get_or_add(kind.quantity_type, lambda key: self._find_constructor(kind))
        return constructor(value_type(value), unit.unit)

    def _find_constructor(self, kind: QuantityKindDescriptor) -> tuple[type, type]:
        """
        Locate a ``(value, unit)`` constructor on a custom kind's quantity type.

        Returns
        -------
        tuple[type, type]
            The quantity type and the numeric type its first parameter expects.
        """
        quantity_type = kind.quantity_type
        self.logger.debug(f"Looking up (value, unit) constructor on {quantity_type.__name__}")

        try:
            signature = inspect.signature(quantity_type)
        except (TypeError, ValueError):
            signature = None

        if signature is not None:
            params = [
                p
                for p in signature.parameters.values()
                if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
            ]
            try:
                hints = typing.get_type_hints(quantity_type.__init__)
            except (NameError, TypeError):
                hints = {}

            if len(params) == 2:
                value_hint = hints.get(params[0].name, params[0].annotation)
                unit_hint = hints.get(params[1].name, params[1].annotation)
                if _accepts_value(value_hint) and _accepts_unit(unit_hint, kind.unit_type):
                    value_type = value_hint if is_numeric_type(value_hint) else float
                    return quantity_type, value_type

        self.logger.error(f"No (value, unit) constructor on {quantity_type.__name__}")
        raise AccessorMissingError(
            "Unable to create quantity. No constructor found compatible with "
            f"{quantity_type.__name__}(float, {kind.unit_type.__name__})"
        )


def _accepts_value(hint: Any) -> bool:
    return hint is inspect.Parameter.empty or isinstance(hint, str) or is_numeric_type(hint)


def _accepts_unit(hint: Any, unit_type: type[Enum]) -> bool:
    if hint is inspect.Parameter.empty or isinstance(hint, str):
        return True
    return inspect.isclass(hint) and issubclass(unit_type, hint)


def _label(unit: Any) -> str:
    return unit_label(unit) if isinstance(unit, Enum) else repr(unit)
