"""
Build the quantity metadata of a type.

Walks the type's MRO from its most basic class to the concrete class and collects quantity
annotations declared on class attributes (``Annotated[float, QuantityAnnotation(...)]``),
on property getters (return annotation), or in an explicitly registered schema table.
Declarations on bases and on ``Protocol``/ABC interfaces are inherited; a redeclaration
further down the MRO replaces the inherited one while keeping a single entry per name.
"""

import inspect
import types
import typing
from collections.abc import Mapping
from functools import cached_property
from typing import Any

from qframe.core.cache import MetadataCache
from qframe.core.units import UnitResolver
from qframe.schema.annotation import QuantityAnnotation
from qframe.schema.descriptors import UnitDescriptor
from qframe.schema.field_metadata import FieldMetadata, FieldRef
from qframe.schema.type_metadata import TypeMetadata
from qframe.utils.logging import get_logger
from qframe.utils.validation import unwrap_value_type

# classes that never declare quantity fields
_SKIPPED_BASES = frozenset({object, typing.Protocol, typing.Generic})

SchemaEntry = QuantityAnnotation | tuple[type, QuantityAnnotation]


def find_quantity_annotation(hint: Any) -> QuantityAnnotation | None:
    """Return the QuantityAnnotation carried by an ``Annotated`` hint, if any."""
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        for arg in typing.get_args(hint):
            annotation = find_quantity_annotation(arg)
            if annotation is not None:
                return annotation
        return None

    if origin is typing.Annotated:
        for meta in hint.__metadata__:
            if isinstance(meta, QuantityAnnotation):
                return meta
    return None


class FieldMetadataResolver:
    """
    Resolve and cache TypeMetadata per ``(type, culture)``.

    Parameters
    ----------
    units : UnitResolver
        Resolves declared units and conversion targets.
    type_cache : MetadataCache
        Cache of TypeMetadata keyed by ``(type, culture)``.
    verbose : bool, optional
        Log resolution steps at DEBUG level.
    """

    def __init__(self, units: UnitResolver, type_cache: MetadataCache, verbose: bool = False) -> None:
        self.units = units
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._types = type_cache
        self._schemas: dict[type, dict[str, SchemaEntry]] = {}

    def register_schema(self, type_: type, fields: Mapping[str, SchemaEntry]) -> None:
        """
        Declare quantity fields of `type_` without annotating the class.

        Parameters
        ----------
        type_ : type
            Class the table describes. Entries apply at this class's position in the MRO
            and override annotations the class itself declares.
        fields : Mapping
            Field name to ``QuantityAnnotation``, or to ``(value_type, QuantityAnnotation)``
            when the class does not annotate the field's type. Un-typed fields default to
            ``float``.
        """
        for name, entry in fields.items():
            annotation = entry[1] if isinstance(entry, tuple) else entry
            if not isinstance(annotation, QuantityAnnotation):
                raise TypeError(
                    f"Schema entry for '{name}' must be a QuantityAnnotation, got {type(annotation).__name__}"
                )
        self._schemas[type_] = dict(fields)
        self.logger.debug(f"Registered schema for {type_.__name__}: {list(fields)}")

    def resolve(self, type_: type, culture: str | None = None) -> TypeMetadata:
        """
        Return the TypeMetadata of `type_`, building it on first use.

        Raises
        ------
        TypeIncompatibleError
            If an annotated field's value type cannot hold a quantity value.
        """
        if not inspect.isclass(type_):
            raise TypeError(f"Expected a type, got {type(type_).__name__}: {type_!r}")
        return self._types.get_or_add((type_, culture), lambda key: self._build(*key))

    def field_from_annotation(
        self,
        field: FieldRef,
        annotation: QuantityAnnotation,
        culture: str | None = None,
        inherited: FieldMetadata | None = None,
    ) -> FieldMetadata:
        """
        Resolve one annotation into FieldMetadata.

        When `inherited` is given, the result is a clone of it: the annotation's unit
        replaces the inherited unit when it resolves, and its allow-list replaces the
        inherited allow-list when it declares one.
        """
        unit = None
        if annotation.unit is not None:
            unit = self.units.resolve_unit(annotation.unit, annotation.quantity_type)
            if unit is None:
                self.logger.debug(f"{field.qualified_name}: unit {annotation.unit!r} did not resolve, left unset")

        conversions = self._resolve_conversions(field, annotation, unit or (inherited.unit if inherited else None))

        if inherited is not None:
            return inherited.clone(
                field=field,
                unit=unit,
                conversions=conversions if annotation.declares_conversions else None,
                culture=culture,
                display_name=annotation.display_name,
                description=annotation.description,
            )

        return FieldMetadata(
            field=field,
            unit=unit,
            conversions=conversions,
            culture=culture,
            display_name=annotation.display_name,
            description=annotation.description,
        )

    def _resolve_conversions(
        self, field: FieldRef, annotation: QuantityAnnotation, unit: UnitDescriptor | None
    ) -> tuple[UnitDescriptor, ...]:
        """Resolve the allow-list; unresolvable or foreign-kind entries are dropped."""
        conversions: list[UnitDescriptor] = []
        for target in annotation.conversions:
            descriptor = self.units.resolve_unit(target, annotation.quantity_type)
            if descriptor is None:
                self.logger.debug(f"{field.qualified_name}: dropping unresolved conversion {target!r}")
                continue
            if unit is not None and descriptor.kind != unit.kind:
                self.logger.debug(
                    f"{field.qualified_name}: dropping conversion {target!r}, "
                    f"kind {descriptor.kind.name} differs from {unit.kind.name}"
                )
                continue
            if descriptor not in conversions:
                conversions.append(descriptor)
        return tuple(conversions)

    def _build(self, type_: type, culture: str | None) -> TypeMetadata:
        self.logger.debug(f"Resolving quantity metadata for {type_.__name__} (culture={culture})")
        merged: dict[str, FieldMetadata] = {}

        for klass in reversed(type_.__mro__):
            if klass in _SKIPPED_BASES:
                continue

            for name, (value_type, annotation) in self._declared_members(klass).items():
                inherited = merged.get(name)
                if value_type is None and inherited is not None:
                    value_type = inherited.field.value_type
                field = FieldRef(name=name, declaring_type=klass, value_type=value_type)

                if annotation is None:
                    # plain redeclaration: keep inherited metadata under the concrete identity
                    if inherited is not None:
                        merged[name] = inherited.clone(field=field)
                    continue

                merged[name] = self.field_from_annotation(field, annotation, culture, inherited)

        metadata = TypeMetadata(type_, merged.values(), culture)
        self.logger.debug(f"Resolved {type_.__name__}: {list(metadata)}")
        return metadata

    def _declared_members(self, klass: type) -> dict[str, tuple[Any, QuantityAnnotation | None]]:
        """Fields and properties `klass` itself declares, with their quantity annotation."""
        members: dict[str, tuple[Any, QuantityAnnotation | None]] = {}

        for name, hint in inspect.get_annotations(klass, eval_str=True).items():
            if name.startswith("_") or typing.get_origin(hint) is typing.ClassVar:
                continue
            members[name] = (unwrap_value_type(hint), find_quantity_annotation(hint))

        for name, attr in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(attr, property):
                getter = attr.fget
            elif isinstance(attr, cached_property):
                getter = attr.func
            else:
                continue
            hint = inspect.get_annotations(getter, eval_str=True).get("return") if getter else None
            value_type = unwrap_value_type(hint) if hint is not None else None
            members[name] = (value_type, find_quantity_annotation(hint))

        for name, entry in self._schemas.get(klass, {}).items():
            value_type, annotation = entry if isinstance(entry, tuple) else (None, entry)
            declared_type = members.get(name, (None, None))[0]
            members[name] = (value_type or declared_type or float, annotation)

        return members
