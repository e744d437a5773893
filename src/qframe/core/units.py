"""
Resolve unit values to unit and quantity-kind descriptors.

Wraps pint and the built-in catalog: given an enum unit value, find the kind it belongs to
and its full descriptor. Custom kinds are located through an explicit registration, a
static accessor on the hinted quantity type, or a default-constructible instance of it.
Lookups report absence as ``None``; deciding whether absence is fatal is up to callers.
"""

import inspect
import threading
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

import pint

from qframe.core.cache import MetadataCache
from qframe.errors import UnknownQuantityKindError
from qframe.schema.descriptors import QuantityKindDescriptor, UnitDescriptor
from qframe.units.catalog import BUILTIN_KINDS
from qframe.utils.format import format_unit_str, unit_display_name
from qframe.utils.logging import get_logger

KindFactory = Callable[[], QuantityKindDescriptor]


class UnitResolver:
    """
    Unit and quantity-kind lookups backed by pint.

    Parameters
    ----------
    ureg : pint.UnitRegistry
        Registry used for conversions and for loading custom kind definitions.
    unit_cache : MetadataCache
        Cache of UnitDescriptor keyed by unit value for built-in units, and by
        ``(unit value, quantity type hint)`` for custom units.
    kind_cache : MetadataCache
        Cache of QuantityKindDescriptor keyed by ``(unit value, quantity type hint)``.
    builtin_kinds : iterable of QuantityKindDescriptor, optional
        Built-in catalog. Defaults to ``qframe.units.BUILTIN_KINDS``.
    verbose : bool, optional
        Log lookups at DEBUG level.
    """

    def __init__(
        self,
        ureg: pint.UnitRegistry,
        unit_cache: MetadataCache,
        kind_cache: MetadataCache,
        builtin_kinds: Iterable[QuantityKindDescriptor] = BUILTIN_KINDS,
        verbose: bool = False,
    ) -> None:
        self.ureg = ureg
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._units = unit_cache
        self._kinds = kind_cache
        self._builtin = {kind.unit_type: kind for kind in builtin_kinds}
        self._registered: dict[type, QuantityKindDescriptor] = {}
        self._registered_by_unit_type: dict[type[Enum], QuantityKindDescriptor] = {}
        self._definitions_lock = threading.Lock()
        self._defined: set[type[Enum]] = set()

    def register_custom_quantity_kind(
        self, quantity_type: type, factory: KindFactory | QuantityKindDescriptor | None = None
    ) -> QuantityKindDescriptor:
        """
        Register the quantity kind represented by `quantity_type`.

        Parameters
        ----------
        quantity_type : type
            Runtime type of the custom quantities.
        factory : callable, QuantityKindDescriptor or None, optional
            Produces the kind descriptor. If omitted, the descriptor is discovered on
            `quantity_type` (static accessor, then default instance).

        Returns
        -------
        QuantityKindDescriptor
            The registered descriptor, with its pint definitions loaded.
        """
        if factory is None:
            descriptor = self._discover_kind(quantity_type)
        elif isinstance(factory, QuantityKindDescriptor):
            descriptor = factory
        else:
            descriptor = factory()

        if not isinstance(descriptor, QuantityKindDescriptor):
            self.logger.error(f"No quantity kind descriptor available for {quantity_type.__name__}.")
            raise UnknownQuantityKindError(f"{quantity_type.__name__} does not describe a quantity kind.")

        self._load_definitions(descriptor)
        self._registered[quantity_type] = descriptor
        self._registered_by_unit_type[descriptor.unit_type] = descriptor
        self.logger.info(f"Registered custom quantity kind '{descriptor.name}' for {quantity_type.__name__}")
        return descriptor

    def resolve_unit(self, unit: Any, quantity_type: type | None = None) -> UnitDescriptor | None:
        """
        Find the descriptor of `unit`.

        Parameters
        ----------
        unit : Enum
            Unit value.
        quantity_type : type, optional
            Hint naming the runtime type of a custom kind.

        Returns
        -------
        UnitDescriptor or None
            None if the unit does not belong to any known or discoverable kind, or if its
            kind is known but does not list it.
        """
        if not isinstance(unit, Enum):
            return None

        # custom units are keyed on the hint too; two types may share a unit enum
        key = unit if type(unit) in self._builtin else (unit, quantity_type)
        hit, descriptor = self._units.try_get(key)
        if hit:
            return descriptor

        kind = self.resolve_quantity_kind(unit, quantity_type)
        if kind is None or not kind.has_unit(unit):
            self.logger.debug(f"Unit {unit!r} could not be resolved (hint: {quantity_type})")
            return None

        descriptor = UnitDescriptor(
            unit=unit,
            kind=kind,
            name=unit_display_name(unit),
            abbreviation=format_unit_str(self.ureg, str(unit.value)),
        )
        return self._units.add(key, descriptor)

    def resolve_quantity_kind(self, unit: Any, quantity_type: type | None = None) -> QuantityKindDescriptor | None:
        """
        Find the quantity kind `unit` belongs to.

        Kinds are matched on the unit's enum class, in order: the built-in catalog, the
        kind of the hinted `quantity_type` (registered or discovered on it), then kinds
        registered for the enum class. Whether the kind lists `unit` is left to
        ``resolve_unit``.
        """
        if not isinstance(unit, Enum):
            return None

        key = (unit, quantity_type)
        hit, kind = self._kinds.try_get(key)
        if hit:
            return kind

        kind = self._builtin.get(type(unit))
        if kind is None and quantity_type is not None:
            kind = self._find_hinted_kind(unit, quantity_type)
        if kind is None:
            kind = self._registered_by_unit_type.get(type(unit))
        if kind is None:
            self.logger.debug(f"No quantity kind found for {unit!r} (hint: {quantity_type})")
            return None

        return self._kinds.add(key, kind)

    def convert_value(self, value: Any, from_unit: Enum, to_unit: Enum) -> float:
        """Convert a magnitude between two units of the same kind through pint."""
        quantity = self.ureg.Quantity(float(value), str(from_unit.value))
        return float(quantity.to(str(to_unit.value)).magnitude)

    def _find_hinted_kind(self, unit: Enum, quantity_type: type) -> QuantityKindDescriptor | None:
        kind = self._registered.get(quantity_type) or self._discover_kind(quantity_type)
        if kind is None or not kind.accepts(unit):
            return None

        self._load_definitions(kind)
        self.logger.info(f"Discovered quantity kind '{kind.name}' on {quantity_type.__name__}")
        return kind

    def _discover_kind(self, quantity_type: type) -> QuantityKindDescriptor | None:
        """Look for a static accessor, then for a default-constructible instance."""
        if not inspect.isclass(quantity_type):
            return None
        return self._static_kind(quantity_type) or self._instance_kind(quantity_type)

    def _static_kind(self, quantity_type: type) -> QuantityKindDescriptor | None:
        candidates = []
        for name, attr in inspect.getmembers_static(quantity_type):
            if name.startswith("__"):
                continue
            if isinstance(attr, QuantityKindDescriptor):
                candidates.append(attr)
            elif isinstance(attr, (staticmethod, classmethod)):
                returns = inspect.signature(attr.__func__).return_annotation
                if returns not in (QuantityKindDescriptor, QuantityKindDescriptor.__name__):
                    continue
                try:
                    candidates.append(getattr(quantity_type, name)())
                except Exception as e:
                    self.logger.debug(f"{quantity_type.__name__}.{name}() failed: {e!r}")
                    return None

        # an ambiguous accessor is treated as no accessor
        return candidates[0] if len(candidates) == 1 else None

    def _instance_kind(self, quantity_type: type) -> QuantityKindDescriptor | None:
        try:
            signature = inspect.signature(quantity_type)
        except (TypeError, ValueError):
            return None

        required = [
            p
            for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        ]
        if required:
            return None

        try:
            instance = quantity_type()
        except Exception as e:
            self.logger.debug(f"Default construction of {quantity_type.__name__} failed: {e!r}")
            return None

        kind = getattr(instance, "quantity_kind", None)
        return kind if isinstance(kind, QuantityKindDescriptor) else None

    def _load_definitions(self, kind: QuantityKindDescriptor) -> None:
        """Define a custom kind's units in pint once."""
        if kind.builtin or kind.unit_type in self._defined:
            return

        with self._definitions_lock:
            if kind.unit_type in self._defined:
                return
            for line in kind.definitions:
                name = line.split("=", 1)[0].strip()
                if name not in self.ureg:
                    self.logger.debug(f"Defining pint unit: {line}")
                    self.ureg.define(line)
            self._defined.add(kind.unit_type)
