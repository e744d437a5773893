"""String formatting for units and quantities."""

import re
from enum import Enum
from typing import Any

import pint


def unit_display_name(unit: Enum) -> str:
    """Turn an enum member name into a human name (``CUBIC_METER`` -> ``CubicMeter``)."""
    return "".join(part.capitalize() for part in unit.name.split("_"))


def unit_label(unit: Enum) -> str:
    """Qualified label used in error messages (``LengthUnit.METER``)."""
    return f"{type(unit).__name__}.{unit.name}"


def format_unit_str(ureg: pint.UnitRegistry, expression: str) -> str:
    """Format a pint unit expression in short symbol form.

    Parameters
    ----------
    ureg : pint.UnitRegistry
        Registry that knows the unit.
    expression : str
        A pint unit expression, e.g. ``"meter**3"`` or ``"force_pound * foot"``.

    Returns
    -------
    str
        Abbreviated unit string (``"m ** 3"``, ``"ft * lbf"``). Expressions pint
        cannot parse are returned unchanged.
    """
    try:
        return f"{ureg.Unit(expression):~}"
    except (pint.errors.UndefinedUnitError, pint.errors.DefinitionSyntaxError, AttributeError, ValueError):
        return expression


def format_quantity(value: Any, abbreviation: str) -> str:
    """Render a magnitude with its unit symbol, dropping a trailing ``.0``."""
    text = f"{value:g}" if isinstance(value, float) else str(value)
    text = re.sub(r"\.0$", "", text)
    return f"{text} {abbreviation}".strip()
