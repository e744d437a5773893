"""
Construct the pint unit registry used for every numeric conversion.

Each ``MetadataRegistry`` owns its own pint registry so that custom quantity kinds
registered in one (for instance in one test) never leak into another.
"""

from collections.abc import Iterable

import pint


def load_unit_registry(definitions: Iterable[str] = ()) -> pint.UnitRegistry:
    """
    Create a pint ``UnitRegistry`` with qframe's settings.

    Parameters
    ----------
    definitions : iterable of str, optional
        Extra pint definition lines (e.g. ``"fonzie = [coolness]"``) loaded after the
        default catalog.

    Returns
    -------
    pint.UnitRegistry
        Registry with offset units (degC, degF) converted through their base unit.
    """
    ureg = pint.UnitRegistry(autoconvert_offset_to_baseunit=True)
    for line in definitions:
        ureg.define(line)
    return ureg
