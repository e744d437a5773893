"""
Field selector extraction.

A field may be named directly (``"height"``) or picked with a selector callable
(``lambda box: box.height``). Selectors are run once against a recording proxy that
captures the single attribute they read.
"""

from collections.abc import Callable
from typing import Any

from qframe.errors import AccessorMissingError


class _FieldRecorder:
    """Stand-in object that records attribute reads."""

    def __init__(self) -> None:
        object.__setattr__(self, "_names", [])

    def __getattr__(self, name: str) -> "_FieldRecorder":
        self._names.append(name)
        return self

    # selectors that wrap the read in a numeric cast still name one field
    def __float__(self) -> float:
        return 0.0

    def __int__(self) -> int:
        return 0

    def __index__(self) -> int:
        return 0


def extract_field_name(field: str | Callable[[Any], Any]) -> str:
    """
    Return the field name named or selected by `field`.

    Parameters
    ----------
    field : str or callable
        Field name, or a callable that reads exactly one attribute of its argument.

    Returns
    -------
    str
        The field name.
    """
    if isinstance(field, str):
        return field

    if not callable(field):
        raise TypeError(f"Field must be a name or a selector callable, got {type(field).__name__}: {field!r}")

    recorder = _FieldRecorder()
    try:
        field(recorder)
    except Exception as e:
        raise AccessorMissingError(f"{{{field!r}}} is not a valid field accessor.") from e

    names = object.__getattribute__(recorder, "_names")
    if len(names) != 1 or names[0].startswith("_"):
        raise AccessorMissingError(f"{{{field!r}}} is not a valid field accessor.")
    return names[0]
