"""
Named error conditions raised by qframe.

Every error derives from ``QFrameError`` and from the builtin exception closest to its
meaning, so callers may catch either. Messages follow a stable format that names the
declaring type and field so host applications can pattern-match on them.
"""


class QFrameError(Exception):
    """Base class for all qframe errors."""


class MetadataMissingError(QFrameError, LookupError):
    """A field has no resolvable unit metadata, neither declared nor supplied dynamically."""


class TypeIncompatibleError(QFrameError, TypeError):
    """A field's value type cannot represent a quantity value."""


class UnknownQuantityKindError(QFrameError, ValueError):
    """A unit value's quantity kind cannot be resolved."""


class UnknownUnitError(QFrameError, ValueError):
    """The quantity kind is known but the unit value is not one of its units."""


class ConversionNotAllowedError(QFrameError, ValueError):
    """The requested target unit is not in the field's allow-list."""


class AccessorMissingError(QFrameError, AttributeError):
    """A field has no public readable accessor, or a custom kind has no usable constructor."""
