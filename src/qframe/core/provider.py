"""Protocol for records that supply quantity metadata at runtime."""

from typing import Protocol, runtime_checkable

from qframe.schema.annotation import QuantityAnnotation


@runtime_checkable
class QuantityMetadataProvider(Protocol):
    """
    Implemented by host types whose unit metadata depends on the instance or the culture.

    The converter asks the instance before falling back to the static declaration. A
    returned annotation is merged over the static entry (its unit and allow-list win);
    ``None`` keeps the static entry unchanged.

    Examples
    --------
    >>> class Channel:
    ...     raw: Annotated[float, QuantityAnnotation()]
    ...     def get_quantity_metadata(self, field_name, culture=None):
    ...         return QuantityAnnotation(self.unit) if field_name == "raw" else None
    """

    def get_quantity_metadata(self, field_name: str, culture: str | None = None) -> QuantityAnnotation | None: ...
