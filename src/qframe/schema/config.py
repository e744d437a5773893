"""Structured representation of registry settings."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegistryConfig:
    """
    Settings for a ``MetadataRegistry``.

    Attributes
    ----------
    culture : str or None
        Default culture used when a call does not pass one (``None`` is invariant).
    verbose : bool
        Log resolution and conversion steps at DEBUG level.
    definitions : tuple[str, ...]
        Extra pint definition lines loaded into the registry's unit registry.
    """

    culture: str | None = None
    verbose: bool = False
    definitions: tuple[str, ...] = field(default_factory=tuple)
