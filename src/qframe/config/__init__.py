"""Centralized configuration and registries."""

from qframe.config.unit_registry import load_unit_registry

__all__ = ["load_unit_registry"]
