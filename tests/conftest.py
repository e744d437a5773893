"""Shared fixtures: every test gets its own registry, so caches and custom kinds never leak."""

import pytest

from qframe import MetadataRegistry, RegistryConfig, set_default_registry


@pytest.fixture
def registry():
    """
    Fresh MetadataRegistry with verbose logging.

    Returns
    -------
    MetadataRegistry
        Registry with empty caches and its own pint unit registry.
    """
    return MetadataRegistry(RegistryConfig(verbose=True))


@pytest.fixture
def default_registry(registry):
    """Install `registry` as the module-level default for the duration of a test."""
    set_default_registry(registry)
    yield registry
    set_default_registry(None)
