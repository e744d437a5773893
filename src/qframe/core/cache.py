"""
Thread-safe, insert-if-absent key/value cache.

Holds reflected metadata for the lifetime of its owning registry: there is no eviction
and no TTL. Factories run outside the lock; when two callers race on a key the first
value published is kept and returned to both.
"""

import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class MetadataCache(Generic[K, V]):
    def __init__(self, name: str = "") -> None:
        self.name = name
        self._values: dict[K, V] = {}
        self._lock = threading.Lock()

    def try_get(self, key: K) -> tuple[bool, V | None]:
        """Return ``(True, value)`` on a hit, ``(False, None)`` on a miss."""
        value = self._values.get(key, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value

    def add(self, key: K, value: V) -> V:
        """Publish `value` unless `key` is already present; return the retained value."""
        with self._lock:
            return self._values.setdefault(key, value)

    def get_or_add(self, key: K, factory: Callable[[K], V]) -> V:
        """
        Return the cached value for `key`, computing it with `factory(key)` on a miss.

        Parameters
        ----------
        key : Hashable
            Cache key.
        factory : Callable
            Pure function of the key. May run more than once under contention.

        Returns
        -------
        Any
            The single retained value for `key`.
        """
        hit, value = self.try_get(key)
        if hit:
            return value
        return self.add(key, factory(key))

    def clear(self) -> None:
        """Drop every entry. Intended for test isolation."""
        with self._lock:
            self._values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MetadataCache({self.name!r}, size={len(self)})"
