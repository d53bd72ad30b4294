"""One store per record type.

A :class:`StoreRegistry` lazily creates the :class:`KeyedStore` for a record
type on first access and hands out that same instance afterwards. The module
level registry behind :func:`get_store` is the process-wide default; code that
needs isolation (tests, embedded tools) creates its own registry and passes it
around explicitly.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from recordstore.store.keyed import Identified, KeyedStore

_logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Identified)


class StoreRegistry:
    """Owns at most one :class:`KeyedStore` per record type."""

    def __init__(self) -> None:
        self._stores: dict[type[Any], KeyedStore[Any]] = {}

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    def store_for(self, record_type: type[R]) -> KeyedStore[R]:
        """Return the store for *record_type*, creating it on first access."""
        store = self._stores.get(record_type)
        if store is None:
            _logger.debug("Creating store for %s", record_type.__name__)
            store = KeyedStore(record_type)
            self._stores[record_type] = store
        return store

    def clear(self) -> None:
        """Drop every store. Stores already handed out keep working but are no longer shared."""
        self._stores.clear()


_default_registry = StoreRegistry()


def default_registry() -> StoreRegistry:
    return _default_registry


def get_store(record_type: type[R]) -> KeyedStore[R]:
    """Process-wide accessor: the shared store for *record_type*."""
    return _default_registry.store_for(record_type)
