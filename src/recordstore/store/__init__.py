"""Store layer.

This package is the single owner of the record mapping and the only place
write notifications are published from.
"""

from recordstore.store.keyed import Identified, KeyedStore
from recordstore.store.registry import StoreRegistry, default_registry, get_store

__all__ = [
    "Identified",
    "KeyedStore",
    "StoreRegistry",
    "default_registry",
    "get_store",
]
