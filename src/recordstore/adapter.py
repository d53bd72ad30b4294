"""Binds the loader's :class:`RecordHandler` capability to a store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from recordstore.store.keyed import Identified, KeyedStore

R = TypeVar("R", bound=Identified)


class StoreAdapter(Generic[R]):
    """Forward ``add_record`` to :meth:`KeyedStore.set`.

    Raw JSON objects are validated into the store's record type first, so a
    loader called without ``record_type`` still feeds typed records::

        store = get_store(Pokemon)
        load_records("pokemon.json", StoreAdapter(store))
    """

    def __init__(self, store: KeyedStore[R]) -> None:
        self._store = store
        self.added = 0

    @property
    def store(self) -> KeyedStore[R]:
        return self._store

    def _coerce(self, record: Any) -> R:
        record_type = self._store.record_type
        if isinstance(record, Mapping) and isinstance(record_type, type) and issubclass(record_type, BaseModel):
            return record_type.model_validate(record)
        return record

    def add_record(self, record: R | Mapping[str, Any]) -> None:
        self._store.set(self._coerce(record))
        self.added += 1
