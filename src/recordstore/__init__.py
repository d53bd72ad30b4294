"""recordstore - In-memory keyed record store with write notifications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("recordstore")
except PackageNotFoundError:
    __version__ = "0+local"
from recordstore.adapter import StoreAdapter
from recordstore.config import StoreConfig
from recordstore.events import AfterWriteEvent, BeforeWriteEvent, EventChannel
from recordstore.exceptions import (
    InvalidRecordError,
    MalformedInputError,
    RecordStoreConfigError,
    RecordStoreError,
)
from recordstore.loader import RecordHandler, load_from_config, load_records, parse_records
from recordstore.models import BaseRecord, Pokemon
from recordstore.observers import log_overwrites, log_writes
from recordstore.store import KeyedStore, StoreRegistry, default_registry, get_store

__all__ = [
    "__version__",
    "AfterWriteEvent",
    "BaseRecord",
    "BeforeWriteEvent",
    "EventChannel",
    "InvalidRecordError",
    "KeyedStore",
    "MalformedInputError",
    "Pokemon",
    "RecordHandler",
    "RecordStoreConfigError",
    "RecordStoreError",
    "StoreAdapter",
    "StoreConfig",
    "StoreRegistry",
    "default_registry",
    "get_store",
    "load_from_config",
    "load_records",
    "log_overwrites",
    "log_writes",
    "parse_records",
]
