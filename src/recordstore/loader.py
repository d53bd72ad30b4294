"""Bulk loading of records from a JSON source.

The loader knows nothing about stores. It parses the whole source first and
then hands each record, in source order, to a :class:`RecordHandler`. A
source that cannot be parsed is rejected before any record is handed over;
an exception raised by the handler aborts the remaining records without
undoing the ones already handled.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from recordstore.config import StoreConfig
from recordstore.exceptions import MalformedInputError, RecordStoreConfigError

_logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class RecordHandler(Protocol[T_contra]):
    """Narrow capability the loader feeds records into."""

    def add_record(self, record: T_contra) -> None: ...


def parse_records(
    text: str | bytes,
    record_type: type[T] | None = None,
    *,
    source: str | PathLike[str] | None = None,
) -> list[Any]:
    """Parse a JSON array of records.

    With *record_type*, every element is validated into that type; otherwise
    elements are returned as plain JSON values.
    """
    item_type: Any = record_type if record_type is not None else Any
    try:
        return TypeAdapter(list[item_type]).validate_json(text)
    except ValidationError as exc:
        raise MalformedInputError(
            f"Expected a JSON array of records: {exc.error_count()} validation error(s)",
            source=source,
        ) from exc


def load_records(
    source: str | PathLike[str],
    handler: RecordHandler[Any],
    *,
    record_type: type[Any] | None = None,
    encoding: str = "utf-8",
) -> int:
    """Read *source* and feed every record to ``handler.add_record``.

    Returns
    -------
    int
        Number of records handed to *handler*.
    """
    path = Path(source)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"Cannot read {path}: {exc}", source=source) from exc

    records = parse_records(text, record_type, source=source)
    _logger.debug("Parsed %d record(s) from %s", len(records), path)

    for record in records:
        handler.add_record(record)
    return len(records)


def load_from_config(
    config: StoreConfig,
    handler: RecordHandler[Any],
    *,
    record_type: type[Any] | None = None,
) -> int:
    """Load the configured ``data_file`` into *handler*."""
    if config.data_file is None:
        raise RecordStoreConfigError("No data file configured (set RECORDSTORE_DATA_FILE)")
    return load_records(config.data_file, handler, record_type=record_type, encoding=config.encoding)
