"""Custom exception hierarchy for recordstore."""

from __future__ import annotations

from os import PathLike


class RecordStoreError(Exception):
    """Base exception for all recordstore errors."""


class RecordStoreConfigError(RecordStoreError):
    """Invalid or missing configuration."""


class MalformedInputError(RecordStoreError):
    """Bulk-load source could not be read or parsed as a record array.

    Raised before any record of the batch is handed to the record handler.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | PathLike[str] | None = None,
    ) -> None:
        self.source = source
        super().__init__(message)


class InvalidRecordError(RecordStoreError, ValueError):
    """A record passed to the store has no usable ``id``."""
