"""Logging listeners for store write notifications."""

from __future__ import annotations

import logging
from typing import Any

from recordstore._logfmt import summarize_for_log
from recordstore.events import AfterWriteEvent, BeforeWriteEvent, Unsubscribe
from recordstore.store.keyed import KeyedStore

_logger = logging.getLogger(__name__)


def log_writes(
    store: KeyedStore[Any],
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    max_string: int = 256,
) -> Unsubscribe:
    """Log every record written to *store*.

    Returns the unsubscribe handle of the underlying after-add listener.
    """
    log = logger or _logger

    def _on_after_add(event: AfterWriteEvent[Any]) -> None:
        if log.isEnabledFor(level):
            log.log(level, "Stored %s", summarize_for_log(event.value, max_string=max_string))

    return store.on_after_add(_on_after_add)


def log_overwrites(
    store: KeyedStore[Any],
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    max_string: int = 256,
) -> Unsubscribe:
    """Log writes that replace an existing record, with the old and new values."""
    log = logger or _logger

    def _on_before_add(event: BeforeWriteEvent[Any]) -> None:
        if event.value is None or not log.isEnabledFor(level):
            return
        log.log(
            level,
            "Replacing %s with %s",
            summarize_for_log(event.value, max_string=max_string),
            summarize_for_log(event.new_value, max_string=max_string),
        )

    return store.on_before_add(_on_before_add)
