"""Compact log rendering of stored records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def _truncate(value: Any, max_string: int) -> Any:
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    if isinstance(value, dict):
        return {key: _truncate(item, max_string) for key, item in value.items()}
    if isinstance(value, list):
        return [_truncate(item, max_string) for item in value]
    return value


def summarize_for_log(record: Any, *, max_string: int = 256) -> Any:
    """Dump *record* to plain data with long strings cut to *max_string* characters.

    Non-model records are rendered with ``repr``.
    """
    if isinstance(record, BaseModel):
        return _truncate(record.model_dump(mode="json"), max_string)
    return _truncate(repr(record), max_string)
