"""Store and loader configuration for recordstore."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from recordstore.exceptions import RecordStoreConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise RecordStoreConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Runtime configuration.

    Parameters
    ----------
    data_file : Path or None
        JSON file holding the records to bulk-load. ``None`` means no
        default source is configured.
    encoding : str
        Text encoding of ``data_file``.
    log_writes : bool
        Attach a DEBUG logging listener to the store after-write channel.
    log_max_string : int
        Strings longer than this are truncated in log output.
    """

    data_file: Path | None = None
    encoding: str = "utf-8"
    log_writes: bool = False
    log_max_string: int = 256

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from ``RECORDSTORE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        data_file = env.get("RECORDSTORE_DATA_FILE")
        if data_file:
            config_kwargs["data_file"] = Path(data_file)

        encoding = env.get("RECORDSTORE_ENCODING")
        if encoding:
            config_kwargs["encoding"] = encoding

        if "log_writes" not in overrides:
            config_kwargs["log_writes"] = _env_bool(env.get("RECORDSTORE_LOG_WRITES"), False)

        max_string_env = env.get("RECORDSTORE_LOG_MAX_STRING")
        if max_string_env is not None and "log_max_string" not in overrides:
            config_kwargs["log_max_string"] = _env_int("RECORDSTORE_LOG_MAX_STRING", max_string_env)

        # Accept plain strings for the path override
        if isinstance(overrides.get("data_file"), str):
            overrides["data_file"] = Path(overrides["data_file"])

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
