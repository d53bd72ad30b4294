"""Base model for stored records.

Every record type kept in a :class:`recordstore.store.KeyedStore` is
identified solely by its ``id``. :class:`BaseRecord` provides:

* a frozen pydantic model, so a stored record cannot change identity
  behind the store's back;
* an ``id`` validator that strips surrounding whitespace and rejects
  empty identifiers;
* ``extra="allow"`` so records loaded from loosely shaped sources keep
  attributes the subclass does not declare.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseRecord(BaseModel):
    """An identifiable domain entity with a unique ``id``."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
    )

    id: str = Field(..., description="Unique record identifier")

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        record_id = value.strip()
        if not record_id:
            raise ValueError("id must be non-empty")
        return record_id
