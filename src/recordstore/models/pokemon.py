"""Pokemon record model."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from recordstore.models._base import BaseRecord


class Pokemon(BaseRecord):
    """A Pokemon with its two combat stats.

    Parameters
    ----------
    id : str
        Species name, used as the record identifier.
    attack : int
        Base attack stat.
    defense : int
        Base defense stat.
    """

    model_config = ConfigDict(extra="ignore")

    attack: int = Field(default=0, description="Base attack stat")
    defense: int = Field(default=0, description="Base defense stat")
