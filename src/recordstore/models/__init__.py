"""Record models."""

from recordstore.models._base import BaseRecord
from recordstore.models.pokemon import Pokemon

__all__ = [
    "BaseRecord",
    "Pokemon",
]
