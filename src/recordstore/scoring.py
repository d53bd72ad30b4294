"""Reusable selection strategies for :meth:`KeyedStore.select_best`.

A strategy is any callable mapping a record to a number. These helpers build
the common ones from attribute names.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from operator import attrgetter
from typing import Any

ScoreStrategy = Callable[[Any], float]


def by_attribute(name: str) -> ScoreStrategy:
    """Score a record by a single numeric attribute, e.g. ``by_attribute("defense")``."""
    return attrgetter(name)


def weighted(weights: Mapping[str, float]) -> ScoreStrategy:
    """Score a record by the weighted sum of several numeric attributes."""
    if not weights:
        raise ValueError("weights must not be empty")
    items = tuple(weights.items())

    def score(record: Any) -> float:
        return sum(getattr(record, name) * weight for name, weight in items)

    return score
