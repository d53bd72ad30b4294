from __future__ import annotations

from collections.abc import Iterator

import pytest

from recordstore.models import BaseRecord, Pokemon
from recordstore.store import StoreRegistry, default_registry, get_store


@pytest.fixture
def _reset_default_registry() -> Iterator[None]:
    default_registry().clear()
    yield
    default_registry().clear()


class Trainer(BaseRecord):
    badges: int = 0


def test_store_for_returns_same_instance_per_type() -> None:
    registry = StoreRegistry()

    first = registry.store_for(Pokemon)
    second = registry.store_for(Pokemon)

    assert first is second
    assert first.record_type is Pokemon
    assert Pokemon in registry


def test_distinct_types_get_distinct_stores() -> None:
    registry = StoreRegistry()

    assert registry.store_for(Pokemon) is not registry.store_for(Trainer)
    assert len(registry) == 2


def test_registries_are_isolated() -> None:
    a = StoreRegistry()
    b = StoreRegistry()

    a.store_for(Pokemon).set(Pokemon(id="Eevee", attack=55, defense=50))

    assert b.store_for(Pokemon).get("Eevee") is None


def test_shared_store_shares_event_channels() -> None:
    registry = StoreRegistry()
    seen: list[str] = []
    registry.store_for(Trainer).on_after_add(lambda ev: seen.append(ev.value.id))

    registry.store_for(Trainer).set(Trainer(id="Misty", badges=2))

    assert seen == ["Misty"]


def test_clear_drops_stores() -> None:
    registry = StoreRegistry()
    old = registry.store_for(Pokemon)

    registry.clear()

    assert Pokemon not in registry
    assert registry.store_for(Pokemon) is not old


@pytest.mark.usefixtures("_reset_default_registry")
def test_get_store_uses_process_wide_registry() -> None:
    assert get_store(Trainer) is get_store(Trainer)
    assert default_registry().store_for(Trainer) is get_store(Trainer)
