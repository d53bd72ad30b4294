from __future__ import annotations

import pytest

from recordstore.models import Pokemon
from recordstore.scoring import by_attribute, weighted
from recordstore.store import KeyedStore


def _store() -> KeyedStore[Pokemon]:
    store = KeyedStore(Pokemon)
    store.set(Pokemon(id="Machop", attack=80, defense=50))
    store.set(Pokemon(id="Onix", attack=45, defense=160))
    store.set(Pokemon(id="Pikachu", attack=55, defense=40))
    return store


def test_by_attribute_selects_best_attack_and_defense() -> None:
    store = _store()

    best_attack = store.select_best(by_attribute("attack"))
    best_defense = store.select_best(by_attribute("defense"))

    assert best_attack is not None and best_attack.id == "Machop"
    assert best_defense is not None and best_defense.id == "Onix"


def test_weighted_sums_attributes() -> None:
    score = weighted({"attack": 2.0, "defense": 0.5})
    assert score(Pokemon(id="Machop", attack=80, defense=50)) == 185.0

    best = _store().select_best(weighted({"attack": 1.0, "defense": -1.0}))
    assert best is not None and best.id == "Machop"


def test_weighted_requires_weights() -> None:
    with pytest.raises(ValueError):
        weighted({})
