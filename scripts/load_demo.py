#!/usr/bin/env python3
"""Load a JSON record file into the Pokemon store and pick the best entry.

Usage
-----
::

    python scripts/load_demo.py scripts/data/pokemon.json --stat defense

or, with the file taken from the environment::

    export RECORDSTORE_DATA_FILE=scripts/data/pokemon.json
    export RECORDSTORE_LOG_WRITES=1
    python scripts/load_demo.py --stat attack

Options::

    --stat NAME          Attribute to rank by (default: attack)
    --weight NAME=W      Rank by a weighted sum instead (repeatable)
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from recordstore import (  # noqa: E402
    Pokemon,
    RecordStoreError,
    StoreAdapter,
    StoreConfig,
    get_store,
    load_from_config,
    log_writes,
)
from recordstore.scoring import by_attribute, weighted  # noqa: E402


def _parse_weights(values: list[str]) -> dict[str, float]:
    weights: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"expected NAME=WEIGHT, got {item!r}")
        weights[name.strip()] = float(raw)
    return weights


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("data_file", nargs="?", help="JSON array of Pokemon records")
    parser.add_argument("--stat", default="attack", help="Attribute to rank by")
    parser.add_argument("--weight", action="append", default=[], metavar="NAME=W")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {"data_file": args.data_file} if args.data_file else {}
    try:
        config = StoreConfig.from_env(**overrides)
    except RecordStoreError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    store = get_store(Pokemon)
    if config.log_writes or args.verbose:
        log_writes(store, level=logging.INFO, max_string=config.log_max_string)

    try:
        count = load_from_config(config, StoreAdapter(store), record_type=Pokemon)
    except RecordStoreError as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded {count} record(s):")
    store.visit(lambda pokemon: print(f"  {pokemon.id:<12} attack={pokemon.attack:<4} defense={pokemon.defense}"))

    try:
        strategy = weighted(_parse_weights(args.weight)) if args.weight else by_attribute(args.stat)
    except ValueError as exc:
        parser.error(str(exc))
    best = store.select_best(strategy)
    label = ", ".join(args.weight) if args.weight else args.stat
    print(f"Best by {label} = {best.id if best is not None else '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
