"""A turn-based duel between a player and a creature."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from tinkerkit.game.datastore import DataStorage, SpellEntry, load_data_stores, spell_store
from tinkerkit.game.rng import URandom, urand
from tinkerkit.game.units import Creature, Player, Unit

_RULE = "******************************"
START_HEALTH = 30
MIN_DAMAGE = 1.0
MAX_DAMAGE = 4.0


def _take_turn(
    attacker: Unit,
    victim: Unit,
    name: str,
    store: DataStorage[SpellEntry] | None,
    draw: Callable[[int, int], int],
) -> None:
    print(_RULE)
    print(f"** {name}'s turn: ".ljust(len(_RULE), "*") + "\n")
    attacker.attacker_state_update(victim)
    if draw(0, 1) == 0:
        attacker.cast_spell(victim, draw(1, 2), store)
    print(f"** End {name}'s turn: ".ljust(len(_RULE), "*"))
    print(_RULE + "\n")


def run_battle(
    player: Player,
    creature: Creature,
    store: DataStorage[SpellEntry] | None = None,
    rng: URandom | None = None,
    pause: Callable[[], object] | None = None,
) -> Unit:
    """Alternate turns until one side dies; return the survivor."""
    draw = rng.between if rng is not None else urand
    wait = pause if pause is not None else (lambda: None)
    while player.is_alive and creature.is_alive:
        _take_turn(player, creature, "Player", store, draw)
        wait()
        if creature.is_alive:
            _take_turn(creature, player, "Creature", store, draw)
            wait()
    return player if player.is_alive else creature


def _fighter(unit: Unit) -> Unit:
    unit.max_health = START_HEALTH
    unit.health = START_HEALTH
    unit.set_damage(MIN_DAMAGE, MAX_DAMAGE)
    return unit


def _wait_for_key() -> None:
    try:
        input()
    except EOFError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Load the spell store and fight one duel."""
    parser = argparse.ArgumentParser(description="Fight a turn-based duel.")
    parser.add_argument("data_path", nargs="?", default="data/")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-pause", action="store_true")
    args = parser.parse_args(argv)

    load_data_stores(args.data_path)
    rng = URandom(args.seed) if args.seed is not None else None
    player = _fighter(Player(rng))
    creature = _fighter(Creature(rng))
    run_battle(
        player,
        creature,
        spell_store,
        rng,
        None if args.no_pause else _wait_for_key,
    )
    return 0