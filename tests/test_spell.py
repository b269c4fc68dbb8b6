import pytest

from tinkerkit.game.datastore import SpellEntry
from tinkerkit.game.spell import Spell, calculate_spell_effect_amount
from tinkerkit.game.units import Creature, DeathState, Player


def _target(health=30, max_health=30):
    unit = Creature()
    unit.max_health = max_health
    unit.health = health
    return unit


def _entry(effects, base, per_level=(0.0, 0.0, 0.0), spell_id=7):
    return SpellEntry(spell_id, tuple(effects), tuple(per_level), tuple(base))


def test_amount_without_caster_is_base_points():
    entry = _entry((1, 0, 0), (4, 0, 0), (2.0, 0.0, 0.0))
    assert calculate_spell_effect_amount(entry, 0, None) == 4


def test_amount_scales_with_caster_level():
    entry = _entry((1, 0, 0), (1, 0, 0), (2.0, 0.0, 0.0))
    caster = Player()
    assert calculate_spell_effect_amount(entry, 0, caster) == 3


def test_amount_truncates_fraction():
    entry = _entry((1, 0, 0), (0, 0, 0), (0.5, 0.0, 0.0))
    caster = Player()
    caster.level = 3
    assert calculate_spell_effect_amount(entry, 0, caster) == 1


def test_calculate_damage_matches_effect_amount():
    entry = _entry((1, 0, 0), (1, 0, 0), (2.0, 0.0, 0.0))
    caster = Player()
    spell = Spell(caster, entry)
    assert spell.calculate_damage(0) == calculate_spell_effect_amount(entry, 0, caster)


def test_damage_spell_hurts_target():
    entry = _entry((1, 0, 0), (4, 0, 0))
    target = _target()
    spell = Spell(Player(), entry)
    spell.prepare(target)
    assert target.health == 30 - entry.base_points[0]
    assert spell.total_damage == entry.base_points[0]
    assert spell.effect_mask == 1


def test_several_damage_effects_add_up():
    entry = _entry((1, 1, 0), (2, 3, 0))
    target = _target()
    Spell(Player(), entry).prepare(target)
    assert target.health == 30 - sum(entry.base_points)


def test_heal_spell_heals_target():
    entry = _entry((2, 0, 0), (5, 0, 0))
    target = _target(health=10)
    spell = Spell(Player(), entry)
    spell.prepare(target)
    assert target.health == 10 + entry.base_points[0]
    assert spell.healing == entry.base_points[0]


def test_healing_takes_precedence_over_damage():
    entry = _entry((2, 1, 0), (5, 5, 0))
    target = _target(health=10)
    spell = Spell(Player(), entry)
    spell.prepare(target)
    assert spell.total_damage > 0
    assert target.health == 10 + entry.base_points[0]


def test_dead_target_takes_nothing():
    entry = _entry((1, 0, 0), (4, 0, 0))
    target = _target()
    target.set_death_state(DeathState.JUST_DIED)
    spell = Spell(Player(), entry)
    spell.prepare(target)
    assert spell.total_damage == 0
    assert target.health == 0


def test_unknown_effect_does_nothing(capsys):
    entry = _entry((7, 0, 0), (4, 0, 0), spell_id=9)
    target = _target()
    spell = Spell(Player(), entry)
    spell.prepare(target)
    out = capsys.readouterr().out
    assert "Spell: 9 Effect: 7" in out
    assert spell.total_damage == 0
    assert spell.healing == 0
    assert target.health == 30
    assert bool(spell.effect_mask & 1) is True


def test_handled_effect_is_not_repeated():
    entry = _entry((1, 0, 0), (4, 0, 0))
    target = _target()
    spell = Spell(Player(), entry)
    spell.prepare(target)
    before = spell.total_damage
    spell.handle_effect(0)
    assert spell.total_damage == before


def test_effect_null_prints_dummy(capsys):
    spell = Spell(Player(), _entry((1, 0, 0), (1, 0, 0)))
    spell.effect_null(0)
    assert "Spell Effect DUMMY" in capsys.readouterr().out


def test_cast_without_caster_does_nothing():
    entry = _entry((1, 0, 0), (4, 0, 0))
    target = _target()
    spell = Spell(None, entry)
    spell.prepare(target)
    assert spell.effect_mask == 0
    assert target.health == 30


@pytest.mark.parametrize("effects", [(0, 0, 0)])
def test_empty_spell_changes_nothing(effects):
    target = _target()
    spell = Spell(Player(), _entry(effects, (4, 4, 4)))
    spell.prepare(target)
    assert target.health == 30
    assert spell.effect_mask == 0