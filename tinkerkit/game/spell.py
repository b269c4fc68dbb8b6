"""Spells cast by units and the effects they apply to their target."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tinkerkit.game.datastore import MAX_SPELL_EFFECTS, SpellEffect, SpellEntry

if TYPE_CHECKING:
    from tinkerkit.game.units import Unit


def calculate_spell_effect_amount(
    entry: SpellEntry, index: int, caster: Unit | None = None
) -> int:
    """Return the points of effect ``index``, scaled by the caster's level."""
    per_level = entry.points_per_level[index]
    amount = entry.base_points[index]
    if caster is not None:
        amount += int(caster.level * per_level)
    return amount


class Spell:
    """One casting of a spell by a caster on a target."""

    def __init__(self, caster: Unit | None, info: SpellEntry) -> None:
        self.info = info
        self.caster = caster
        self.target: Unit | None = None
        self.damage = 0  # points of the effect currently being handled
        self.total_damage = 0
        self.healing = 0
        self.effect_mask = 0

    def prepare(self, target: Unit | None) -> None:
        """Aim the spell at ``target`` and cast it."""
        self.target = target
        self.cast()

    def cast(self) -> None:
        """Handle every effect slot in use, then apply the result."""
        if self.caster is None:
            return
        for index, effect in enumerate(self.info.effects[:MAX_SPELL_EFFECTS]):
            if effect == 0:
                continue
            self.handle_effect(index)
            self.effect_mask |= 1 << index
        self._apply_to_target()

    def calculate_damage(self, index: int) -> int:
        """Return the points of effect ``index`` for this spell's caster."""
        return self.caster.calculate_spell_damage(self.info, index)

    def handle_effect(self, index: int) -> None:
        """Run effect ``index`` unless it has already been handled."""
        if self.effect_mask & (1 << index):
            return
        effect = self.info.effects[index] & 0xFF
        print(f"Spell: {self.info.id} Effect: {effect}")
        self.damage = self.calculate_damage(index)
        handlers: dict[int, Callable[[int], None]] = {
            SpellEffect.NONE: self.effect_null,
            SpellEffect.DAMAGE: self.effect_damage,
            SpellEffect.HEAL: self.effect_heal,
        }
        handler = handlers.get(effect)
        if handler is not None:
            handler(index)

    def effect_null(self, index: int) -> None:
        """An effect that does nothing."""
        print("Spell Effect DUMMY\n")

    def effect_damage(self, index: int) -> None:
        """Add the current effect's points to the damage dealt."""
        if self.target is not None and self.target.is_alive:
            self.total_damage += self.damage
        print(f"Spell Effect Damage: {self.total_damage}\n")

    def effect_heal(self, index: int) -> None:
        """Add the current effect's points to the healing done."""
        if self.target is not None and self.target.is_alive:
            self.healing += self.damage
        print("Spell Effect Heal\n")

    def _apply_to_target(self) -> None:
        if self.target is None or self.caster is None:
            return
        if self.healing > 0:
            self.caster.heal_by_spell(self.target, self.info, self.healing)
        elif self.total_damage > 0:
            from tinkerkit.game.units import SpellNonMeleeDamage

            info = SpellNonMeleeDamage(self.caster, self.target, self.info.id)
            info.damage = self.total_damage
            self.caster.deal_spell_damage(info)