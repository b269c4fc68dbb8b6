"""Game objects: units that fight, players and creatures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tinkerkit.game.datastore import DataStorage, SpellEntry, spell_store
from tinkerkit.game.rng import URandom, urand
from tinkerkit.game.spell import Spell, calculate_spell_effect_amount

DEFAULT_CRIT_CHANCE = 25
DEFAULT_MISS_CHANCE = 10
DEFAULT_MAX_DAMAGE = 5.0


class TypeId(IntEnum):
    OBJECT = 0
    ITEM = 1
    UNIT = 2
    PLAYER = 3


class DeathState(IntEnum):
    ALIVE = 0
    JUST_DIED = 1
    CORPSE = 2
    DEAD = 3


class HitType(IntEnum):
    MISS = 0
    CRITICAL = 1
    NORMAL = 2


@dataclass
class CalcDamageInfo:
    """The outcome of a melee swing."""

    attacker: Unit
    target: Unit | None
    damage: int = 0
    hit_type: HitType = HitType.MISS


@dataclass
class SpellNonMeleeDamage:
    """Damage dealt to a target by a spell."""

    attacker: Unit
    target: Unit | None
    spell_id: int
    damage: int = 0


class GameObject:
    """Anything in the game world, tagged with its kind."""

    def __init__(self) -> None:
        self.type_id = TypeId.OBJECT

    def to_player(self) -> Player | None:
        return self if self.type_id is TypeId.PLAYER else None  # type: ignore[return-value]

    def to_creature(self) -> Creature | None:
        return self if self.type_id is TypeId.UNIT else None  # type: ignore[return-value]

    def to_unit(self) -> Unit | None:
        if self.type_id in (TypeId.UNIT, TypeId.PLAYER):
            return self  # type: ignore[return-value]
        return None


class Unit(GameObject):
    """A living object with health that can attack and cast spells."""

    def __init__(self, rng: URandom | None = None) -> None:
        super().__init__()
        self.type_id = TypeId.UNIT
        self.death_state = DeathState.ALIVE
        self._level = 1
        self.race = 0
        self.unit_class = 0
        self.gender = 0
        self._health = 0
        self._max_health = 0
        self.min_damage = 0.0
        self.max_damage = 0.0
        self.rng = rng

    def _rand(self, low: int, high: int) -> int:
        if self.rng is not None:
            return self.rng.between(low, high)
        return urand(low, high)

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"level must be within 0..255, got {value}")
        self._level = value

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"health must not be negative, got {value}")
        self._health = min(value, self._max_health)

    @property
    def max_health(self) -> int:
        return self._max_health

    @max_health.setter
    def max_health(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"max health must not be negative, got {value}")
        value = value or 1
        current = self._health
        self._max_health = value
        if value < current:
            self.health = value

    @property
    def is_alive(self) -> bool:
        return self.death_state is DeathState.ALIVE

    def modify_health(self, delta: int) -> int:
        """Change health by ``delta`` within bounds; return the actual change."""
        if delta == 0:
            return 0
        current = self._health
        new_health = current + delta
        if new_health <= 0:
            self.health = 0
            return -current
        maximum = self._max_health
        if new_health < maximum:
            self.health = new_health
            return new_health - current
        if current != maximum:
            self.health = maximum
            return maximum - current
        return 0

    def set_full_health(self) -> None:
        self.health = self._max_health

    def set_damage(self, low: float, high: float) -> None:
        self.min_damage = low
        self.max_damage = high

    def kill(self, victim: Unit) -> None:
        if not victim.health:
            return
        victim.set_death_state(DeathState.JUST_DIED)

    def set_death_state(self, state: DeathState) -> None:
        self.death_state = state
        if state is DeathState.JUST_DIED:
            self.health = 0

    def deal_damage(self, victim: Unit, damage: int) -> int:
        """Take ``damage`` off the victim, killing it if that is all it has."""
        health = victim.health
        print(f"DealDamage: {damage} to Health {health}\n")
        if health <= damage:
            who = "Player" if victim.type_id is TypeId.PLAYER else "Victim"
            print(f"DealDamage: {who} just DIED\n")
            self.kill(victim)
        else:
            victim.modify_health(-damage)
        return damage

    def attacker_state_update(self, victim: Unit) -> CalcDamageInfo | None:
        """Swing at ``victim`` once; return the swing, or None if none was made."""
        if not self.is_alive or not victim.is_alive:
            return None
        info = self.calculate_melee_damage(victim, 0)
        self.deal_melee_damage(info)
        return info

    def calculate_melee_damage(self, victim: Unit | None, damage: int) -> CalcDamageInfo:
        """Roll a melee swing against ``victim`` with ``damage`` extra points."""
        info = CalcDamageInfo(self, victim)
        if victim is None or not self.is_alive or not victim.is_alive:
            return info
        info.damage = damage + self.calculate_damage()
        info.hit_type = self.roll_hit_type(victim)
        if info.hit_type is HitType.MISS:
            info.damage = 0
        elif info.hit_type is HitType.CRITICAL:
            info.damage += info.damage
        return info

    def deal_melee_damage(self, info: CalcDamageInfo) -> None:
        victim = info.target
        if victim is None or not victim.is_alive:
            return
        self.deal_damage(victim, info.damage)

    def calculate_spell_damage(self, entry: SpellEntry, index: int) -> int:
        return calculate_spell_effect_amount(entry, index, self)

    def deal_spell_damage(self, info: SpellNonMeleeDamage | None) -> None:
        if info is None:
            return
        victim = info.target
        if victim is None or not victim.is_alive:
            return
        self.deal_damage(victim, info.damage)

    def heal_by_spell(self, victim: Unit, entry: SpellEntry, amount: int) -> int:
        return self.deal_heal(victim, amount)

    def deal_heal(self, victim: Unit, amount: int) -> int:
        """Heal ``victim`` by ``amount``; return the health actually gained."""
        if not amount:
            return 0
        return victim.modify_health(amount)

    def cast_spell(
        self, victim: Unit, spell_id: int, store: DataStorage[SpellEntry] | None = None
    ) -> Spell | None:
        """Cast the spell ``spell_id`` from ``store`` on ``victim``."""
        source = spell_store if store is None else store
        entry = source.lookup(spell_id)
        if entry is None:
            caster = "player" if self.type_id is TypeId.PLAYER else "creature"
            print(f"CastSpell: unknown spell id {spell_id} by caster: {caster}")
            return None
        spell = Spell(self, entry)
        spell.prepare(victim)
        return spell

    def calculate_damage(self) -> int:
        """Roll melee damage between the unit's minimum and maximum."""
        low, high = self.min_damage, self.max_damage
        if low > high:
            low, high = high, low
        if high == 0.0:
            high = DEFAULT_MAX_DAMAGE
        return self._rand(int(low), int(high))

    def roll_hit_type(
        self,
        victim: Unit | None,
        crit_chance: int = DEFAULT_CRIT_CHANCE,
        miss_chance: int = DEFAULT_MISS_CHANCE,
    ) -> HitType:
        """Roll 0..100 against the miss and critical chances, in that order."""
        total = 0
        roll = self._rand(0, 100)
        if miss_chance > 0:
            total += miss_chance
            if roll < total:
                print(f"RollHitType: MISS - roll {roll} between {total - miss_chance}, {total}")
                return HitType.MISS
        if crit_chance > 0:
            total += crit_chance
            if roll < total:
                print(
                    f"RollHitType: CRITICAL - roll {roll} between {total - crit_chance}, {total}"
                )
                return HitType.CRITICAL
        print(f"RollHitType: NORMAL - roll {roll} greater than {total}")
        return HitType.NORMAL


class Player(Unit):
    """A unit controlled by the player."""

    def __init__(self, rng: URandom | None = None) -> None:
        super().__init__(rng)
        self.type_id = TypeId.PLAYER


class Creature(Unit):
    """A unit controlled by the game."""