# tinkerkit

A small set of console programs and the library code behind them. The main
piece is a turn-based battle game. The rest are a few stand-alone utilities.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The battle game

`tinkerkit.game` plays a duel between a `Player` and a `Creature`. Each starts
with 30 health and does 1 to 4 melee damage.

On each turn the attacker makes one melee swing:

- A roll of 0 to 100 decides the outcome. It misses on a roll below 10 and
  lands a critical hit for double damage on a roll below 35. Otherwise the hit
  is normal.
- With a chance of one in two, the attacker also casts spell 1 or spell 2 at
  its opponent.

The fight ends when one side dies. Every roll, hit and spell effect is printed.

Spells are read from a binary data file, `spells.dat`:

- The file opens with a 16-byte little-endian header: the magic `GAME`, then
  the record count, the field count and the record size.
- Fixed-size records follow. Each record is laid out as `niiifffiii`: an id,
  three effect kinds, three points-per-level floats and three base-point
  values.

The battle looks for this file in `data/` by default. Generate the default
spells into that directory first; the directory must already exist:

```
mkdir data
tinkerkit-spells data/spells.dat
tinkerkit-battle
```

`tinkerkit-spells [PATH]` writes three spells to `PATH`, which defaults to
`../data/spells.dat`:

- spell 1 deals 1 damage plus 2 per caster level;
- spell 2 deals 3 damage plus 2 per caster level;
- spell 3 heals 1 plus 1 per caster level.

`tinkerkit-battle [DATA_PATH] [--seed N] [--no-pause]` loads the spell store
from `DATA_PATH`, which defaults to `data/`. It then fights one duel.

- It waits for Enter after every turn unless you pass `--no-pause`.
- `--seed` makes the rolls reproducible.
- If the spell file is missing or invalid, the battle still runs. Each attempt
  to cast a spell then reports an unknown spell id.

### Using it from Python

- `tinkerkit.game.rng` provides `URandom`, with `reseed`, `below` and
  `between`. It also provides the shared-generator helpers `urand` and `seed`.
- `tinkerkit.game.datastore` covers the data files:
  - `DataFile.read` and `DataFile.from_bytes` parse a file. Bad input raises
    `DataFileError`.
  - `DataFile.record` returns a `Record`, which has `get_float` and `get_uint`.
  - `DataFile.produce` decodes every row.
  - `format_record_size` gives a format's record size and the position of its
    index field.
  - `DataStorage` is loaded with `load` and answers `lookup(id)`.
  - `SpellEntry` is one spell; `SpellEntry.from_fields` builds it from a row.
  - `FieldType` and `SpellEffect` are the enums used by the format and the
    spells.
  - `load_data_stores(data_path, store=None)` fills the module-level
    `spell_store` and returns whether it loaded.
- `tinkerkit.game.spellfile` provides `encode_spells`, `write_spell_file` and
  `DEFAULT_SPELLS`.
- `tinkerkit.game.units` holds the game objects:
  - `GameObject`, `Unit`, `Player` and `Creature`.
  - Health and max health are clamped properties.
  - Units have `modify_health`, `deal_damage`, `kill`, `attacker_state_update`,
    `calculate_melee_damage`, `roll_hit_type`, `cast_spell` and `deal_heal`.
  - The enums `TypeId`, `DeathState` and `HitType`.
  - The records `CalcDamageInfo` and `SpellNonMeleeDamage`.
  - A unit takes an optional `URandom` for its rolls.
- `tinkerkit.game.spell` provides `Spell` (`prepare`, `cast`,
  `handle_effect`) and `calculate_spell_effect_amount`.
- `tinkerkit.game.battle.run_battle(player, creature, store=None, rng=None,
  pause=None)` fights a whole duel and returns the survivor.

## Utilities

| Command | What it does |
| --- | --- |
| `tinkerkit-permissions` | Prints the permission bits of each user group, then what three sample users can and cannot do |
| `tinkerkit-binary` | Reads numbers and prints each one from 0 to 255 as eight binary digits; a negative number or end of input exits |
| `tinkerkit-flags MASK` | Lists every power-of-two flag among the low 31 bits of `MASK`, in hexadecimal and decimal |
| `tinkerkit-player-write [PATH]` | Asks for a player's name, level, HP, mana, attack power and spell power and saves them as a 40-byte record (default `player.dat`) |
| `tinkerkit-player-read [PATH]` | Reads that record back and prints it |
| `tinkerkit-stack` | Fills a 5-slot float stack and a 10-slot int stack until full, then empties them, printing each item |
| `tinkerkit-people` | Filters a sample list of people, dropping names shorter than four characters and anyone under 18 |
| `tinkerkit-irc HOST PORT` | Connects to an IRC server, logs in as `MyIRCClient`, answers PINGs and prints every line received until Ctrl+C or an `ERROR` line |

Example:

```
tinkerkit-flags 13
tinkerkit-irc irc.example.com 6667
```

The same behaviour is available from Python:

- `tinkerkit.permissions` provides the `Permission` flags and `UserGroup`
  values, `User.can`, `describe_groups` and `describe_user`.
- `tinkerkit.bits` provides `to_binary`, `flags_in` and `describe_flags`.
- `tinkerkit.playerfile` provides `PlayerRecord`, with `pack`/`unpack` and
  `save`/`load`. Names are cut to 19 bytes.
- `tinkerkit.stack` provides `BoundedStack`:
  - A capacity outside 1 to 999 falls back to 10.
  - Pushing onto a full stack raises `StackFullError`.
  - Popping an empty stack raises `StackEmptyError`.
- `tinkerkit.people` provides `Person`, `fails_requirements` and
  `filter_people`.
- `tinkerkit.irc.client` provides `IRCClient`, with `connect`, `login`, `send`,
  `receive`, `parse` and `disconnect`.

## What it does not do

The IRC client only logs in and echoes what the server sends. It does not:

- join channels;
- send messages you type;
- use TLS;
- reconnect.

The battle game has no saved games. It has no levels beyond 1 and no way to
choose spells yourself.