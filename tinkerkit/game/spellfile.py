"""Writing of the spell data file the battle game loads."""

from __future__ import annotations

import argparse
import os
import struct
from pathlib import Path
from typing import Iterable, Sequence, Union

from tinkerkit.game.datastore import (
    HEADER_MAGIC,
    MAX_SPELL_EFFECTS,
    SpellEffect,
    SpellEntry,
)

FIELD_COUNT = 1 + 3 * MAX_SPELL_EFFECTS
_HEADER = struct.Struct("<4I")
_RECORD = struct.Struct(
    f"<{1 + MAX_SPELL_EFFECTS}I{MAX_SPELL_EFFECTS}f{MAX_SPELL_EFFECTS}i"
)
DEFAULT_PATH = "../data/spells.dat"

DEFAULT_SPELLS: tuple[SpellEntry, ...] = (
    SpellEntry(1, (SpellEffect.DAMAGE.value, 0, 0), (2.0, 0.0, 0.0), (1, 0, 0)),
    SpellEntry(2, (SpellEffect.DAMAGE.value, 0, 0), (2.0, 0.0, 0.0), (3, 0, 0)),
    SpellEntry(3, (SpellEffect.HEAL.value, 0, 0), (1.0, 0.0, 0.0), (1, 0, 0)),
)


def encode_spells(entries: Iterable[SpellEntry]) -> bytes:
    """Serialise spell entries as a data file: header then fixed records."""
    items = list(entries)
    header = _HEADER.pack(HEADER_MAGIC, len(items), FIELD_COUNT, _RECORD.size)
    records = b"".join(
        _RECORD.pack(
            entry.id, *entry.effects, *entry.points_per_level, *entry.base_points
        )
        for entry in items
    )
    return header + records


def write_spell_file(
    path: Union[str, os.PathLike], entries: Iterable[SpellEntry] = DEFAULT_SPELLS
) -> None:
    """Write ``entries`` to ``path`` as a spell data file."""
    Path(path).write_bytes(encode_spells(entries))


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the default spell data file."""
    parser = argparse.ArgumentParser(description="Write the game's spell data file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        write_spell_file(args.path)
    except OSError:
        print("The file could not be opened.")
        return 1
    print("spells.dat generated.")
    return 0