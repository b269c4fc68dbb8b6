"""A player's name, level and stats stored as a fixed-size binary record."""

from __future__ import annotations

import argparse
import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

NAME_SIZE = 20
DEFAULT_PATH = "player.dat"
_RECORD = struct.Struct(f"<{NAME_SIZE}s5i")


@dataclass
class PlayerRecord:
    """A player's name (at most 19 bytes), level and combat stats."""

    name: str = ""
    level: int = 1
    hp: int = 0
    mana: int = 0
    ap: int = 0
    sp: int = 0

    def __post_init__(self) -> None:
        encoded = self.name.encode("utf-8")[: NAME_SIZE - 1]
        self.name = encoded.decode("utf-8", "ignore")

    def pack(self) -> bytes:
        """Return the record as its fixed-size binary form."""
        try:
            return _RECORD.pack(
                self.name.encode("utf-8"),
                self.level,
                self.hp,
                self.mana,
                self.ap,
                self.sp,
            )
        except struct.error as exc:
            raise ValueError(f"player record does not fit: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "PlayerRecord":
        """Parse a record from the start of ``data``."""
        if len(data) < _RECORD.size:
            raise ValueError(
                f"player record needs {_RECORD.size} bytes, got {len(data)}"
            )
        raw_name, level, hp, mana, ap, sp = _RECORD.unpack_from(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", "ignore")
        return cls(name, level, hp, mana, ap, sp)

    def save(self, path: Union[str, os.PathLike]) -> None:
        """Write the record to ``path``."""
        Path(path).write_bytes(self.pack())

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "PlayerRecord":
        """Read a record from ``path``."""
        return cls.unpack(Path(path).read_bytes())


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    return parser


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _ask_int(prompt: str) -> int:
    try:
        return int(_ask(prompt).strip())
    except ValueError:
        return 0


def read_main(argv: Sequence[str] | None = None) -> int:
    """Print the player stored in the data file."""
    args = _parser("Show a stored player.").parse_args(argv)
    try:
        player = PlayerRecord.load(args.path)
    except OSError:
        print("The file could not be opened.")
        return 1
    except ValueError as exc:
        print(f"The file could not be read: {exc}")
        return 1
    if player.name:
        print(f"Name: {player.name}")
        print(f"Level: {player.level}")
        print(f"HP: {player.hp}")
        print(f"Mana: {player.mana}")
        print(f"AP: {player.ap}")
        print(f"SP: {player.sp}")
    return 0


def write_main(argv: Sequence[str] | None = None) -> int:
    """Ask for a player's details and store them in the data file."""
    args = _parser("Store a player.").parse_args(argv)
    try:
        out = open(args.path, "wb")
    except OSError:
        print("The file could not be opened.")
        return 1
    with out:
        name = _ask("Enter name: ")
        level = _ask_int("Enter level: ")
        hp = _ask_int("Enter HP: ")
        mana = _ask_int("Enter Mana: ")
        ap = _ask_int("Enter Attack Power: ")
        sp = _ask_int("Enter Spell Power: ")
        out.write(PlayerRecord(name, level, hp, mana, ap, sp).pack())
    return 0