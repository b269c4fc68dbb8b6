"""Binary rendering of bytes and decomposition of masks into flags."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_FLAG_BITS = 31


def to_binary(number: int) -> str:
    """Return ``number`` (0..255) as eight binary digits."""
    if not 0 <= number <= 255:
        raise ValueError(f"number must be within 0..255, got {number}")
    return format(number, "08b")


def flags_in(mask: int) -> list[int]:
    """Return the single-bit flags among the low 31 bits set in ``mask``."""
    return [1 << bit for bit in range(_FLAG_BITS) if mask & (1 << bit)]


def describe_flags(mask: int) -> list[str]:
    """Return each flag in ``mask`` as hexadecimal and decimal."""
    return [f"0x{flag:x} ({flag})" for flag in flags_in(mask)]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def binary_main(argv: Sequence[str] | None = None) -> int:
    """Read numbers until a negative one and print each byte in binary."""
    argparse.ArgumentParser(description="Print bytes in binary.").parse_args(argv)
    print("\nEnter a negative value to exit.\n")
    value = 0
    while value >= 0:
        try:
            reply = input("Digit (0-255): ")
        except EOFError:
            break
        try:
            value = int(reply.strip())
        except ValueError:
            continue
        if 0 <= value <= 255:
            print(to_binary(value))
    return 0


def flags_main(argv: Sequence[str] | None = None) -> int:
    """Print every flag set in the mask given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Argument missing.")
        return 1
    for line in describe_flags(_atoi(args[0])):
        print(line)
    return 0