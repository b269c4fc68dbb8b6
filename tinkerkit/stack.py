"""A stack with a fixed capacity."""

from __future__ import annotations

import argparse
import struct
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10
MAX_CAPACITY = 1000


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack(Generic[T]):
    """A last-in first-out stack holding at most ``capacity`` items.

    A capacity outside 1..999 falls back to 10.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity if 0 < capacity < MAX_CAPACITY else DEFAULT_CAPACITY
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top; raises StackFullError when full."""
        if self.is_full():
            raise StackFullError(f"stack is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        """Take the top item off; raises StackEmptyError when empty."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _fill(stack: BoundedStack, first, step, fmt: str) -> None:
    value = first
    while True:
        try:
            stack.push(value)
        except StackFullError:
            return
        print(format(value, fmt) + " ", end="")
        value = step(value)


def _drain(stack: BoundedStack, fmt: str) -> None:
    while not stack.is_empty():
        print(format(stack.pop(), fmt) + " ", end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Fill and empty a float stack and an int stack, printing each item."""
    argparse.ArgumentParser(description="Exercise bounded stacks.").parse_args(argv)

    floats: BoundedStack[float] = BoundedStack(5)
    increment = _float32(1.1)
    print("Pushing elements onto fs")
    _fill(floats, increment, lambda v: _float32(v + increment), "f")
    print("\nStack Full.")
    print("\nPopping elements from fs")
    _drain(floats, "f")
    print("\nStack Empty")

    ints: BoundedStack[int] = BoundedStack()
    print("\nPushing elements onto is")
    _fill(ints, 1, lambda v: v + 1, "d")
    print("\nStack Full")
    print("\nPopping elements from is")
    _drain(ints, "d")
    print("\nStack Empty")
    return 0