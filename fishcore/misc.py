"""Small shared helpers: a fast PRNG, 128-bit multiply, string and list utilities."""

from __future__ import annotations

import time
from typing import Callable, List, TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1
_XORSHIFT_MULTIPLIER = 2685821657736338717


class PRNG:
    """xorshift64star pseudo-random number generator.

    Produces 64-bit outputs from a single 64-bit state with period 2**64 - 1.
    The seed must be a non-zero 64-bit value.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        if not 0 < seed <= _MASK64:
            raise ValueError("seed must be a non-zero unsigned 64-bit integer")
        self._state = seed

    def rand64(self) -> int:
        """Return the next 64-bit pseudo-random number."""
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self._state = s
        return (s * _XORSHIFT_MULTIPLIER) & _MASK64

    def sparse_rand(self) -> int:
        """Return a 64-bit number with about 1/8 of its bits set on average."""
        return self.rand64() & self.rand64() & self.rand64()


def mul_hi64(a: int, b: int) -> int:
    """Return the upper 64 bits of the 128-bit product of two unsigned 64-bit values."""
    if not (0 <= a <= _MASK64 and 0 <= b <= _MASK64):
        raise ValueError("operands must be unsigned 64-bit integers")
    return (a * b) >> 64


def split(s: str, delimiter: str) -> List[str]:
    """Split ``s`` on every occurrence of ``delimiter``.

    An empty input gives an empty list; otherwise empty fields are kept.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not s:
        return []
    return s.split(delimiter)


def move_to_front(items: List[T], pred: Callable[[T], bool]) -> None:
    """Move the first element satisfying ``pred`` to the front, keeping the order of the rest."""
    for index, item in enumerate(items):
        if pred(item):
            if index:
                items.insert(0, items.pop(index))
            return


def now() -> int:
    """Return a monotonic timestamp in milliseconds."""
    return time.monotonic_ns() // 1_000_000