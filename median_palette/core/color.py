"""RGBA colour value, channel selector, and the integer mean helper."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class ColorChannel(enum.Enum):
    """One channel of an RGBA colour. Used as a selector, never stored."""

    R = 'r'
    G = 'g'
    B = 'b'
    A = 'a'


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int

    def __getitem__(self, channel: ColorChannel) -> int:
        if channel is ColorChannel.R:
            return self.r
        if channel is ColorChannel.G:
            return self.g
        if channel is ColorChannel.B:
            return self.b
        if channel is ColorChannel.A:
            return self.a
        raise KeyError(channel)

    def __str__(self) -> str:
        return f'{{ R: {self.r}, G: {self.g}, B: {self.b}, A: {self.a} }}'

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a colour from the first four items of a pixel row (numpy or list)."""
        return cls(int(values[0]), int(values[1]), int(values[2]), int(values[3]))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


def mean(values: Iterable[int]) -> int:
    """Floor of the arithmetic mean of 8-bit values.

    Truncates, never rounds: mean([33, 13, 255, 0, 42]) == 68.
    An empty input raises ZeroDivisionError.
    """
    total = 0
    count = 0
    for v in values:
        total += v
        count += 1
    return total // count
