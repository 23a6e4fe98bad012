"""Tables of complex roots of unity used as twiddle factors."""

import cmath
import math

SPLIT_LENGTH = 2048

_TWO_PI = 2.0 * math.pi


class Phasors:
    """Roots of unity ``exp(2*pi*i*k/length)`` for ``0 <= k < length``.

    The table is kept in two parts: a fine table of the first
    ``SPLIT_LENGTH`` roots, and a coarse table of every
    ``SPLIT_LENGTH``-th root. A root with a large index is the product
    of one entry from each table.
    """

    __slots__ = ("length", "_small", "_large")

    def __init__(self, length):
        if length < 1:
            raise ValueError("phasor table length must be at least 1")
        self.length = length

        small_length = min(SPLIT_LENGTH, length)
        self._small = [
            cmath.exp(complex(0.0, _TWO_PI * i / length)) for i in range(small_length)
        ]

        large_length = (length + SPLIT_LENGTH - 1) // SPLIT_LENGTH
        if large_length > 1:
            self._large = [
                cmath.exp(complex(0.0, _TWO_PI * i * SPLIT_LENGTH / length))
                for i in range(large_length)
            ]
        else:
            self._large = []

    def load(self, index):
        """Return the root of unity with the given index."""
        small = self._small[index % SPLIT_LENGTH]
        if index < SPLIT_LENGTH:
            return small
        return small * self._large[index // SPLIT_LENGTH]

    def multiply(self, value, index):
        """Return ``value`` multiplied by the root of unity with the given index."""
        if index == 0:
            return value
        small = self._small[index % SPLIT_LENGTH]
        if index < SPLIT_LENGTH:
            return small * value
        return (self._large[index // SPLIT_LENGTH] * small) * value