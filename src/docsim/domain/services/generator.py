"""Deterministic pseudo-random generator.

A 64-bit linear congruential generator:

    state = (state * 1664525 + 1013904223) mod 2**64

Two generators built from the same seed produce the same sequence, which is
what lets the document and relational engines receive identical synthetic
input. The generator is not suitable for anything but simulation: low bits
are weak and ``range`` uses plain modulo reduction.

References:
    - Press et al., "Numerical Recipes" (multiplier/increment constants)
"""

from __future__ import annotations

from typing import ClassVar


class EmptyRangeError(ArithmeticError):
    """A range draw was requested with ``max <= min``."""
    pass


class DeterministicGenerator:
    """Seeded LCG producing integers, bounded ranges and Bernoulli draws.

    Example:
        >>> rng = DeterministicGenerator(42)
        >>> rng.next_u64()
        1083814273
        >>> DeterministicGenerator(0).next_u64()
        1013904223
    """

    MULTIPLIER: ClassVar[int] = 1664525
    INCREMENT: ClassVar[int] = 1013904223
    MASK: ClassVar[int] = (1 << 64) - 1
    # 2**64 - 1 rounds to 2**64 as a float
    SCALE: ClassVar[float] = float((1 << 64) - 1)

    def __init__(self, seed: int) -> None:
        """Initialize from a seed, reduced modulo 2**64."""
        self._state = seed & self.MASK

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def next_u64(self) -> int:
        """Advance the recurrence and return the new state."""
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) & self.MASK
        return self._state

    def range(self, min_value: int, max_value: int) -> int:
        """Draw an integer in ``[min_value, max_value)``.

        Raises:
            EmptyRangeError: If ``max_value <= min_value``. No value is consumed.
        """
        if max_value <= min_value:
            raise EmptyRangeError(
                f"empty range [{min_value}, {max_value}): max must exceed min"
            )
        return min_value + self.next_u64() % (max_value - min_value)

    def boolean(self, probability: float) -> bool:
        """Return True with approximately the given probability."""
        return self.next_u64() / self.SCALE < probability
