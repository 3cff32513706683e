"""Deterministic random source shared by every generator."""
from __future__ import annotations

import hashlib
import random
from typing import Mapping, Optional, TypeVar

T = TypeVar("T")

DISTRIBUTION_MAX = 10000


def hash_seed(*parts: object) -> int:
    """Derive a stable 64-bit seed from arbitrary parts."""

    payload = "|".join(str(part) for part in parts)
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


class Roll:
    """Seeded dice and distribution helpers.

    Every stochastic decision in a generation run draws from one of these,
    so a fixed seed replays the exact same sequence of outcomes.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed_value(self) -> Optional[int]:
        return self._seed

    def seed(self, value: int) -> None:
        self._seed = value
        self._rng.seed(value)

    def uniform(self, minimum: float, maximum: float) -> float:
        return self._rng.uniform(minimum, maximum)

    def dice(self, count: int = 3, sides: int = 6, modifier: int = 0) -> int:
        if count <= 0 or sides <= 0:
            return 0
        total = 0
        for _ in range(count):
            total += self._rng.randint(1, sides)
        return total + modifier

    def distribution(self) -> int:
        """Roll on the 1..10000 percentile-of-percentile scale."""

        return self._rng.randint(1, DISTRIBUTION_MAX)

    def vary(self, amount: float, factor: float = 0.05) -> float:
        return amount * self._rng.uniform(1.0 - factor, 1.0 + factor)

    def chance(self, probability: float) -> bool:
        return self._rng.uniform(0.0, 1.0) <= probability

    def seek(self, table: Mapping[float, T]) -> T:
        """Sample a cumulative threshold table using a distribution roll.

        Keys are cumulative thresholds on the 1..10000 scale; the first key at
        or above the roll wins. The last entry catches anything past the end.
        """

        if not table:
            raise ValueError("cannot sample an empty table")
        roll = self.distribution()
        keys = sorted(table)
        for key in keys:
            if roll <= key:
                return table[key]
        return table[keys[-1]]


__all__ = ["Roll", "hash_seed", "DISTRIBUTION_MAX"]
