"""
Synthetic weight generation.

Stands in for real global/local weight files: every parameter gets an
independent uniform draw in ``[low, high)`` for each source.  All randomness
in the project lives here. The engine is deterministic and only ever sees
the resulting maps.

Pass a ``seed`` for repeatable runs (tests, reproducible CLI output).
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional, Protocol


class WeightSource(Protocol):
    """Anything that can produce a ``(global, local)`` weight map pair."""

    def draw(self, parameters: Sequence[str]) -> tuple[dict[str, float], dict[str, float]]:
        ...


class SimulatedWeightSource:
    """Uniform random weights from a private, optionally seeded generator.

    Attributes:
        seed: Seed passed to ``random.Random``; ``None`` seeds from the OS.
        low:  Inclusive lower bound of each draw.
        high: Exclusive upper bound of each draw.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        low: float = -1.0,
        high: float = 1.0,
    ) -> None:
        if low >= high:
            raise ValueError(f"low ({low}) must be < high ({high}).")
        self.seed = seed
        self.low = low
        self.high = high
        self._rng = random.Random(seed)

    def draw(self, parameters: Sequence[str]) -> tuple[dict[str, float], dict[str, float]]:
        """Return fresh global and local maps covering every parameter."""
        span = self.high - self.low
        global_weights: dict[str, float] = {}
        local_weights: dict[str, float] = {}
        for p in parameters:
            global_weights[p] = self.low + self._rng.random() * span
            local_weights[p] = self.low + self._rng.random() * span
        return global_weights, local_weights
