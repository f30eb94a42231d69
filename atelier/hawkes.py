"""Univariate self-exciting Hawkes point process with exponential kernel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .errors import GeneratorError


@dataclass
class HawkesProcess:
    """Hawkes process with baseline ``mu``, excitation ``alpha`` and decay ``beta``."""

    mu: float
    alpha: float
    beta: float

    def __post_init__(self) -> None:
        if not (self.mu >= 0.0 and self.alpha >= 0.0 and self.beta > 0.0):
            raise GeneratorError(GeneratorError.Kind.INPUT_TYPE_FAILURE)

    def intensity(self, t: float, event_times: Iterable[float]) -> float:
        """Conditional intensity at ``t`` given events strictly before it."""
        return self.mu + sum(
            self.alpha * math.exp(-self.beta * (t - event))
            for event in event_times
            if event < t
        )

    def generate_values(
        self, current_ts: float, n: int, rng: np.random.Generator | None = None
    ) -> list[float]:
        """Generate ``n`` event timestamps starting from ``current_ts``."""
        gen = rng if rng is not None else np.random.default_rng()
        events: list[float] = []
        current = current_ts
        for _ in range(n):
            rate = self.intensity(current, events)
            if not rate > 0.0:
                raise GeneratorError(GeneratorError.Kind.OUTPUT_TYPE_FAILURE)
            current += gen.uniform(0.0, 1.0 / rate)
            events.append(current)
        return events