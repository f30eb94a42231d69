"""Sampling from common probability distributions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

import numpy as np


class Distributions(Enum):
    """Families of distributions known to the generators."""

    UNIFORM = auto()
    NORMAL = auto()
    POISSON = auto()
    EXPONENTIAL = auto()


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


@dataclass
class UniformDistribution:
    """Continuous uniform distribution on [lower, upper)."""

    lower: float
    upper: float

    def sample(self, n: int, rng: np.random.Generator | None = None) -> list[float]:
        """Draw ``n`` values in [lower, upper)."""
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise ValueError("uniform bounds must be finite")
        if not self.lower < self.upper:
            raise ValueError("uniform lower bound must be below the upper bound")
        return _generator(rng).uniform(self.lower, self.upper, size=n).tolist()


def uniform_return(
    lower: float, upper: float, n: int, rng: np.random.Generator | None = None
) -> list[float]:
    """Draw ``n`` uniform returns in [lower, upper)."""
    return UniformDistribution(lower, upper).sample(n, rng)


@dataclass
class NormalDistribution:
    """Normal distribution descriptor.

    Sampling always draws standard normal variates; ``mu`` and ``sigma``
    describe the process the draws feed into.
    """

    mu: float
    sigma: float

    def sample(self, n: int, rng: np.random.Generator | None = None) -> list[float]:
        """Draw ``n`` standard normal values."""
        return _generator(rng).standard_normal(n).tolist()


@dataclass
class Poisson:
    """Poisson distribution with rate ``lambda_``."""

    lambda_: float

    def sample(self, n: int, rng: np.random.Generator | None = None) -> list[float]:
        """Draw ``n`` counts with the multiplication-of-uniforms method."""
        gen = _generator(rng)
        threshold = math.exp(-self.lambda_)
        samples = []
        for _ in range(n):
            count = 0
            product = 1.0
            while True:
                product *= gen.random()
                if product <= threshold:
                    break
                count += 1
            samples.append(float(count))
        return samples

    def fit(self, data: Iterable[float]) -> None:
        """Set the rate to the sample mean, or zero for no data."""
        values = list(data)
        self.lambda_ = sum(values) / len(values) if values else 0.0


@dataclass
class Exponential:
    """Exponential distribution with rate ``lambda_``."""

    lambda_: float

    def sample(self, n: int, rng: np.random.Generator | None = None) -> list[float]:
        """Draw ``n`` values by inverse-transform sampling."""
        gen = _generator(rng)
        return [(-1.0 / self.lambda_) * math.log(1.0 - gen.random()) for _ in range(n)]