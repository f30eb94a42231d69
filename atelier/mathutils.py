"""Data transformations and descriptive statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

import numpy as np

_EPSILON = 1e-8


class Transformation(Enum):
    """Transformations that can be applied to a block of data."""

    STANDARDIZE = auto()
    SCALE = auto()


def transform(data: Iterable[float] | np.ndarray, operation: Transformation) -> np.ndarray:
    """Standardize ``(x - mean) / std`` or scale ``x / max(x)`` the data."""
    values = np.asarray(data, dtype=float)
    if operation is Transformation.STANDARDIZE:
        spread = values.std(ddof=1) + _EPSILON
        return ((values - values.mean()) / spread).astype(np.float32)
    if operation is Transformation.SCALE:
        return values / values.max()
    raise ValueError(f"unknown transformation: {operation!r}")


def empty_matrix(num_agents: int) -> np.ndarray:
    """Square matrix of size ``num_agents`` with every entry ``1 / num_agents``."""
    if num_agents <= 0:
        raise ValueError("the number of agents must be positive")
    return np.full((num_agents, num_agents), 1.0 / num_agents, dtype=np.float32)


@dataclass(frozen=True)
class Stats:
    """Descriptive statistics of a sample."""

    len: int
    min: float
    max: float
    median: float
    mean: float
    variance: float
    skew: float
    kurtosis: float

    @classmethod
    def from_data(cls, data: Iterable[float]) -> "Stats | None":
        """Compute the statistics, or return None for fewer than two values."""
        values = [float(v) for v in data]
        n = len(values)
        if n < 2:
            return None

        mean = sum(values) / n
        ordered = sorted(values)
        half = n // 2
        median = (ordered[half - 1] + ordered[half]) / 2.0 if n % 2 == 0 else ordered[half]

        variance = sum((x - mean) ** 2 for x in values) / (n - 1)
        std_dev = math.sqrt(variance)
        m3 = sum((x - mean) ** 3 for x in values) / n
        m4 = sum((x - mean) ** 4 for x in values) / n

        skew = 0.0 if std_dev == 0.0 else m3 / std_dev**3
        kurtosis = 0.0 if std_dev == 0.0 else m4 / std_dev**4 - 3.0

        return cls(
            len=n,
            min=ordered[0],
            max=ordered[-1],
            median=median,
            mean=mean,
            variance=variance,
            skew=skew,
            kurtosis=kurtosis,
        )