"""Geometric Brownian motion price differences."""

from __future__ import annotations

import math

import numpy as np

from .errors import GeneratorError
from .probabilistic import NormalDistribution


def _validate(s0: float, sigma: float, dt: float, n: int) -> None:
    valid = (
        math.copysign(1.0, dt) > 0
        and sigma >= 0.0
        and s0 >= 0.0
        and dt > 0.0
        and n > 0
    )
    if not valid:
        raise GeneratorError(GeneratorError.Kind.INPUT_TYPE_FAILURE)


def gbm_return(
    s0: float,
    mu: float,
    sigma: float,
    dt: float,
    n: int,
    rng: np.random.Generator | None = None,
) -> list[float]:
    """Return ``n`` successive price differences dS of a GBM started at ``s0``.

    Raises GeneratorError for a negative price or volatility, a non-positive
    time step or a non-positive number of steps.
    """
    _validate(s0, sigma, dt, n)
    dist = NormalDistribution(mu=0.0, sigma=math.sqrt(dt))

    if n == 1:
        dwt = math.sqrt(dt) * dist.sample(1, rng)[0]
        return [mu * s0 * dt + sigma * s0 * dwt]

    differences = []
    price = s0
    for dwt in dist.sample(n, rng):
        ds = mu * price * dt + sigma * price * dwt
        price += ds
        differences.append(ds)
    return differences