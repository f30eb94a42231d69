"""Gradient-based optimizers for single and distributed learners."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


@dataclass
class GradientDescent:
    """Plain gradient descent with a fixed learning rate."""

    id: str
    learning_rate: float
    steps: int = field(default=0, init=False)

    def step(
        self,
        weights: np.ndarray,
        bias: np.ndarray,
        weights_gradients,
        bias_gradients,
    ) -> None:
        """Update ``weights`` and ``bias`` in place against their gradients."""
        weights -= np.asarray(weights_gradients) * self.learning_rate
        bias -= np.asarray(bias_gradients) * self.learning_rate
        self.steps += 1

    def reset(self) -> None:
        """Clear the count of steps taken."""
        self.steps = 0


@dataclass
class DGD:
    """Distributed gradient descent over a set of agents."""

    id: str
    learning_rate: float

    def step(
        self,
        v_weights: Sequence[np.ndarray],
        v_weights_gradients: Sequence,
        topology,
        consensus,
    ) -> None:
        """Apply one descent step in place to the first agent's weights.

        The topology and consensus arguments are accepted for the distributed
        interface; only the leading agent is updated.
        """
        if not v_weights or not v_weights_gradients:
            raise ValueError("at least one set of weights and gradients is needed")
        v_weights[0] -= np.asarray(v_weights_gradients[0]) * self.learning_rate