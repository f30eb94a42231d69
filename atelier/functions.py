"""Loss functions and their regularization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

import numpy as np


class RegType(Enum):
    """Kinds of weight regularization."""

    L1 = auto()
    L2 = auto()
    ELASTICNET = auto()


@dataclass
class CrossEntropy:
    """Binary cross-entropy on logits, identified by ``id``."""

    id: str

    def compute_loss(self, y_hat, y_true) -> float:
        """Mean binary cross-entropy between logits ``y_hat`` and targets ``y_true``."""
        logits = np.asarray(y_hat, dtype=float)
        targets = np.asarray(y_true, dtype=float)
        if logits.shape != targets.shape:
            raise ValueError(
                f"logits shape {logits.shape} does not match targets shape {targets.shape}"
            )
        losses = (
            np.maximum(logits, 0.0)
            - logits * targets
            + np.log1p(np.exp(-np.abs(logits)))
        )
        return float(np.mean(losses))

    def regularize(self, weights, operation: RegType, params: Sequence[float]) -> float:
        """Regularization penalty of ``weights`` with ``params = [c, lambda]``."""
        if len(params) < 2:
            raise ValueError("regularization needs two parameters: c and lambda")
        r_c, r_lambda = float(params[0]), float(params[1])
        values = np.asarray(weights, dtype=float)

        r_l1 = float(np.abs(values).sum()) * r_lambda
        r_l2 = float((values**2).sum()) * r_lambda

        if operation is RegType.L1:
            return r_c * r_l1
        if operation is RegType.L2:
            return r_c * r_l2
        if operation is RegType.ELASTICNET:
            return r_c * (r_lambda * r_l1 + (1.0 - r_lambda) * r_l2)
        raise ValueError(f"unknown regularization: {operation!r}")