"""A logistic-regression agent with elastic-net regularization."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .functions import CrossEntropy, RegType

_EPSILON = 1e-7
_BCE_PARAMS = (1.1, 0.4)


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


@dataclass(eq=False)
class DistributedAgent:
    """An agent holding its own data, weights and regularization settings."""

    features: np.ndarray
    labels: np.ndarray
    lambda1: float
    lambda2: float
    eta: float
    loss: float = 0.0
    accuracy: float = 0.0
    weights: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.features = np.asarray(self.features, dtype=float)
        self.labels = np.asarray(self.labels, dtype=float)
        if self.features.ndim != 2:
            raise ValueError("features must be a two-dimensional matrix")
        if self.labels.size != self.features.shape[0]:
            raise ValueError("there must be one label per sample")
        self.weights = np.zeros(self.features.shape[1], dtype=float)

    def _predictions(self) -> np.ndarray:
        return _sigmoid(self.features @ self.weights).reshape(-1)

    def _penalties(self) -> tuple[float, float]:
        l1 = float(np.abs(self.weights).sum()) * self.lambda1
        l2 = float((self.weights**2).sum()) * self.lambda2
        return l1, l2

    def forward(self, features) -> np.ndarray:
        """Predicted probabilities for a feature matrix."""
        x = np.asarray(features, dtype=float)
        return np.squeeze(_sigmoid(x @ self.weights))

    def compute_gradient(self) -> np.ndarray:
        """Logistic-loss gradient plus the elastic-net penalty terms."""
        error = self._predictions() - self.labels.reshape(-1)
        grad_loss = self.features.T @ error / self.features.shape[0]
        l1, l2 = self._penalties()
        return grad_loss + l1 + l2

    def compute_bce(self) -> float:
        """Elastic-net regularization of the weights with the default parameters."""
        bce = CrossEntropy(id="bce")
        return bce.regularize(self.weights, RegType.ELASTICNET, list(_BCE_PARAMS))

    def compute_loss(self) -> float:
        """Mean binary cross-entropy plus the L1 and L2 penalties."""
        labels = self.labels.reshape(-1)
        p_safe = np.clip(self._predictions(), _EPSILON, 1.0 - _EPSILON)
        losses = -(labels * np.log(p_safe) + (1.0 - labels) * np.log(1.0 - p_safe))
        l1, l2 = self._penalties()
        return float(losses.mean()) + l1 + l2

    def compute_accuracy(self, p_threshold: float) -> float:
        """Share of samples whose thresholded prediction matches the label."""
        predicted = (self._predictions() >= p_threshold).astype(np.int64)
        actual = self.labels.reshape(-1).astype(np.int64)
        tp = float(np.sum(predicted * actual))
        fp = float(np.sum(predicted * (1 - actual)))
        fn = float(np.sum((1 - predicted) * actual))
        tn = float(np.sum((1 - predicted) * (1 - actual)))
        total = tp + fp + fn + tn
        return (tp + tn) / total if total else float("nan")