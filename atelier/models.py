"""Convex linear models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _empty() -> np.ndarray:
    return np.empty(0, dtype=np.float32)


@dataclass(eq=False)
class LinearModel:
    """Linear model ``y = X @ weights + bias``."""

    id: str = ""
    weights: np.ndarray = field(default_factory=_empty)
    bias: np.ndarray = field(default_factory=_empty)

    @classmethod
    def glorot_uniform(
        cls, input_dim: int, id: str = "", rng: np.random.Generator | None = None
    ) -> "LinearModel":
        """Weights drawn from [0, sqrt(6) / sqrt(input_dim + 1)), bias of zero."""
        if input_dim <= 0:
            raise ValueError("input dimension must be positive")
        gen = rng if rng is not None else np.random.default_rng()
        limit = math.sqrt(6.0) / math.sqrt(input_dim + 1)
        weights = (gen.random(input_dim) * limit).astype(np.float32)
        return cls(id=id, weights=weights, bias=np.zeros(1, dtype=np.float32))

    def forward(self, features) -> np.ndarray:
        """Model output for a feature matrix."""
        x = np.asarray(features, dtype=np.float32)
        return (x @ self.weights.astype(np.float32) + self.bias.astype(np.float32)).astype(
            np.float32
        )

    def forward_with_params(self, x, weights, bias) -> np.ndarray:
        """Model output using the given parameters instead of the model's own."""
        return np.asarray(x) @ np.asarray(weights) + np.asarray(bias)

    def parameters(self) -> list[np.ndarray]:
        """The weights and the bias."""
        return [self.weights, self.bias]

    def copy(self) -> "LinearModel":
        """An independent copy of the model."""
        return LinearModel(id=self.id, weights=self.weights.copy(), bias=self.bias.copy())

    def save_model(self, file_path: str) -> None:
        """Write the weights and bias to an ``.npz`` archive."""
        with open(file_path, "wb") as fh:
            np.savez(fh, weights=self.weights, bias=self.bias)

    def load_model(self, file_path: str) -> None:
        """Read weights and bias from an archive written by ``save_model``."""
        loaded = {}
        with np.load(file_path) as archive:
            for name in archive.files:
                if name in ("weight", "weights"):
                    loaded["weights"] = archive[name]
                elif name == "bias":
                    loaded["bias"] = archive[name]
                else:
                    raise ValueError(f"Unexpected tensor: {name}")
        for attribute, value in loaded.items():
            setattr(self, attribute, value)