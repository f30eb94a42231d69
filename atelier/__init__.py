"""Market microstructure modelling: stochastic generators, order book features and targets, and convex learning."""

__version__ = "0.0.1"

__all__ = [
    "agents",
    "brownian",
    "errors",
    "features",
    "functions",
    "hawkes",
    "mathutils",
    "metrics",
    "models",
    "optimizers",
    "probabilistic",
    "targets",
    "topology",
]