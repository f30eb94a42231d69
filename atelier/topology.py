"""Agent topologies for distributed training."""

from __future__ import annotations

import tomllib
from enum import Enum, auto
from numbers import Real
from pathlib import Path

import numpy as np


class UpdateStrategy(Enum):
    """Order of the consensus and local-gradient steps."""

    COMBINE_THEN_ADAPT = auto()
    ADAPT_THEN_COMBINE = auto()


def _index(connection: dict, key: str) -> int:
    value = connection.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"connection field {key!r} must be a non-negative integer")
    return value


def _weight(connection: dict) -> float:
    value = connection.get("weight")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError("connection field 'weight' must be a number")
    return float(value)


class ConnectionsMatrix:
    """Row-stochastic matrix of mixing weights between agents."""

    def __init__(self, n_agents: int) -> None:
        if n_agents < 0:
            raise ValueError("the number of agents cannot be negative")
        self.n_agents = n_agents
        self._values = np.zeros((n_agents, n_agents), dtype=float)

    def fill(self, connections_file: str | Path) -> "ConnectionsMatrix":
        """Load connection weights from a TOML file and normalize the rows.

        Only the first ``[[training]]`` table is used; connections naming an
        agent outside the matrix are ignored.
        """
        with open(connections_file, "rb") as fh:
            document = tomllib.load(fh)

        trainings = document.get("training")
        if not isinstance(trainings, list):
            raise ValueError("missing 'training' array of tables")
        for training in trainings:
            if not isinstance(training, dict):
                raise ValueError("each training entry must be a table")
            if "agents" not in training or "agent_connections" not in training:
                raise ValueError("training entries need 'agents' and 'agent_connections'")

        if trainings:
            for connection in trainings[0]["agent_connections"]:
                if not isinstance(connection, dict):
                    raise ValueError("each connection must be a table")
                source = _index(connection, "from")
                target = _index(connection, "to")
                weight = _weight(connection)
                if source < self.n_agents and target < self.n_agents:
                    self._values[source, target] = weight

        self._normalize_rows()
        return self

    def _normalize_rows(self) -> None:
        for i, row in enumerate(self._values):
            total = row.sum()
            if total > 0.0:
                row /= total
            else:
                row[i] = 1.0

    def get_weight(self, source: int, target: int) -> float:
        """Mixing weight from ``source`` to ``target``; zero outside the matrix."""
        if 0 <= source < self.n_agents and 0 <= target < self.n_agents:
            return float(self._values[source, target])
        return 0.0

    def to_array(self) -> np.ndarray:
        """A copy of the matrix as an ``n_agents`` by ``n_agents`` array."""
        return self._values.copy()

    def __repr__(self) -> str:
        return f"ConnectionsMatrix(n_agents={self.n_agents})"