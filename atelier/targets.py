"""Learning targets derived from a sequence of orderbooks."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Sequence


class TargetsOutput(Enum):
    """Layouts in which computed targets can be returned."""

    VALUES = auto()


def compute_return_sign(orderbooks: Sequence) -> list[float]:
    """1.0 where the midprice rose from the previous orderbook, 0.0 otherwise.

    The first entry has no predecessor and is always 0.0.
    """
    midprices = []
    for ob in orderbooks:
        if not ob.bids or not ob.asks:
            raise ValueError("the orderbook needs at least one bid and one ask level")
        midprices.append((ob.asks[0].price + ob.bids[0].price) / 2.0)
    return [0.0] + [
        1.0 if current > previous else 0.0
        for previous, current in zip(midprices, midprices[1:])
    ]


class OrderbookTargets(Enum):
    """Targets that can be computed from a sequence of orderbooks."""

    RETURN_SIGN = "return_sign"

    @property
    def target_name(self) -> str:
        """The name the target is selected by."""
        return self.value

    def compute(self, orderbooks: Sequence) -> list[float]:
        """Compute this target over the orderbooks."""
        return compute_return_sign(orderbooks)

    @classmethod
    def from_name(cls, name: str) -> "OrderbookTargets | None":
        """The target with this name, or None."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def list_targets(cls) -> list[str]:
        """Names of every available target."""
        return [target.value for target in cls]


class TargetSelector:
    """An ordered selection of orderbook targets."""

    def __init__(self, targets: Iterable[OrderbookTargets]) -> None:
        self.selected_targets = list(targets)

    @classmethod
    def from_names(cls, targets_names: Iterable[str]) -> "TargetSelector":
        """Select targets by name; raise ValueError on an unknown name."""
        selected = []
        for name in targets_names:
            target = OrderbookTargets.from_name(name)
            if target is None:
                raise ValueError(
                    f"Unknown target: {name}, the ones available are: "
                    f"{OrderbookTargets.list_targets()}"
                )
            selected.append(target)
        return cls(selected)

    def compute_values(self, orderbooks: Sequence) -> list[float]:
        """Values of every selected target, concatenated in selection order."""
        return [
            value
            for target in self.selected_targets
            for value in target.compute(orderbooks)
        ]

    def target_names(self) -> list[str]:
        """Names of the selected targets, in selection order."""
        return [target.value for target in self.selected_targets]

    def __repr__(self) -> str:
        return f"TargetSelector({self.target_names()!r})"


def compute_targets(
    orderbooks: Sequence,
    targets_names: Iterable[str],
    output_format: TargetsOutput = TargetsOutput.VALUES,
) -> list[float]:
    """Compute the named targets over the orderbooks."""
    selector = TargetSelector.from_names(targets_names)
    if output_format is not TargetsOutput.VALUES:
        raise ValueError(f"unknown output format: {output_format!r}")
    return selector.compute_values(orderbooks)