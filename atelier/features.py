"""Orderbook features for learning models."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable, Sequence

_DECIMALS = 8


class FeaturesOutput(Enum):
    """Layouts in which computed features can be returned."""

    VALUES = auto()
    HASHMAP = auto()


def _truncate(value: float, decimals: int = _DECIMALS) -> float:
    factor = 10.0**decimals
    return math.trunc(value * factor) / factor


def _top_of_book(ob):
    if not ob.bids or not ob.asks:
        raise ValueError("the orderbook needs at least one bid and one ask level")
    return ob.bids[0], ob.asks[0]


def compute_spread(ob) -> float:
    """Best ask minus best bid."""
    bid, ask = _top_of_book(ob)
    return _truncate(ask.price - bid.price)


def compute_midprice(ob) -> float:
    """Mean of the best bid and the best ask."""
    bid, ask = _top_of_book(ob)
    return _truncate((ask.price + bid.price) / 2.0)


def compute_w_midprice(ob) -> float:
    """Top-of-book prices weighted by their own volumes."""
    bid, ask = _top_of_book(ob)
    weighted = (bid.price * bid.volume + ask.price * ask.volume) / (ask.volume + bid.volume)
    return _truncate(weighted)


def compute_imb(ob) -> float:
    """Share of the top-of-book volume that sits on the ask side."""
    bid, ask = _top_of_book(ob)
    return _truncate(ask.volume / (ask.volume + bid.volume))


def compute_vwap(ob, depth: int) -> float:
    """Volume-weighted average price over the first ``depth`` levels of each side."""
    levels = [*ob.bids[:depth], *ob.asks[:depth]]
    total_volume = sum(level.volume for level in levels)
    if total_volume > 0.0:
        weighted = sum(level.price * level.volume for level in levels)
        return _truncate(weighted / total_volume)
    return 0.0


def compute_tav(ob, bps: float) -> float:
    """Total volume posted within ``bps`` of the best bid and the best ask."""
    bid, ask = _top_of_book(ob)
    upper_ask = ask.price * (1.0 + bps)
    lower_bid = bid.price * (1.0 - bps)
    bid_volume = sum(level.volume for level in ob.bids if level.price >= lower_bid)
    ask_volume = sum(level.volume for level in ob.asks if level.price <= upper_ask)
    return _truncate(bid_volume + ask_volume)


def compute_obts(obs: Sequence) -> list[float]:
    """Time elapsed between consecutive orderbooks."""
    stamps = [float(ob.orderbook_ts) for ob in obs]
    return [later - earlier for earlier, later in zip(stamps, stamps[1:])]


class OrderbookFeatures(Enum):
    """Features that can be computed from a single orderbook."""

    SPREAD = "spread"
    MIDPRICE = "midprice"
    WEIGHTED_MIDPRICE = "w_midprice"
    VWAP = "vwap"
    IMB = "imb"
    TAV = "tav"

    @property
    def feature_name(self) -> str:
        """The name the feature is selected by."""
        return self.value

    def compute(self, ob, depth: int, bps: float) -> float:
        """Compute this feature for an orderbook."""
        if self is OrderbookFeatures.SPREAD:
            return compute_spread(ob)
        if self is OrderbookFeatures.MIDPRICE:
            return compute_midprice(ob)
        if self is OrderbookFeatures.WEIGHTED_MIDPRICE:
            return compute_w_midprice(ob)
        if self is OrderbookFeatures.VWAP:
            return compute_vwap(ob, depth)
        if self is OrderbookFeatures.IMB:
            return compute_imb(ob)
        return compute_tav(ob, bps)

    @classmethod
    def from_name(cls, name: str) -> "OrderbookFeatures | None":
        """The feature with this name, or None."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def list_features(cls) -> list[str]:
        """Names of every available feature."""
        return [feature.value for feature in cls]


class FeatureSelector:
    """An ordered selection of orderbook features."""

    def __init__(self, features: Iterable[OrderbookFeatures]) -> None:
        self.selected_features = list(features)

    @classmethod
    def from_names(cls, features_names: Iterable[str]) -> "FeatureSelector":
        """Select features by name; raise ValueError on an unknown name."""
        selected = []
        for name in features_names:
            feature = OrderbookFeatures.from_name(name)
            if feature is None:
                raise ValueError(
                    f"Unknown feature: {name}, the ones available are: "
                    f"{OrderbookFeatures.list_features()}"
                )
            selected.append(feature)
        return cls(selected)

    def compute_values(self, ob, depth: int, bps: float) -> list[float]:
        """Values of the selected features, in selection order."""
        return [feature.compute(ob, depth, bps) for feature in self.selected_features]

    def features_names(self) -> list[str]:
        """Names of the selected features, in selection order."""
        return [feature.value for feature in self.selected_features]

    def __repr__(self) -> str:
        return f"FeatureSelector({self.features_names()!r})"


def compute_features(
    orderbooks: Iterable,
    feature_names: Iterable[str],
    depth: int,
    bps: float,
    output_format: FeaturesOutput = FeaturesOutput.VALUES,
) -> list[list[float]]:
    """One row of selected feature values per orderbook."""
    selector = FeatureSelector.from_names(feature_names)
    if not isinstance(output_format, FeaturesOutput):
        raise ValueError(f"unknown output format: {output_format!r}")
    return [selector.compute_values(ob, depth, bps) for ob in orderbooks]