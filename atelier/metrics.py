"""Classification metrics and a container that tracks their history."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import numpy as np

MetricValue = Any  # a float, a matrix (list of rows) or a mapping of names to floats


class MetricType(Enum):
    """Shape of the value a metric produces."""

    NUMERICAL = auto()
    CATEGORICAL = auto()
    MATRIX = auto()


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else math.nan


@dataclass(frozen=True)
class ConfusionMatrixComponents:
    """Counts of a binary confusion matrix."""

    true_positive: float
    false_positive: float
    false_negative: float
    true_negative: float

    @classmethod
    def from_arrays(cls, y_true, y_pred, threshold: float | None = None) -> "ConfusionMatrixComponents":
        """Count outcomes; multi-column predictions use argmax, others the threshold."""
        threshold = 0.5 if threshold is None else threshold
        scores = np.asarray(y_pred, dtype=float)
        labels = np.asarray(y_true, dtype=float)

        if scores.ndim > 1 and scores.shape[1] > 1:
            predictions = np.argmax(scores, axis=1).astype(float)
        else:
            predictions = (scores >= threshold).astype(float)
        if predictions.size == labels.size:
            predictions = predictions.reshape(labels.shape)

        tp = float(np.sum(predictions * labels))
        tn = float(np.sum((1.0 - predictions) * (1.0 - labels)))
        fp = float(np.sum(predictions * (1.0 - labels)))
        fn = float(np.sum((1.0 - predictions) * labels))

        return cls(
            true_positive=max(tp, 0.0),
            false_positive=max(fp, 0.0),
            false_negative=max(fn, 0.0),
            true_negative=max(tn, 0.0),
        )

    def total(self) -> float:
        """Number of counted samples."""
        return self.true_positive + self.true_negative + self.false_positive + self.false_negative


class Metric(ABC):
    """A metric that computes values and remembers those it was given."""

    metric_type: MetricType = MetricType.NUMERICAL

    def __init__(self, metric_id: str) -> None:
        self.id = metric_id
        self._values: list[MetricValue] = []

    @abstractmethod
    def compute(self, y_true, y_pred, threshold: float | None = None) -> MetricValue:
        """Compute the metric for labels and predictions."""

    def update(self, value: MetricValue) -> None:
        """Record a value."""
        self._values.append(value)

    def latest(self) -> MetricValue | None:
        """The last recorded value, or None."""
        return self._values[-1] if self._values else None

    @property
    def history(self) -> list[MetricValue]:
        """All recorded values, oldest first."""
        return self._values

    def reset(self) -> None:
        """Forget every recorded value."""
        self._values.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, values={len(self._values)})"


class Accuracy(Metric):
    """Share of correctly classified samples."""

    metric_type = MetricType.NUMERICAL

    def __init__(self) -> None:
        super().__init__("accuracy")

    def compute(self, y_true, y_pred, threshold: float | None = None) -> float:
        cm = ConfusionMatrixComponents.from_arrays(y_true, y_pred, threshold)
        return _ratio(cm.true_positive + cm.true_negative, cm.total())


class ConfusionMatrix(Metric):
    """The 2x2 matrix ``[[TN, FP], [FN, TP]]``."""

    metric_type = MetricType.MATRIX

    def __init__(self) -> None:
        super().__init__("confusion_matrix")

    def compute(self, y_true, y_pred, threshold: float | None = None) -> list[list[float]]:
        cm = ConfusionMatrixComponents.from_arrays(y_true, y_pred, threshold)
        return [
            [cm.true_negative, cm.false_positive],
            [cm.false_negative, cm.true_positive],
        ]


class ClassificationMetrics(Metric):
    """Accuracy, precision, recall, specificity, F1 and the raw counts."""

    metric_type = MetricType.MATRIX

    def __init__(self) -> None:
        super().__init__("classification_metrics")

    def compute(self, y_true, y_pred, threshold: float | None = None) -> dict[str, float]:
        cm = ConfusionMatrixComponents.from_arrays(y_true, y_pred, threshold)
        tp, fp, fn, tn = cm.true_positive, cm.false_positive, cm.false_negative, cm.true_negative

        precision = tp / (tp + fp) if tp + fp > 0 else 0.0
        recall = tp / (tp + fn) if tp + fn > 0 else 0.0
        specificity = tn / (tn + fp) if tn + fp > 0 else 0.0
        f1 = 2.0 * precision * recall / (precision + recall) if precision + recall > 0 else 0.0

        return {
            "accuracy": _ratio(tp + tn, cm.total()),
            "precision": precision,
            "recall": recall,
            "specificity": specificity,
            "f1_score": f1,
            "tp": tp,
            "fp": fp,
            "fn": fn,
            "tn": tn,
        }


@dataclass
class Metrics:
    """A collection of metrics evaluated together at one threshold."""

    metrics: list[Metric] = field(default_factory=list)
    threshold: float = 0.5

    def add_metric(self, metric: Metric) -> None:
        """Add a metric to the collection."""
        self.metrics.append(metric)

    def compute_all(self, y_true, y_pred) -> dict[str, MetricValue]:
        """Compute and record every metric; return the values by metric id."""
        results = {}
        for metric in self.metrics:
            value = metric.compute(y_true, y_pred, self.threshold)
            metric.update(copy.deepcopy(value))
            results[metric.id] = value
        return results

    def _find(self, metric_id: str) -> Metric | None:
        return next((m for m in self.metrics if m.id == metric_id), None)

    def get_latest(self, metric_id: str) -> MetricValue | None:
        """Latest value of the named metric, or None."""
        metric = self._find(metric_id)
        return metric.latest() if metric is not None else None

    def get_history(self, metric_id: str) -> list[MetricValue] | None:
        """History of the named metric, or None when it is not in the collection."""
        metric = self._find(metric_id)
        return metric.history if metric is not None else None

    def reset_all(self) -> None:
        """Clear the history of every metric."""
        for metric in self.metrics:
            metric.reset()

    def list_metrics(self) -> list[str]:
        """Ids of the metrics, in order of addition."""
        return [m.id for m in self.metrics]

    @classmethod
    def complete_classification(cls) -> "Metrics":
        """A collection with the full classification report."""
        return cls([ClassificationMetrics()])

    @classmethod
    def basic_classification(cls) -> "Metrics":
        """A collection with accuracy and the confusion matrix."""
        return cls([Accuracy(), ConfusionMatrix()])