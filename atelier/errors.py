"""Exceptions raised across the engine."""

from __future__ import annotations

from enum import Enum


class AtelierError(Exception):
    """Base class for every error raised by the package."""


class _KindedError(AtelierError):
    """An error whose message is fixed by a kind enumeration."""

    Kind: type[Enum]

    def __init__(self, kind: Enum) -> None:
        super().__init__(kind.value)
        self.kind = kind


class LevelError(_KindedError):
    """Failure while handling an orderbook price level."""

    class Kind(Enum):
        LEVEL_NOT_FOUND = "Level not found"
        LEVEL_INFO_NOT_AVAILABLE = "Level info not available"
        LEVEL_DELETION_FAILED = "Level deletion not successful"
        LEVEL_MODIFICATION_FAILED = "Level modification not successful"
        LEVEL_INSERTION_FAILED = "Level insertion not successful"

    def __init__(self, kind: "LevelError.Kind" = Kind.LEVEL_NOT_FOUND) -> None:
        super().__init__(kind)


class OrderError(_KindedError):
    """Failure while handling an order."""

    class Kind(Enum):
        ORDER_NOT_FOUND = "Order not found"
        ORDER_INFO_NOT_AVAILABLE = "Order info not available"
        ORDER_DELETION_FAILED = "Order deletion not successful"
        ORDER_MODIFICATION_FAILED = "Order modification not successful"
        ORDER_INSERTION_FAILED = "Order insertion not successful"

    def __init__(self, kind: "OrderError.Kind" = Kind.ORDER_NOT_FOUND) -> None:
        super().__init__(kind)


class GeneratorError(_KindedError):
    """Failure inside a probabilistic generator."""

    class Kind(Enum):
        UNDEFINED = "The Generator presented an Undefined Error"
        INPUT_TYPE_FAILURE = "The Generator did not recived a valid number"
        OUTPUT_TYPE_FAILURE = "The Generator did not produced a valid number"

    def __init__(self, kind: "GeneratorError.Kind" = Kind.UNDEFINED) -> None:
        super().__init__(kind)


class EventError(AtelierError):
    """Failure of an event generator function."""

    def __init__(self) -> None:
        super().__init__("The Event Generator function failed")


class SynthetizerError(AtelierError):
    """Failure while generating synthetic orderbook progressions."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"The progression generation was unsuccessful {detail}")
        self.detail = detail