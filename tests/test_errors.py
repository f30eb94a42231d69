import pytest

from atelier.errors import (
    AtelierError,
    EventError,
    GeneratorError,
    LevelError,
    OrderError,
    SynthetizerError,
)


def test_generator_input_failure_message():
    err = GeneratorError(GeneratorError.Kind.INPUT_TYPE_FAILURE)
    assert str(err) == "The Generator did not recived a valid number"
    assert err.kind is GeneratorError.Kind.INPUT_TYPE_FAILURE


def test_generator_default_kind_is_undefined():
    err = GeneratorError()
    assert str(err) == "The Generator presented an Undefined Error"


def test_level_error_message():
    err = LevelError(LevelError.Kind.LEVEL_DELETION_FAILED)
    assert str(err) == "Level deletion not successful"


def test_order_error_message():
    err = OrderError(OrderError.Kind.ORDER_INSERTION_FAILED)
    assert str(err) == "Order insertion not successful"


def test_event_error_message():
    assert str(EventError()) == "The Event Generator function failed"


def test_synthetizer_error_carries_detail():
    err = SynthetizerError("task panicked")
    assert err.detail == "task panicked"
    assert str(err).endswith("task panicked")
    assert str(err).startswith("The progression generation was unsuccessful")


@pytest.mark.parametrize(
    ("factory", "message"),
    [
        (
            lambda: LevelError(LevelError.Kind.LEVEL_DELETION_FAILED),
            "Level deletion not successful",
        ),
        (
            lambda: OrderError(OrderError.Kind.ORDER_INSERTION_FAILED),
            "Order insertion not successful",
        ),
        (GeneratorError, "The Generator presented an Undefined Error"),
        (EventError, "The Event Generator function failed"),
    ],
)
def test_all_errors_caught_by_base(factory, message):
    err = factory()
    caught = None
    try:
        raise err
    except AtelierError as exc:
        caught = exc
    assert caught is err
    assert str(caught) == message


def test_synthetizer_error_caught_by_base():
    err = SynthetizerError("x")
    caught = None
    try:
        raise err
    except AtelierError as exc:
        caught = exc
    assert caught is err
    assert caught.detail == "x"
    assert str(caught).endswith("x")