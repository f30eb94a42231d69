import math

import numpy as np
import pytest

from atelier.functions import CrossEntropy, RegType


@pytest.fixture
def loss():
    return CrossEntropy("loss_00")


def test_zero_logits_give_log_two(loss):
    assert loss.compute_loss([0.0, 0.0, 0.0], [1.0, 0.0, 1.0]) == pytest.approx(math.log(2))


def test_loss_is_symmetric_under_label_flip(loss):
    logits = np.array([2.0, -1.0, 0.5, 3.0])
    labels = np.array([1.0, 0.0, 0.0, 1.0])
    assert loss.compute_loss(logits, labels) == pytest.approx(
        loss.compute_loss(-logits, 1.0 - labels)
    )


def test_confident_correct_beats_confident_wrong(loss):
    labels = np.array([1.0, 0.0, 1.0])
    right = loss.compute_loss([5.0, -5.0, 5.0], labels)
    wrong = loss.compute_loss([-5.0, 5.0, -5.0], labels)
    assert 0.0 < right < wrong


def test_large_logits_are_stable(loss):
    result = loss.compute_loss([1000.0, -1000.0], [0.0, 1.0])
    assert math.isfinite(result)
    assert result > 100.0


def test_shape_mismatch_raises(loss):
    with pytest.raises(ValueError):
        loss.compute_loss([1.0, 2.0], [1.0])


def test_l1_is_linear_and_sign_blind(loss):
    weights = np.array([0.5, -1.5, 2.0])
    base = loss.regularize(weights, RegType.L1, [1.1, 0.4])
    assert loss.regularize(2.0 * weights, RegType.L1, [1.1, 0.4]) == pytest.approx(2.0 * base)
    assert loss.regularize(-weights, RegType.L1, [1.1, 0.4]) == pytest.approx(base)


def test_l1_equals_l2_for_unit_weights(loss):
    weights = np.ones(4)
    assert loss.regularize(weights, RegType.L1, [1.9, 0.8]) == pytest.approx(
        loss.regularize(weights, RegType.L2, [1.9, 0.8])
    )


def test_l2_grows_faster_than_l1(loss):
    weights = np.array([3.0, -2.0])
    ratio_l2 = loss.regularize(2 * weights, RegType.L2, [1.0, 0.5]) / loss.regularize(
        weights, RegType.L2, [1.0, 0.5]
    )
    ratio_l1 = loss.regularize(2 * weights, RegType.L1, [1.0, 0.5]) / loss.regularize(
        weights, RegType.L1, [1.0, 0.5]
    )
    assert ratio_l2 == pytest.approx(ratio_l1**2)


def test_elasticnet_with_unit_lambda_is_l1(loss):
    weights = np.array([0.3, -0.7, 1.2])
    assert loss.regularize(weights, RegType.ELASTICNET, [1.9, 1.0]) == pytest.approx(
        loss.regularize(weights, RegType.L1, [1.9, 1.0])
    )


def test_zero_weights_have_no_penalty(loss):
    assert loss.regularize(np.zeros(3), RegType.ELASTICNET, [1.1, 0.4]) == 0.0


def test_missing_params_raise(loss):
    with pytest.raises(ValueError):
        loss.regularize(np.ones(2), RegType.L1, [1.0])