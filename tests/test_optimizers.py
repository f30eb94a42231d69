import numpy as np
import pytest

from atelier.optimizers import DGD, GradientDescent


def test_gradient_descent_step_updates_in_place():
    opt = GradientDescent(id="opt_00", learning_rate=0.1)
    weights = np.array([1.0, 2.0])
    bias = np.array([0.0])
    opt.step(weights, bias, np.array([0.5, 0.5]), np.array([1.0]))
    assert weights.tolist() == pytest.approx([0.95, 1.95])
    assert bias.tolist() == pytest.approx([-0.1])


def test_gradient_descent_zero_gradient_leaves_parameters():
    opt = GradientDescent(id="opt", learning_rate=0.5)
    weights = np.array([3.0, -1.0, 2.5])
    bias = np.array([0.7])
    before_w, before_b = weights.copy(), bias.copy()
    opt.step(weights, bias, np.zeros(3), np.zeros(1))
    np.testing.assert_array_equal(weights, before_w)
    np.testing.assert_array_equal(bias, before_b)


def test_gradient_descent_zero_learning_rate_leaves_parameters():
    opt = GradientDescent(id="opt", learning_rate=0.0)
    weights = np.array([1.0, 2.0])
    bias = np.array([4.0])
    opt.step(weights, bias, np.array([9.0, 9.0]), np.array([9.0]))
    np.testing.assert_array_equal(weights, np.array([1.0, 2.0]))
    np.testing.assert_array_equal(bias, np.array([4.0]))


def test_gradient_descent_moves_against_gradient():
    opt = GradientDescent(id="opt", learning_rate=0.01)
    weights = np.array([0.0, 0.0])
    bias = np.array([0.0])
    opt.step(weights, bias, np.array([1.0, -1.0]), np.array([2.0]))
    assert weights[0] < 0.0
    assert weights[1] > 0.0
    assert bias[0] < 0.0


def test_gradient_descent_reset_keeps_settings():
    opt = GradientDescent(id="opt_01", learning_rate=0.3)
    opt.reset()
    assert opt.id == "opt_01"
    assert opt.learning_rate == 0.3


def test_gradient_descent_requires_learning_rate():
    with pytest.raises(TypeError):
        GradientDescent(id="opt")


def test_dgd_updates_only_first_agent():
    opt = DGD(id="dgd", learning_rate=1.0)
    first = np.array([1.0, 1.0])
    second = np.array([5.0, 5.0])
    grads = [np.array([1.0, 1.0]), np.array([2.0, 2.0])]
    opt.step([first, second], grads, np.eye(2), np.eye(2))
    np.testing.assert_array_equal(first, np.zeros(2))
    np.testing.assert_array_equal(second, np.array([5.0, 5.0]))


def test_dgd_empty_inputs_raise():
    opt = DGD(id="dgd", learning_rate=0.1)
    with pytest.raises(ValueError):
        opt.step([], [], np.eye(1), np.eye(1))