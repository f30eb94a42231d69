import numpy as np
import pytest

from atelier.probabilistic import (
    Exponential,
    NormalDistribution,
    Poisson,
    UniformDistribution,
    uniform_return,
)


def test_uniform_within_bounds():
    values = UniformDistribution(0.01, 0.11).sample(500, np.random.default_rng(1))
    assert len(values) == 500
    assert all(0.01 <= v < 0.11 for v in values)


def test_uniform_return_length_and_bounds():
    values = uniform_return(-1.0, 1.0, 50, np.random.default_rng(2))
    assert len(values) == 50
    assert all(-1.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize("lower,upper", [(1.0, 1.0), (2.0, 1.0), (0.0, float("inf"))])
def test_uniform_invalid_bounds(lower, upper):
    with pytest.raises(ValueError):
        uniform_return(lower, upper, 1)


def test_uniform_seed_reproducible():
    a = uniform_return(0.0, 1.0, 10, np.random.default_rng(7))
    b = uniform_return(0.0, 1.0, 10, np.random.default_rng(7))
    assert a == b


def test_normal_is_standard():
    values = NormalDistribution(5.0, 3.0).sample(20000, np.random.default_rng(3))
    assert len(values) == 20000
    assert abs(np.mean(values)) < 0.05
    assert abs(np.std(values) - 1.0) < 0.05


def test_poisson_zero_rate_gives_zeros():
    assert Poisson(0.0).sample(20, np.random.default_rng(4)) == [0.0] * 20


def test_poisson_samples_are_counts_with_mean_near_rate():
    values = Poisson(3.0).sample(5000, np.random.default_rng(5))
    assert all(v >= 0 and v == int(v) for v in values)
    assert abs(np.mean(values) - 3.0) < 0.15


def test_poisson_fit_sets_mean():
    dist = Poisson(1.0)
    dist.fit([2.0, 4.0, 6.0])
    assert dist.lambda_ == pytest.approx(4.0)


def test_poisson_fit_empty_resets_to_zero():
    dist = Poisson(1.0)
    dist.fit([])
    assert dist.lambda_ == 0.0


def test_exponential_positive_with_mean_near_inverse_rate():
    values = Exponential(2.0).sample(20000, np.random.default_rng(6))
    assert len(values) == 20000
    assert all(v >= 0.0 for v in values)
    assert abs(np.mean(values) - 0.5) < 0.02