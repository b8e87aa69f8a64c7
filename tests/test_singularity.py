import numpy as np
import pytest

from roark_beam.kernel import step


@pytest.mark.parametrize("a", [0.0, 1.5, 120.0, -3.0])
@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_step_is_zero_at_discontinuity(a, n):
    """
    At x == a the load has not acted yet: the value is exactly 0 for every n,
    including n = 0 where a naive (x - a)**0 would give 1.
    """
    value = step(a, a, n)
    assert value == 0.0
    assert not np.isnan(value)


@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_step_just_past_discontinuity(n):
    a = 120.0
    eps = 1e-3
    assert np.isclose(step(a + eps, a, n), eps**n, rtol=1e-6, atol=0.0)


def test_step_before_discontinuity_is_zero():
    for n in (0, 1, 2, 3):
        assert step(10.0, 20.0, n) == 0.0


def test_step_after_discontinuity():
    assert step(5.0, 2.0, 0) == 1.0
    assert step(5.0, 2.0, 1) == 3.0
    assert step(5.0, 2.0, 2) == 9.0
    assert step(5.0, 2.0, 3) == 27.0
    assert isinstance(step(5, 2, 1), float)
