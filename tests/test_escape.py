"""
Escape-time evaluator tests.
"""
import math

import pytest

from mandel.escape import escape_time


@pytest.mark.parametrize("x, y", [(2.0, 0.0), (0.0, -2.0), (3.0, 4.0), (-1.5, 1.5), (-2.0, 0.0)])
def test_points_outside_radius_escape_on_first_iteration(x, y):
    assert escape_time(x, y, 1000) == 1


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (-1.0, 0.0), (-0.1, 0.1)])
@pytest.mark.parametrize("max_iterations", [1, 2, 10, 1000])
def test_interior_points_never_escape(x, y, max_iterations):
    assert escape_time(x, y, max_iterations) == 0
    assert escape_time(x, y, max_iterations, continuous=True) == 0


def test_discrete_count_is_step_of_first_exceedance():
    # c = 1: z = 1, 2 -> |z|**2 reaches 4 on the second step
    assert escape_time(1.0, 0.0, 10) == 2
    # c = 0.5: z = 0.5, 0.75, 1.0625, 1.62890625, 3.153...
    assert escape_time(0.5, 0.0, 10) == 5


def test_discrete_count_is_an_int():
    assert isinstance(escape_time(1.0, 0.0, 10), int)


def test_escape_beyond_bound_is_reported_as_sentinel():
    assert escape_time(1.0, 0.0, 1) == 0
    assert escape_time(0.5, 0.0, 4) == 0


@pytest.mark.parametrize("x, y", [(3.0, 0.0), (1.0, 0.0), (0.3, 0.5), (-2.1, 0.2), (0.0, 0.0)])
def test_single_iteration_bound_never_exceeds_one(x, y):
    assert escape_time(x, y, 1) in (0, 1)
    assert escape_time(x, y, 1, continuous=True) <= 1


def test_continuous_value_for_known_point():
    # c = 3: z = 3, 12, 147, 21612 -> exceeds 2 << 16 on step 4
    expected = 5 - math.log2(math.log2(21612.0 ** 2) * 0.5)
    assert escape_time(3.0, 0.0, 100, continuous=True) == pytest.approx(expected)


def test_continuous_values_are_smooth_across_one_discrete_step():
    # discrete counts of c = 3 and c = 1 are 1 and 2
    assert escape_time(3.0, 0.0, 100) == 1
    assert escape_time(1.0, 0.0, 100) == 2

    fast = escape_time(3.0, 0.0, 100, continuous=True)
    slow = escape_time(1.0, 0.0, 100, continuous=True)
    assert 0.0 <= slow - fast <= 2.0


def test_continuous_values_grow_towards_the_boundary():
    values = [escape_time(x, 0.0, 500, continuous=True) for x in (2.0, 1.0, 0.5, 0.3)]
    assert values == sorted(values)
