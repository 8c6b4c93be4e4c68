import math

import pytest
from basicstats.services.aggregates import harmonic_mean, mean, median, mode, stddev
from basicstats.services.errors import DivisionByZero, EmptyInput

SAMPLES = [
    [1.0],
    [1.0, 2.0, 2.0, 3.0, 4.0],
    [0.5, 0.25, 8.0, 13.0],
    [10.0, 10.0, 10.0],
    [-3.0, 7.5, 2.25, -1.0, 0.0, 4.0],
    [1e6, 1e-3, 42.0, 42.0, 7.0],
]
POSITIVE_SAMPLES = [s for s in SAMPLES if all(v > 0 for v in s)]

def test_scenario_values():
    data = [1.0, 2.0, 2.0, 3.0, 4.0]
    assert mean(data) == pytest.approx(2.4)
    assert median(data) == 2.0
    assert mode(data) == 2.0
    assert round(stddev(data), 3) == 1.020
    assert round(harmonic_mean(data), 3) == 1.935

@pytest.mark.parametrize("data", SAMPLES)
def test_mean_times_n_is_sum(data):
    assert mean(data) * len(data) == pytest.approx(sum(data))

@pytest.mark.parametrize("data", SAMPLES)
def test_median_idempotent_under_resorting(data):
    once = sorted(data)
    assert median(once) == median(sorted(once))

@pytest.mark.parametrize("data", SAMPLES)
def test_stddev_non_negative(data):
    assert stddev(data) >= 0

@pytest.mark.parametrize("data", POSITIVE_SAMPLES)
def test_harmonic_mean_not_above_mean(data):
    assert harmonic_mean(data) <= mean(data) + 1e-9

def test_stddev_matches_population_formula():
    data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert stddev(data) == pytest.approx(2.0, abs=1e-6)
    assert stddev(data, avg=5.0) == pytest.approx(2.0, abs=1e-6)

def test_stddev_of_constant_sample_is_zero():
    assert stddev([3.0, 3.0, 3.0]) == 0.0

def test_median_even_and_odd():
    assert median([1.0, 2.0, 3.0, 4.0]) == 2.5
    assert median([1.0, 2.0, 3.0]) == 2.0

def test_mode_trailing_run_is_counted():
    # a sweep that only compares runs on a value change would return 1 here
    assert mode(sorted([5.0, 5.0, 5.0, 1.0, 1.0])) == 5.0

def test_mode_tie_keeps_first_run():
    assert mode([1.0, 1.0, 2.0, 2.0, 3.0]) == 1.0
    assert mode([1.0, 2.0, 2.0, 3.0, 3.0]) == 2.0

def test_mode_all_distinct_is_first_value():
    assert mode([1.0, 2.0, 3.0]) == 1.0

def test_mode_single_run():
    assert mode([4.0, 4.0]) == 4.0

def test_harmonic_mean_zero_value():
    with pytest.raises(DivisionByZero):
        harmonic_mean([1.0, 0.0, 3.0])

def test_harmonic_mean_reciprocals_cancel():
    with pytest.raises(DivisionByZero):
        harmonic_mean([-1.0, 1.0])

def test_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        harmonic_mean([0.0])

@pytest.mark.parametrize("func", [mean, median, mode, stddev, harmonic_mean])
def test_empty_input_raises(func):
    with pytest.raises(EmptyInput):
        func([])

def test_empty_input_is_value_error():
    with pytest.raises(ValueError):
        mean([])

def test_results_are_finite_for_regular_input():
    data = [1.5, 2.5, 2.5, 10.0]
    for func in (mean, median, mode, stddev, harmonic_mean):
        assert math.isfinite(func(data))
