import math
import time

from algobench import compute_statistics, elapsed_ms, now


def test_statistics_over_samples():
    stats = compute_statistics([2.0, 4.0, 9.0])
    assert stats.average == 5.0
    assert stats.minimum == 2.0
    assert stats.maximum == 9.0


def test_single_sample():
    stats = compute_statistics([1.5])
    assert stats == (1.5, 1.5, 1.5)


def test_equal_samples_keep_average_within_bounds():
    stats = compute_statistics([0.1] * 7)
    assert stats.minimum <= stats.average <= stats.maximum


def test_empty_samples_are_nan():
    stats = compute_statistics([])
    assert all(math.isnan(value) for value in stats)


def test_timer_is_monotonic():
    t1 = now()
    t2 = now()
    assert t2 >= t1
    assert elapsed_ms(t1) >= 0


def test_timer_reports_milliseconds():
    start = now()
    time.sleep(0.02)
    assert 18 <= elapsed_ms(start) <= 100
