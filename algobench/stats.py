# algobench/stats.py
#
# Aggregates the elapsed-time samples of one algorithm version into the
# average/minimum/maximum summary printed in the report.

from collections import namedtuple

import numpy as np

Statistics = namedtuple('Statistics', ['average', 'minimum', 'maximum'])


def compute_statistics(samples) -> Statistics:
    """
    Computes {average, minimum, maximum} over a sequence of samples (ms).

    An empty sequence is the degenerate result of a version with fewer than
    one run; every field is then NaN rather than an error.
    """
    times = np.asarray(samples, dtype=np.float64)
    if times.size == 0:
        return Statistics(float('nan'), float('nan'), float('nan'))

    average = float(times.mean())
    minimum = float(times.min())
    maximum = float(times.max())
    # Float rounding in the mean can land a hair outside [min, max] when
    # every sample is equal.
    average = min(max(average, minimum), maximum)
    return Statistics(average, minimum, maximum)
