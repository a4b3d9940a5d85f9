# algobench/timer.py
#
# Thin wrapper over the platform's monotonic high-resolution clock. Every
# timestamp handed out by the harness is a float in milliseconds, so two
# readings can simply be subtracted to get the elapsed time of whatever ran
# between them.

import time


def now() -> float:
    """Returns a monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000


def elapsed_ms(start: float) -> float:
    """Milliseconds elapsed since `start`, a value previously returned by `now()`."""
    return now() - start
