# algobench/version.py
#
# Defines the AlgorithmVersion object: one candidate implementation of an
# operation, with its arguments bound ahead of time so the suite can call it
# without knowing its real signature.

class AlgorithmVersion:
    """
    A named, pre-bound invocation of a candidate implementation plus the
    number of times the suite should run it.

    Instances are immutable once built; use `create_version` to make one.
    """
    __slots__ = ('name', 'algorithm', 'runs', 'args')

    def __init__(self, name: str, algorithm, runs: int, args=()):
        if not callable(algorithm):
            raise TypeError(f"Algorithm for version '{name}' must be callable.")
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'algorithm', algorithm)
        object.__setattr__(self, 'runs', runs)
        object.__setattr__(self, 'args', tuple(args))

    def __setattr__(self, key, value):
        raise AttributeError(f"AlgorithmVersion '{self.name}' is immutable.")

    def __delattr__(self, key):
        raise AttributeError(f"AlgorithmVersion '{self.name}' is immutable.")

    def execute(self):
        """
        Calls the algorithm with exactly the bound arguments and returns
        whatever it returns. An awaitable result is passed through untouched;
        awaiting it is the caller's job.
        """
        return self.algorithm(*self.args)

    def __repr__(self):
        return (f"AlgorithmVersion(name={self.name!r}, "
                f"algorithm={getattr(self.algorithm, '__name__', self.algorithm)!r}, "
                f"runs={self.runs})")


def create_version(name: str, algorithm, runs: int, args=()) -> AlgorithmVersion:
    """
    Builds an AlgorithmVersion that will call `algorithm(*args)` when run.

    Args:
        name: Label shown in the report.
        algorithm: The candidate callable. It is not invoked here.
        runs: Number of timed repetitions. Values below 1 are accepted and
              produce an empty sample set (NaN statistics).
        args: The ordered argument list captured for every invocation.

    Returns:
        The new AlgorithmVersion.
    """
    return AlgorithmVersion(name, algorithm, runs, args)
