# algobench/report.py
#
# Writes the human-readable benchmark report. Output goes to an append-only
# text stream, stdout unless the caller supplies another one.

import sys


class Reporter:
    """
    Emits the report lines for tests and algorithm versions, in the order
    the suite calls it.

    Example:
        reporter = Reporter()
        reporter.test_started("search")
        reporter.version_started("linear scan")
        reporter.version_finished(stats)
    """
    def __init__(self, stream=None):
        self._stream = stream

    @property
    def stream(self):
        # Resolved on every write so a swapped sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str):
        print(line, file=self.stream)

    def test_started(self, name: str):
        self._write(f"Running Test: {name}")

    def version_started(self, name: str):
        self._write(f"  Running Algorithm Version: {name}")

    def version_finished(self, stats):
        self._write(f"    Average Time: {stats.average:.2f}ms")
        self._write(f"    Fastest Time: {stats.minimum:.2f}ms")
        self._write(f"    Slowest Time: {stats.maximum:.2f}ms")
