# algobench/suite.py
#
# Implements the Test container and the TestSuite driver. The suite runs every
# registered test in order, every version within a test in order, and every
# repetition of a version one after the other. Nothing overlaps: an
# asynchronous invocation is awaited to completion before its end timestamp
# is taken and before the next repetition starts.

import asyncio
import inspect
import logging

from .report import Reporter
from .stats import compute_statistics
from .timer import now
from .version import AlgorithmVersion

logger = logging.getLogger(__name__)


class Test:
    """
    A named group of algorithm versions benchmarked against each other.
    The order of `versions` is both the execution order and the report order.
    """
    __test__ = False

    def __init__(self, name: str, versions=None):
        self.name = name
        self.versions = []
        for version in versions or []:
            self.add_version(version)

    def add_version(self, version: AlgorithmVersion):
        if not isinstance(version, AlgorithmVersion):
            raise TypeError(f"Test '{self.name}' only accepts AlgorithmVersion objects.")
        self.versions.append(version)

    def __repr__(self):
        return f"Test(name={self.name!r}, versions={[v.name for v in self.versions]!r})"


def create_test(name: str, versions=None) -> Test:
    """Builds a Test from a name and an initial, ordered list of versions."""
    return Test(name, versions)


class VersionResult:
    """The samples and summary statistics of one version for one suite run."""
    def __init__(self, test_name: str, version_name: str, samples: list, statistics):
        self.test_name = test_name
        self.version_name = version_name
        self.samples = samples
        self.statistics = statistics

    def __repr__(self):
        return (f"VersionResult(test={self.test_name!r}, version={self.version_name!r}, "
                f"runs={len(self.samples)}, statistics={self.statistics})")


class TestSuite:
    """
    The top-level registry and driver of all tests.

    Example:
        suite = TestSuite()
        suite.add_test(create_test("search", [linear, bisect]))
        suite.run_sync()
    """
    # Keeps pytest from collecting this class as a test case.
    __test__ = False

    def __init__(self, stream=None):
        self.tests = []
        self.reporter = Reporter(stream)

    def add_test(self, test: Test):
        """Appends a test. Duplicate names are allowed and run independently."""
        if not isinstance(test, Test):
            raise TypeError("TestSuite.add_test expects a Test instance.")
        self.tests.append(test)

    async def run(self) -> list:
        """
        Runs every registered test and reports each version's statistics.

        An exception raised by a version, or by awaiting its result, propagates
        immediately. The remaining repetitions, versions and tests are skipped
        and no statistics are reported for the failing version.

        Returns:
            A list of VersionResult, one per version, in report order.
        """
        results = []
        for test in self.tests:
            logger.info("Running test '%s' (%d versions)", test.name, len(test.versions))
            self.reporter.test_started(test.name)
            for version in test.versions:
                results.append(await self._run_version(test, version))
        return results

    def run_sync(self) -> list:
        """Runs the suite to completion on a fresh event loop."""
        return asyncio.run(self.run())

    async def _run_version(self, test: Test, version: AlgorithmVersion) -> VersionResult:
        self.reporter.version_started(version.name)
        if version.runs < 1:
            logger.warning("Version '%s' has runs=%r; no samples will be taken",
                           version.name, version.runs)

        samples = []
        for i in range(version.runs):
            start = now()
            result = version.execute()
            if inspect.isawaitable(result):
                await result
            end = now()
            samples.append(end - start)
            logger.debug("%s / %s run %d/%d: %.4f ms",
                         test.name, version.name, i + 1, version.runs, samples[-1])

        stats = compute_statistics(samples)
        self.reporter.version_finished(stats)
        return VersionResult(test.name, version.name, samples, stats)
