# algobench/__init__.py

# Expose the core, user-facing components of the harness
# at the top-level package namespace.

from .timer import now, elapsed_ms
from .version import AlgorithmVersion, create_version
from .stats import Statistics, compute_statistics
from .suite import Test, TestSuite, VersionResult, create_test
