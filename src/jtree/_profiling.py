"""
Opt-in profiling of grammar productions.

Set ``JTREE_PROFILE`` in the environment before import to record how often
each production runs, how often it fails, and the time spent in it. Without
the variable every hook below compiles down to a no-op.

The collected statistics live in a module-level registry shared by every
parser in the process. This is the only global mutable state in the package
and it exists only while profiling is enabled; parsing itself keeps all of
its state on the ``JsonParser`` instance.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_PRODUCTIONS = __debug__ and "JTREE_PROFILE" in os.environ


@dataclass
class ProductionStats:
    """Call, failure and timing totals for one production."""

    production: str
    call_count: int = 0
    failure_count: int = 0
    total_time_ns: int = 0

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    def record_call(self, duration_ns: int, failed: bool) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        if failed:
            self.failure_count += 1


if PROFILE_PRODUCTIONS:
    _production_stats: dict[str, ProductionStats] = {}

    class ProfileContext:
        """Times one production attempt and notes whether it raised."""

        def __init__(self, production: str) -> None:
            self.production = production
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _production_stats.get(self.production)
            if stats is None:
                stats = _production_stats[self.production] = ProductionStats(
                    self.production
                )
            stats.record_call(duration, failed=exc_type is not None)

    def get_production_stats() -> dict[str, ProductionStats]:
        """Returns a snapshot of the collected statistics."""
        return _production_stats.copy()

    def clear_production_stats() -> None:
        _production_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, production: str) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_production_stats() -> dict[str, ProductionStats]:
        return {}

    def clear_production_stats() -> None:
        pass
