"""Wall-clock measurement of a single task."""

from __future__ import annotations

import time
from typing import Callable


class TaskTimer:
    """Times callables in milliseconds with microsecond resolution."""

    def measure_task(self, task: Callable[[], object]) -> float:
        """Run the task once and return its duration in milliseconds."""
        start = time.perf_counter_ns()
        task()
        end = time.perf_counter_ns()
        microseconds = (end - start) // 1000
        return microseconds / 1000.0