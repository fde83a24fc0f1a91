"""
Prometheus metrics collection for ksuid-toolkit.

Counters live in the default registry; an embedding application exposes them
through whatever exporter it already runs. This package never opens a port.
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram

ksuids_generated_total = Counter(
    "ksuid_generated_total",
    "Total number of identifiers minted by the service",
)

ksuids_parsed_total = Counter(
    "ksuid_parsed_total",
    "Total number of identifier strings parsed by the service",
    ["status"],  # status: success, failure
)

batch_size = Histogram(
    "ksuid_batch_size",
    "Number of identifiers requested per generate call",
    buckets=(1, 2, 5, 10, 50, 100, 500, 1000, 10000),
)

operation_duration_seconds = Histogram(
    "ksuid_operation_duration_seconds",
    "Duration of service operations in seconds",
    ["operation"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

P = ParamSpec("P")
R = TypeVar("R")


def track_duration(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator to track how long a service operation takes.

    Args:
        operation: Label value for the operation histogram
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                operation_duration_seconds.labels(operation=operation).observe(
                    time.perf_counter() - start
                )

        return wrapper

    return decorator
