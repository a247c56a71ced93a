"""Upstream search metrics.

Collects latency samples and failure counts for Azure Maps calls. Only the
most recent samples are kept so percentiles reflect current behaviour.
"""
import time
from collections import deque
from contextlib import contextmanager

MAX_SAMPLES = 1000

_upstream_timings_ms: deque[float] = deque(maxlen=MAX_SAMPLES)
_upstream_failures: int = 0


@contextmanager
def record_upstream_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _upstream_timings_ms.append((time.perf_counter() - start) * 1000.0)


def record_upstream_failure() -> None:
    global _upstream_failures
    _upstream_failures += 1


def _percentiles(values) -> dict:
    if not values:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    vals = sorted(values)
    count = len(vals)

    def _p(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return vals[idx]
    return {"count": count, "p95_ms": _p(0.95), "p99_ms": _p(0.99)}


def snapshot_metrics() -> dict:
    return {
        "upstream": _percentiles(_upstream_timings_ms),
        "upstream_failures": _upstream_failures,
    }


def reset_metrics() -> None:
    global _upstream_failures
    _upstream_timings_ms.clear()
    _upstream_failures = 0
