"""
Performance namespace: the clock accessor.

    from perfclock import performance
    start = performance.now()
    ...
    elapsed_ms = performance.now() - start

now() returns the current time in milliseconds (float) since a fixed reference point.
By default that is the moment this module created its process-wide accessor (program
start), read from time.perf_counter. The accessor adds no logic: no rounding, no
clamping, no fallback. ClockUnavailable from the time source propagates unchanged.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from perfclock.core.clock import Millis, build_time_source
from perfclock.ports.clock import TimeSource

_LOGGER = logging.getLogger(__name__)


class Performance:
    """Holds one injectable TimeSource and exposes now() under a stable name."""

    def __init__(self, source: TimeSource) -> None:
        self.source = source

    def now(self) -> Millis:
        """Return the current time in milliseconds."""
        return self.source.now_ms()


_performance = Performance(build_time_source())


def get_performance() -> Performance:
    """Return the process-wide accessor."""
    return _performance


def now() -> Millis:
    """Return the current time in milliseconds from the process-wide accessor."""
    return _performance.now()


@contextmanager
def use_time_source(source: TimeSource) -> Iterator[Performance]:
    """
    Temporarily back the process-wide accessor with `source` (e.g. a stub in tests).
    The previous source is restored on exit. Not guarded against concurrent swaps.
    """
    previous = _performance.source
    _performance.source = source
    _LOGGER.debug(
        "time_source_installed",
        extra={"event": "time_source_installed", "source": type(source).__name__},
    )
    try:
        yield _performance
    finally:
        _performance.source = previous
