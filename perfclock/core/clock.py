"""
Time sources behind the clock accessor (perfclock.performance.now()).

Every source implements the single-method TimeSource port (now_ms() -> float). The
accessor itself is a pass-through; all knowledge about the host primitive lives here:
 - HostTimeSource: default; milliseconds since construction, read from perf_counter
 - WallTimeSource: milliseconds since the Unix epoch, read from time.time
 - SteppingTimeSource: deterministic stub for tests, advances by a fixed step per read
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, Optional

from perfclock.config.configs import ClockConfig
from perfclock.errors.errors import ClockUnavailable
from perfclock.ports.clock import TimeSource

_LOGGER = logging.getLogger(__name__)

# type alias (at runtime equivalent to float)
# Milliseconds since the source's reference point; fractional part keeps sub-ms resolution.
Millis = float

_MS_PER_S = 1000.0


def _read_host(primitive: Callable[[], float], source: str) -> float:
    """
    Call a host primitive returning seconds. Host failures become ClockUnavailable;
    nothing is substituted.
    """
    try:
        return primitive()
    except (OSError, RuntimeError) as exc:
        _LOGGER.debug(
            "clock_unavailable",
            extra={"event": "clock_unavailable", "source": source},
        )
        raise ClockUnavailable(f"{source}: host time primitive failed: {exc}") from exc


# -------- HostTimeSource ------------------------------------------------------


class HostTimeSource:
    """
    Default source: milliseconds elapsed since this object was constructed.

    It anchors to perf_counter() at construction, so the epoch of the process-wide
    accessor is "program start". perf_counter is monotonic within a process on every
    platform CPython supports; nothing stronger is promised (no relation to wall time,
    not comparable across processes).

    _t0: The perf_counter reading (in seconds) at construction.
    """

    def __init__(self, primitive: Callable[[], float] = time.perf_counter) -> None:
        self._primitive = primitive
        self._t0 = _read_host(primitive, "HostTimeSource")

    def now_ms(self) -> Millis:
        elapsed_s = _read_host(self._primitive, "HostTimeSource") - self._t0
        return elapsed_s * _MS_PER_S


# -------- WallTimeSource ------------------------------------------------------


class WallTimeSource:
    """
    Milliseconds since the Unix epoch (UTC), read from time.time().

    Wall time follows NTP and manual adjustments, so it can move backward. This source
    does not protect against that; use HostTimeSource for elapsed-time measurements.
    """

    def __init__(self, primitive: Callable[[], float] = time.time) -> None:
        self._primitive = primitive

    def now_ms(self) -> Millis:
        return _read_host(self._primitive, "WallTimeSource") * _MS_PER_S


# -------- SteppingTimeSource --------------------------------------------------


class SteppingTimeSource:
    """
    Deterministic, self-advancing clock for tests.

    The first read returns start_ms; every subsequent read returns the previous value
    plus step_ms. Reads are serialized with a lock so concurrent callers each observe a
    distinct, strictly ordered value.
    """

    def __init__(self, start_ms: Millis = 0.0, step_ms: Millis = 1.0) -> None:
        if not (math.isfinite(start_ms) and start_ms >= 0):
            raise ValueError("SteppingTimeSource: start_ms must be finite and >= 0")
        if not (math.isfinite(step_ms) and step_ms >= 0):
            raise ValueError("SteppingTimeSource: step_ms must be finite and >= 0")
        self.start_ms = float(start_ms)
        self.step_ms = float(step_ms)
        self.reads = 0
        self._lock = threading.Lock()

    def now_ms(self) -> Millis:
        with self._lock:
            current = self.start_ms + self.reads * self.step_ms
            self.reads += 1
        return current


# -------- Factory -------------------------------------------------------------


def build_time_source(config: Optional[ClockConfig] = None) -> TimeSource:
    """Create the time source named by the config (defaults to the host source)."""
    config = config or ClockConfig()
    if config.source == "wall":
        return WallTimeSource()
    return HostTimeSource()
