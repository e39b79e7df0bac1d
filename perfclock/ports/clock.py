"""Time Source Port Interface.

Contract: Provides the current time in milliseconds (float) since a fixed,
implementation-defined reference point. Single method, so deterministic stubs can
replace the host clock in tests.
"""

from __future__ import annotations

from typing import Protocol


class TimeSource(Protocol):
    def now_ms(self) -> float:
        """Return current time in milliseconds (float, no rounding).
        Should be monotonic non-decreasing within a process run.
        """
        ...
