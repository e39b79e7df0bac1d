"""
FizzBuzz demo programs used to sanity-check execution and console output.

 - main(): timed run; prints labels for 1..100, then the end timestamp and the
   execution time measured with performance.now()
 - bench_main(): untimed run; prints the labels only (external timing harnesses)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from perfclock import performance
from perfclock.config.configs import DEFAULT_RULES, DemoConfig, FizzBuzzConfig, FizzBuzzRule
from perfclock.core.clock import Millis, build_time_source
from perfclock.errors.errors import DemoConfigError
from perfclock.performance import Performance, use_time_source
from perfclock.ports.telemetry import Telemetry

logger = logging.getLogger(__name__)


def fizzbuzz_label(i: int, rules: Sequence[FizzBuzzRule] = DEFAULT_RULES) -> str:
    """Concatenate the words of all matching rules; fall back to str(i)."""
    output = ""
    for divisor, word in rules:
        if i % divisor == 0:
            output += word
    return output or str(i)


def fizzbuzz(
    start: int = 1, stop: int = 100, rules: Sequence[FizzBuzzRule] = DEFAULT_RULES
) -> list[str]:
    """Labels for the inclusive range start..stop."""
    if stop < start:
        raise DemoConfigError(f"fizzbuzz: stop ({stop}) < start ({start})")
    for divisor, _ in rules:
        if divisor <= 0:
            raise DemoConfigError(f"fizzbuzz: divisor must be positive, got {divisor}")
    return [fizzbuzz_label(i, rules) for i in range(start, stop + 1)]


@dataclass(frozen=True)
class TimedRun:
    start_ms: Millis
    end_ms: Millis
    labels: tuple[str, ...]

    @property
    def elapsed_ms(self) -> Millis:
        return self.end_ms - self.start_ms


def run_timed(
    config: Optional[FizzBuzzConfig] = None,
    clock: Optional[Performance] = None,
    telemetry: Optional[Telemetry] = None,
) -> TimedRun:
    """
    Bracket the FizzBuzz loop with two clock reads.
    ClockUnavailable propagates; a failed read never becomes a zero duration.
    """
    config = config or FizzBuzzConfig()
    clock = clock or performance.get_performance()

    start = clock.now()
    labels = fizzbuzz(config.start, config.stop, config.rules)
    end = clock.now()

    run = TimedRun(start_ms=start, end_ms=end, labels=tuple(labels))
    logger.debug(
        "fizzbuzz_run_completed",
        extra={
            "event": "fizzbuzz_run_completed",
            "elapsed_ms": run.elapsed_ms,
            "labels_total": len(labels),
        },
    )
    if telemetry is not None:
        telemetry.log(
            "fizzbuzz_run_completed", elapsed_ms=run.elapsed_ms, labels_total=len(labels)
        )
    return run


def main(out: Optional[TextIO] = None, config: Optional[DemoConfig] = None) -> int:
    """
    Timed demo. With a config, the accessor is backed by the source its [clock] table
    names for the duration of the run; without one, the current source is used.
    """
    out = sys.stdout if out is None else out
    if config is None:
        run = run_timed()
    else:
        with use_time_source(build_time_source(config.clock)) as clock:
            run = run_timed(config.fizzbuzz, clock=clock)
    for label in run.labels:
        print(label, file=out)
    print(f"End: {run.end_ms}", file=out)
    print(f"Execution time: {run.elapsed_ms}ms", file=out)
    return 0


def bench_main(out: Optional[TextIO] = None, config: Optional[DemoConfig] = None) -> int:
    out = sys.stdout if out is None else out
    fb = (config or DemoConfig()).fizzbuzz
    for label in fizzbuzz(fb.start, fb.stop, fb.rules):
        print(label, file=out)
    return 0
