from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

"""
Here, we collect the configs for the clock accessor and the demo programs.
"""


# (divisor, word); words are concatenated in rule order
FizzBuzzRule = tuple[int, str]

DEFAULT_RULES: tuple[FizzBuzzRule, ...] = ((3, "Fizz"), (5, "Buzz"))


# --- Clock Section ---


class ClockConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # host: ms since accessor construction (perf_counter); wall: ms since Unix epoch
    source: Literal["host", "wall"] = "host"


# --- Demo Section ---


class FizzBuzzConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    start: int = 1
    stop: int = 100  # inclusive
    rules: tuple[FizzBuzzRule, ...] = DEFAULT_RULES

    @model_validator(mode="after")
    def _check(self) -> "FizzBuzzConfig":
        if self.stop < self.start:
            raise ValueError(f"FizzBuzzConfig: stop ({self.stop}) < start ({self.start})")
        for divisor, _ in self.rules:
            if divisor <= 0:
                raise ValueError(f"FizzBuzzConfig: divisor must be positive, got {divisor}")
        return self


class DemoConfig(BaseModel):
    """Top-level config: one table per section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    clock: ClockConfig = ClockConfig()
    fizzbuzz: FizzBuzzConfig = FizzBuzzConfig()
