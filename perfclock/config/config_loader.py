"""
Purpose:
    - Loads an optional TOML file with [clock] and [fizzbuzz] tables
    - Validates it into a DemoConfig (unknown keys are rejected)

The demo scripts take no arguments; they run on DemoConfig() defaults.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from perfclock.config.configs import DemoConfig

_LOGGER = logging.getLogger(__name__)


class ConfigLoader:
    """
    Config-loader; loading toml file.
    """

    def __init__(self, base_dir: str = ".") -> None:
        self._base_dir = base_dir

    def load(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = Path(self._base_dir) / file_name

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open("rb") as f:
            return tomllib.load(f)

    def resolve(self, file_name: str) -> DemoConfig:
        raw = self.load(file_name)
        # TOML has no tuples; rules arrive as [[3, "Fizz"], ...]
        fizzbuzz = raw.get("fizzbuzz")
        if isinstance(fizzbuzz, dict) and "rules" in fizzbuzz:
            fizzbuzz["rules"] = tuple(tuple(rule) for rule in fizzbuzz["rules"])
        config = DemoConfig.model_validate(raw)
        _LOGGER.debug(
            "config_resolved",
            extra={"event": "config_resolved", "path": file_name, "sections": sorted(raw)},
        )
        return config


def load_config(path: str | Path) -> DemoConfig:
    """Load and validate a demo config file."""
    return ConfigLoader().resolve(str(path))
