"""Configuration for history containers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Any

from undoable.exceptions import InvalidConfiguration

DEFAULT_CAPACITY = 10

_ENV_PREFIX = "UNDOABLE_"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_capacity(capacity: object) -> int:
    """Return capacity unchanged, or raise InvalidConfiguration if unusable."""
    # bool is an int subclass but never a meaningful capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidConfiguration(f"capacity must be an integer, got {capacity!r}")
    if capacity < 1:
        raise InvalidConfiguration(f"capacity must be at least 1, got {capacity}")
    return capacity


@dataclass
class HistoryConfig:
    """Settings for a history container and the demo app.

    Args:
        capacity: Maximum number of entries retained in the log.
        log_level: Level name applied by the CLI to the root logger.
    """

    capacity: int = DEFAULT_CAPACITY
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate after initialization."""
        validate_capacity(self.capacity)
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise InvalidConfiguration(f"Unknown log level: {self.log_level}")
        self.log_level = level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls, **overrides: Any) -> HistoryConfig:
        """Build a config from UNDOABLE_* environment variables plus overrides.

        Keyword overrides win over the environment; None overrides are ignored
        so argparse defaults can be passed straight through.
        """
        values: dict[str, Any] = {}

        raw_capacity = os.environ.get(f"{_ENV_PREFIX}CAPACITY")
        if raw_capacity is not None and raw_capacity.strip():
            try:
                values["capacity"] = int(raw_capacity)
            except ValueError:
                raise InvalidConfiguration(
                    f"{_ENV_PREFIX}CAPACITY must be an integer, got {raw_capacity!r}"
                ) from None

        raw_level = os.environ.get(f"{_ENV_PREFIX}LOG_LEVEL")
        if raw_level:
            values["log_level"] = raw_level

        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise InvalidConfiguration(f"Unknown config option: {key}")
            if value is not None:
                values[key] = value

        return cls(**values)
