"""Unit system selection."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger("weatherdash")


class UnitSystem(str, Enum):
    """Metric or imperial; picks provider fields and display labels."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def parse(cls, value: object) -> UnitSystem:
        """Resolve a user-supplied value, falling back to metric when unrecognized."""
        if isinstance(value, cls):
            return value
        normalized = value.strip().lower() if isinstance(value, str) else ""
        for member in cls:
            if member.value == normalized:
                return member
        logger.debug("Unrecognized unit system %r, using metric", value)
        return cls.METRIC

    @property
    def temperature_label(self) -> str:
        return "°F" if self is UnitSystem.IMPERIAL else "°C"
