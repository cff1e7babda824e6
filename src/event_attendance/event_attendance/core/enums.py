from __future__ import annotations

from enum import Enum


class ExportFilter(str, Enum):
    """Which records a CSV download contains."""

    ALL = "all"
    TODAY = "today"

    @classmethod
    def parse(cls, value: str | None) -> "ExportFilter":
        # Only an exact "today" selects the daily export; anything else is the full one.
        if value == cls.TODAY.value:
            return cls.TODAY
        return cls.ALL
