from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.constants import DEFAULT_EVENT_NAME


def _text(value: Any) -> str:
    # JSON null must not become the string "None" on the next save.
    return "" if value is None else str(value)


@dataclass(frozen=True)
class AttendanceRecord:
    """One check-in: who arrived and when."""

    id: str
    school_id: str
    name: str
    timestamp: str
    date: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "schoolId": self.school_id,
            "name": self.name,
            "timestamp": self.timestamp,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AttendanceRecord":
        return cls(
            id=_text(raw.get("id")),
            school_id=_text(raw.get("schoolId")),
            name=_text(raw.get("name")),
            timestamp=_text(raw.get("timestamp")),
            date=_text(raw.get("date")),
        )


@dataclass(frozen=True)
class AttendanceDocument:
    """The whole persisted state: event label plus records in arrival order."""

    event_name: str = DEFAULT_EVENT_NAME
    records: tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventName": self.event_name,
            "records": [r.to_dict() for r in self.records],
        }
