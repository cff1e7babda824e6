from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, tzinfo

from ..common.datetime_utils import (
    epoch_millis,
    format_display_date,
    format_iso_timestamp,
    now_local,
    to_local,
)
from ..common.validators import require_non_empty
from .model import AttendanceDocument, AttendanceRecord
from .repository import AttendanceDocumentRepository


class AttendanceService:
    """Read/append/clear attendance records and the event name.

    Every mutation reloads the whole document, changes it in memory and saves
    it back. The lock only serializes writers inside this process; separate
    processes sharing the file still race and the last save wins.
    """

    def __init__(self, documents: AttendanceDocumentRepository, *, tz: tzinfo | None = None):
        self._documents = documents
        self._tz = tz
        self._write_lock = threading.Lock()

    def _now(self, now: datetime | None) -> datetime:
        return to_local(now, self._tz) if now is not None else now_local(self._tz)

    def load(self) -> AttendanceDocument:
        return self._documents.load()

    def list_all(self) -> list[AttendanceRecord]:
        return list(self.load().records)

    def list_today(self, *, now: datetime | None = None) -> list[AttendanceRecord]:
        today = format_display_date(self._now(now).date())
        return [r for r in self.list_all() if r.date == today]

    def append(self, school_id: str, name: str, *, now: datetime | None = None) -> AttendanceRecord:
        school_id = require_non_empty(school_id, "School ID and name cannot be empty")
        name = require_non_empty(name, "School ID and name cannot be empty")

        moment = self._now(now)
        record = AttendanceRecord(
            id=f"{school_id}-{epoch_millis(moment)}",
            school_id=school_id,
            name=name,
            timestamp=format_iso_timestamp(moment),
            date=format_display_date(moment.date()),
        )

        with self._write_lock:
            document = self._documents.load()
            self._documents.save(replace(document, records=document.records + (record,)))
        return record

    def clear_all(self) -> None:
        with self._write_lock:
            document = self._documents.load()
            self._documents.save(replace(document, records=()))

    def get_event_name(self) -> str:
        return self.load().event_name

    def set_event_name(self, event_name: str) -> str:
        event_name = require_non_empty(event_name, "Event name cannot be empty")
        with self._write_lock:
            document = self._documents.load()
            self._documents.save(replace(document, event_name=event_name))
        return event_name
