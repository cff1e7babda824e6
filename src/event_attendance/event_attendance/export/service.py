from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from ..common.datetime_utils import now_local, to_local
from ..core.enums import ExportFilter
from ..records.service import AttendanceService
from .csv_formatter import build_export_filename, records_to_csv


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class ExportService:
    def __init__(self, attendance: AttendanceService, *, tz: tzinfo | None = None):
        self._attendance = attendance
        self._tz = tz

    def build_export(self, export_filter: ExportFilter, *, now: datetime | None = None) -> CsvExport:
        now = to_local(now, self._tz) if now is not None else now_local(self._tz)

        if export_filter == ExportFilter.TODAY:
            records = self._attendance.list_today(now=now)
        else:
            records = self._attendance.list_all()

        # Local calendar date in the configured timezone, matching the records that list_today picks.
        filename = build_export_filename(self._attendance.get_event_name(), export_filter, now.date())
        return CsvExport(filename=filename, content=records_to_csv(records, tz=self._tz))
