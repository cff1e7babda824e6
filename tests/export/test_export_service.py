from __future__ import annotations

from datetime import datetime, timezone

from src.event_attendance.event_attendance.core.enums import ExportFilter
from src.event_attendance.event_attendance.export.service import ExportService
from src.event_attendance.event_attendance.records.model import AttendanceDocument, AttendanceRecord
from src.event_attendance.event_attendance.records.service import AttendanceService


class FakeDocuments:
    def __init__(self, document: AttendanceDocument):
        self.document = document

    def load(self) -> AttendanceDocument:
        return self.document

    def save(self, document: AttendanceDocument) -> None:
        self.document = document


NOW = datetime(2024, 3, 9, 12, 0, tzinfo=timezone.utc)


def _service() -> ExportService:
    doc = AttendanceDocument(
        event_name="Spring Fest! 2024",
        records=(
            AttendanceRecord(id="S1-0", school_id="S1", name="Ann", timestamp="2024-03-08T09:00:00.000Z", date="3/8/2024"),
            AttendanceRecord(id="S2-0", school_id="S2", name="Bo", timestamp="2024-03-09T10:00:00.000Z", date="3/9/2024"),
        ),
    )
    return ExportService(AttendanceService(FakeDocuments(doc), tz=timezone.utc), tz=timezone.utc)


def test_export_all_contains_every_record():
    export = _service().build_export(ExportFilter.ALL, now=NOW)

    assert export.filename == "Spring-Fest-2024-attendance-all.csv"
    assert len(export.content.split("\n")) == 3


def test_export_today_filters_and_names_with_date():
    export = _service().build_export(ExportFilter.TODAY, now=NOW)

    assert export.filename == "Spring-Fest-2024-attendance-2024-03-09.csv"
    assert export.content.split("\n")[1:] == ['"S2","Bo","3/9/2024","10:00:00 AM"']


def test_filter_parse_defaults_to_all():
    assert ExportFilter.parse(None) is ExportFilter.ALL
    assert ExportFilter.parse("weekly") is ExportFilter.ALL
    assert ExportFilter.parse("today") is ExportFilter.TODAY
    assert ExportFilter.parse("TODAY") is ExportFilter.ALL
    assert ExportFilter.parse(" today ") is ExportFilter.ALL
