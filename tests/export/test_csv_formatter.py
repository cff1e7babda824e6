from datetime import date, timedelta, timezone

from src.event_attendance.event_attendance.core.enums import ExportFilter
from src.event_attendance.event_attendance.export.csv_formatter import (
    build_export_filename,
    records_to_csv,
    sanitize_event_name,
)
from src.event_attendance.event_attendance.records.model import AttendanceRecord


def _record(school_id, name, timestamp, day="1/1/2024"):
    return AttendanceRecord(id=f"{school_id}-0", school_id=school_id, name=name, timestamp=timestamp, date=day)


def test_csv_has_header_and_rows_in_input_order():
    records = [
        _record("S1", "Ann", "2024-01-01T09:05:03.000Z"),
        _record("S2", "Bo", "2024-01-01T14:30:00.500Z"),
    ]

    csv_text = records_to_csv(records, tz=timezone.utc)

    assert csv_text.split("\n") == [
        '"School ID","Name","Date","Time"',
        '"S1","Ann","1/1/2024","9:05:03 AM"',
        '"S2","Bo","1/1/2024","2:30:00 PM"',
    ]


def test_empty_input_yields_header_only():
    assert records_to_csv([], tz=timezone.utc) == '"School ID","Name","Date","Time"'


def test_embedded_quotes_are_doubled():
    csv_text = records_to_csv([_record("S1", 'Ann "Annie" Lee', "2024-01-01T00:00:00.000Z")], tz=timezone.utc)

    assert csv_text.split("\n")[1] == '"S1","Ann ""Annie"" Lee","1/1/2024","12:00:00 AM"'


def test_time_column_follows_timezone_not_stored_date():
    tz = timezone(timedelta(hours=-5))
    csv_text = records_to_csv([_record("S1", "Ann", "2024-01-02T03:00:00.000Z", day="1/2/2024")], tz=tz)

    assert csv_text.split("\n")[1] == '"S1","Ann","1/2/2024","10:00:00 PM"'


def test_sanitize_strips_punctuation_and_collapses_spaces():
    assert sanitize_event_name("Spring Fest! 2024") == "Spring-Fest-2024"
    assert sanitize_event_name("Math   Club: Week-3") == "Math-Club-Week-3"


def test_filename_for_all_records():
    name = build_export_filename("Spring Fest! 2024", ExportFilter.ALL, date(2024, 3, 9))

    assert name == "Spring-Fest-2024-attendance-all.csv"


def test_filename_for_today_uses_iso_date():
    name = build_export_filename("Open House", ExportFilter.TODAY, date(2024, 3, 9))

    assert name == "Open-House-attendance-2024-03-09.csv"


def test_unparseable_timestamp_shows_placeholder_and_keeps_other_rows():
    records = [
        _record("S1", "Ann", ""),
        _record("S2", "Bo", "not-a-time"),
        _record("S3", "Cy", "2024-01-01T09:05:03.000Z"),
    ]

    lines = records_to_csv(records, tz=timezone.utc).split("\n")

    assert lines[1:] == [
        '"S1","Ann","1/1/2024","Invalid Date"',
        '"S2","Bo","1/1/2024","Invalid Date"',
        '"S3","Cy","1/1/2024","9:05:03 AM"',
    ]
