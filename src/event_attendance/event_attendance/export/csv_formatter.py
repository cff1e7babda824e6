from __future__ import annotations

import csv
import io
import re
from datetime import date, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import format_display_time, parse_iso_timestamp, to_local
from ..core.constants import CSV_HEADERS, INVALID_TIME_PLACEHOLDER
from ..core.enums import ExportFilter
from ..records.model import AttendanceRecord

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def record_time_of_day(record: AttendanceRecord, *, tz: Optional[tzinfo] = None) -> str:
    try:
        created = parse_iso_timestamp(record.timestamp)
    except ValueError:
        return INVALID_TIME_PLACEHOLDER
    return format_display_time(to_local(created, tz))


def records_to_csv(records: Iterable[AttendanceRecord], *, tz: Optional[tzinfo] = None) -> str:
    """Render records as CSV with every cell quoted.

    The Time column comes from `timestamp`, not from the stored `date`.
    """

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for r in records:
        writer.writerow([r.school_id, r.name, r.date, record_time_of_day(r, tz=tz)])
    return out.getvalue().rstrip("\n")


def sanitize_event_name(event_name: str) -> str:
    stripped = _UNSAFE_FILENAME_CHARS.sub("", event_name)
    return _WHITESPACE_RUN.sub("-", stripped)


def build_export_filename(event_name: str, export_filter: ExportFilter, today: date) -> str:
    prefix = sanitize_event_name(event_name)
    if export_filter == ExportFilter.TODAY:
        return f"{prefix}-attendance-{today.strftime('%Y-%m-%d')}.csv"
    return f"{prefix}-attendance-all.csv"
