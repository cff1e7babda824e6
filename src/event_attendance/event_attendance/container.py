from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .common.datetime_utils import resolve_timezone
from .export.service import ExportService
from .records.json_record_repository import JsonRecordRepository
from .records.service import AttendanceService


@dataclass(frozen=True)
class Container:
    tz: Optional[tzinfo]

    records_repo: JsonRecordRepository

    attendance_service: AttendanceService
    export_service: ExportService


def build_container(*, data_file: str, timezone_name: str | None = None) -> Container:
    tz = resolve_timezone(timezone_name)

    records_repo = JsonRecordRepository(data_file)

    attendance_service = AttendanceService(records_repo, tz=tz)
    export_service = ExportService(attendance_service, tz=tz)

    return Container(
        tz=tz,
        records_repo=records_repo,
        attendance_service=attendance_service,
        export_service=export_service,
    )
