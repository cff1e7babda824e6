from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, IO, Iterator

from ..core.constants import DEFAULT_EVENT_NAME
from ..core.exceptions import StorageError
from .model import AttendanceDocument, AttendanceRecord
from .repository import AttendanceDocumentRepository

logger = logging.getLogger(__name__)


@contextmanager
def atomic_writer(path: Path) -> Iterator[IO[str]]:
    """Write to a temp file beside `path`, then rename it over `path`.

    Readers see either the old document or the new one, never a partial write.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            yield fh
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def normalize_document(parsed: Any) -> AttendanceDocument:
    """Accept both the current object shape and the legacy bare array of records."""

    if isinstance(parsed, list):
        event_name, raw_records = DEFAULT_EVENT_NAME, parsed
    elif isinstance(parsed, dict):
        event_name = parsed.get("eventName") or DEFAULT_EVENT_NAME
        raw_records = parsed.get("records") or []
    else:
        logger.warning("Attendance data has unexpected type %s; using defaults", type(parsed).__name__)
        return AttendanceDocument()

    if not isinstance(raw_records, list):
        logger.warning("Attendance records field is not a list; ignoring it")
        raw_records = []

    records = []
    for raw in raw_records:
        if not isinstance(raw, dict):
            logger.warning("Skipping malformed attendance record: %r", raw)
            continue
        records.append(AttendanceRecord.from_dict(raw))

    return AttendanceDocument(event_name=str(event_name), records=tuple(records))


class JsonRecordRepository(AttendanceDocumentRepository):
    def __init__(self, path: str | os.PathLike[str]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AttendanceDocument:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return AttendanceDocument()
        except OSError as e:
            logger.warning("Could not read %s (%s); using defaults", self._path, e)
            return AttendanceDocument()

        try:
            parsed = json.loads(raw)
        except ValueError as e:
            logger.warning("Invalid JSON in %s (%s); using defaults", self._path, e)
            return AttendanceDocument()

        return normalize_document(parsed)

    def save(self, document: AttendanceDocument) -> None:
        try:
            with atomic_writer(self._path) as fh:
                json.dump(document.to_dict(), fh, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Could not write attendance data to {self._path}") from e
