from __future__ import annotations

from typing import Protocol

from .model import AttendanceDocument


class AttendanceDocumentRepository(Protocol):
    def load(self) -> AttendanceDocument:
        """Return the stored document, or the default one when nothing usable is stored."""

        raise NotImplementedError

    def save(self, document: AttendanceDocument) -> None:
        """Replace the stored document as a whole."""

        raise NotImplementedError
