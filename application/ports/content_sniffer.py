from __future__ import annotations

from typing import Protocol

from domain.value_objects.detected_file_type import DetectedFileType


class ContentSniffer(Protocol):
    def detect(self, data: bytes) -> DetectedFileType | None:
        """Infer the file type from the content itself, or ``None`` if unrecognized."""
        ...
