import filetype

from application.ports.content_sniffer import ContentSniffer
from domain.value_objects.detected_file_type import DetectedFileType


class FiletypeContentSniffer(ContentSniffer):
    """Detects file types from magic numbers using the ``filetype`` package."""

    def detect(self, data: bytes) -> DetectedFileType | None:
        if not data:
            return None
        kind = filetype.guess(data)
        if kind is None:
            return None
        return DetectedFileType(extension=kind.extension, mime_type=kind.mime)
