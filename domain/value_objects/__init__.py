from .detected_file_type import DetectedFileType
from .visible_to import VisibleTo
from .want_image import WantImage
from .want_location import WantLocation
from .want_visibility import WantVisibility

__all__ = [
    "DetectedFileType",
    "VisibleTo",
    "WantImage",
    "WantLocation",
    "WantVisibility",
]
