from enum import Enum


class VisibleTo(str, Enum):
    """Named visibility classes for a Want."""

    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"
