"""Domain layer exports."""

from domain.aggregates import Want
from domain.exceptions import (
    AggregateNotFoundError,
    DomainError,
    InfrastructureError,
    InvalidContentError,
    ValidationError,
)
from domain.value_objects import (
    DetectedFileType,
    VisibleTo,
    WantImage,
    WantLocation,
    WantVisibility,
)

__all__ = [
    "AggregateNotFoundError",
    "DetectedFileType",
    "DomainError",
    "InfrastructureError",
    "InvalidContentError",
    "ValidationError",
    "VisibleTo",
    "Want",
    "WantImage",
    "WantLocation",
    "WantVisibility",
]
