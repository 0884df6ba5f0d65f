"""Domain models and errors."""
from domain.errors import (
    ConfigurationError,
    DatasetUnavailableError,
    InvalidFormatError,
    OutOfRangeError,
    TransformError,
    TransformServiceError,
)
from domain.models import (
    BoundingBox,
    BoundsCheck,
    GeographicCoordinate,
    GridReference,
    ProjectedCoordinate,
    TransformSettings,
)

__all__ = [
    'BoundingBox',
    'BoundsCheck',
    'ConfigurationError',
    'DatasetUnavailableError',
    'GeographicCoordinate',
    'GridReference',
    'InvalidFormatError',
    'OutOfRangeError',
    'ProjectedCoordinate',
    'TransformError',
    'TransformServiceError',
    'TransformSettings',
]
