"""Shared constants and helpers."""
from shared.constants import CoordinateSystem, TransformType
from shared.rounding import round_half_away

__all__ = [
    'CoordinateSystem',
    'TransformType',
    'round_half_away',
]
