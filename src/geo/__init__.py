"""Geo module - bounds checks, grid references and PROJ pipelines."""

from .bounds import check_bounds, coerce_coordinates, ensure_within_bounds
from .gridref import (
    from_gridref,
    gridref_to_coordinates,
    parse_gridref,
    reduce_precision,
    to_gridref,
    validate_gridref,
)

__all__ = [
    'check_bounds',
    'coerce_coordinates',
    'ensure_within_bounds',
    'from_gridref',
    'gridref_to_coordinates',
    'parse_gridref',
    'reduce_precision',
    'to_gridref',
    'validate_gridref',
]
