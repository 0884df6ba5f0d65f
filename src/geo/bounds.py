from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError

from domain.errors import OutOfRangeError
from domain.models import (
    DEFAULT_GEOGRAPHIC_BOUNDS,
    DEFAULT_PROJECTED_BOUNDS,
    BoundingBox,
    BoundsCheck,
    GeographicCoordinate,
    ProjectedCoordinate,
)
from shared.constants import MSG_OUT_OF_RANGE, MSG_UNSUPPORTED_COORDINATES

Coordinates = ProjectedCoordinate | GeographicCoordinate | Mapping


def coerce_coordinates(
    coordinates: Coordinates,
) -> ProjectedCoordinate | GeographicCoordinate | None:
    """
    Turn a mapping with ``ea``/``no`` or ``lat``/``lng`` keys into a model.

    The long field names (``easting`` etc.) are accepted as well. Returns
    None when the keys or values do not describe either kind of coordinate.
    """
    if isinstance(coordinates, (ProjectedCoordinate, GeographicCoordinate)):
        return coordinates
    if not isinstance(coordinates, Mapping):
        return None
    keys = set(coordinates)
    try:
        if keys >= {'ea', 'no'} or keys >= {'easting', 'northing'}:
            return ProjectedCoordinate.model_validate(dict(coordinates))
        if keys >= {'lat', 'lng'} or keys >= {'latitude', 'longitude'}:
            return GeographicCoordinate.model_validate(dict(coordinates))
    except ValidationError:
        return None
    return None


def check_bounds(
    coordinates: Coordinates,
    projected: BoundingBox = DEFAULT_PROJECTED_BOUNDS,
    geographic: BoundingBox = DEFAULT_GEOGRAPHIC_BOUNDS,
) -> BoundsCheck:
    """
    Test whether coordinates lie within the supported extent.

    Projected coordinates are checked against *projected*, geographic ones
    against *geographic*; both boxes are inclusive on every edge. Never
    raises.

    Args:
        coordinates: ProjectedCoordinate, GeographicCoordinate or a mapping
            with the equivalent keys
        projected: Extent in easting/northing
        geographic: Extent in longitude/latitude

    Returns:
        BoundsCheck with ``valid`` and a message (empty when valid)

    """
    coords = coerce_coordinates(coordinates)
    if coords is None:
        return BoundsCheck(valid=False, message=MSG_UNSUPPORTED_COORDINATES)

    if isinstance(coords, ProjectedCoordinate):
        ok = projected.contains(coords.easting, coords.northing)
    else:
        ok = geographic.contains(coords.longitude, coords.latitude)

    return BoundsCheck(valid=ok, message='' if ok else MSG_OUT_OF_RANGE)


def ensure_within_bounds(
    coordinates: Coordinates,
    projected: BoundingBox = DEFAULT_PROJECTED_BOUNDS,
    geographic: BoundingBox = DEFAULT_GEOGRAPHIC_BOUNDS,
) -> ProjectedCoordinate | GeographicCoordinate:
    """Like :func:`check_bounds` but raise OutOfRangeError on failure."""
    result = check_bounds(coordinates, projected, geographic)
    if not result.valid:
        raise OutOfRangeError(result.message)
    return coerce_coordinates(coordinates)  # type: ignore[return-value]
