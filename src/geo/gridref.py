"""
National Grid reference encoding and decoding.

A reference such as ``SU 37292 15541`` names a 100 km square with two
letters, then gives the easting and northing offsets inside that square
with 1-5 digits each. Fewer digits mean a coarser square: ``SU 373 155``
is the 100 m square whose south-west corner is ``SU 37300 15500``.
"""

from __future__ import annotations

import math
import re

from domain.errors import InvalidFormatError, OutOfRangeError
from domain.models import (
    DEFAULT_PROJECTED_BOUNDS,
    BoundingBox,
    BoundsCheck,
    GridReference,
    ProjectedCoordinate,
)
from geo.bounds import Coordinates, check_bounds, coerce_coordinates
from shared.constants import (
    GRID_LETTERS,
    GRID_LETTERS_COLS,
    GRID_PREFIXES,
    GRID_SQUARE_100KM,
    GRID_SQUARE_500KM,
    GRIDREF_MAX_DIGITS,
    GRIDREF_PATTERN,
    MSG_INVALID_GRIDREF,
    MSG_UNSUPPORTED_COORDINATES,
)

# Matched against upper-cased text; ASCII letters and digits only
_GRIDREF_RE = re.compile(GRIDREF_PATTERN)

# False origin of the 500 km squares relative to square 'S'
_MAJOR_ORIGIN_E = 2 * GRID_SQUARE_500KM
_MAJOR_ORIGIN_N = GRID_SQUARE_500KM


def _split_digits(digits: str) -> tuple[str, str] | None:
    """Split the numeric part into easting and northing groups."""
    if ' ' in digits:
        eastings, northings = digits.split(' ')
    else:
        half = len(digits) // 2
        eastings, northings = digits[:half], digits[half:]
    if not eastings or len(eastings) != len(northings):
        return None
    return eastings, northings


def validate_gridref(gridref: str) -> BoundsCheck:
    """
    Test whether *gridref* is a well-formed grid reference.

    Accepts an optional single space after the letters and between the
    digit groups, in any letter case. The digit groups must have the same
    length.
    """
    text = str(gridref).strip().upper()
    valid = (
        _GRIDREF_RE.fullmatch(text) is not None
        and len(text.replace(' ', '')) % 2 == 0
        and _split_digits(text[2:].strip()) is not None
    )
    return BoundsCheck(valid=valid, message='' if valid else MSG_INVALID_GRIDREF)


def parse_gridref(gridref: str) -> GridReference:
    """
    Parse grid reference text into its components.

    Raises:
        InvalidFormatError: If the text is not a valid grid reference

    """
    text = str(gridref).strip()
    check = validate_gridref(text)
    if not check.valid:
        raise InvalidFormatError(text, check.message)

    text = text.upper()
    eastings, northings = _split_digits(text[2:].strip())  # type: ignore[misc]
    return GridReference(letters=text[:2], eastings=eastings, northings=northings)


def gridref_to_coordinates(ref: GridReference) -> ProjectedCoordinate:
    """Return the south-west corner of the square *ref* identifies."""
    major = GRID_LETTERS.index(ref.major_letter)
    minor = GRID_LETTERS.index(ref.minor_letter)

    major_e = (major % GRID_LETTERS_COLS) * GRID_SQUARE_500KM - _MAJOR_ORIGIN_E
    major_n = (major // GRID_LETTERS_COLS) * GRID_SQUARE_500KM - _MAJOR_ORIGIN_N

    minor_e = (minor % GRID_LETTERS_COLS) * GRID_SQUARE_100KM
    minor_n = (minor // GRID_LETTERS_COLS) * GRID_SQUARE_100KM

    scale = ref.resolution_m
    return ProjectedCoordinate(
        easting=major_e + minor_e + int(ref.eastings) * scale,
        northing=major_n + minor_n + int(ref.northings) * scale,
    )


def from_gridref(gridref: str) -> ProjectedCoordinate:
    """
    Decode a grid reference into easting and northing.

    The result is not checked against the national bounds.

    Raises:
        InvalidFormatError: If the text is not a valid grid reference

    """
    return gridref_to_coordinates(parse_gridref(gridref))


def to_gridref(
    coordinates: Coordinates,
    bounds: BoundingBox = DEFAULT_PROJECTED_BOUNDS,
) -> GridReference:
    """
    Encode easting and northing as a full (1 m) precision grid reference.

    Args:
        coordinates: ProjectedCoordinate or mapping with ``ea``/``no``
        bounds: Supported projected extent

    Returns:
        GridReference with five-digit groups

    Raises:
        OutOfRangeError: If the coordinates fall outside *bounds* or outside
            the lettered 100 km squares

    """
    coords = coerce_coordinates(coordinates)
    if not isinstance(coords, ProjectedCoordinate):
        raise OutOfRangeError(MSG_UNSUPPORTED_COORDINATES)

    check = check_bounds(coords, projected=bounds)
    if not check.valid:
        raise OutOfRangeError(check.message)

    col = math.floor(coords.easting / GRID_SQUARE_100KM)
    row = math.floor(coords.northing / GRID_SQUARE_100KM)
    if not (0 <= row < len(GRID_PREFIXES) and 0 <= col < len(GRID_PREFIXES[row])):
        msg = f'No 100 km square at row {row}, column {col}'
        raise OutOfRangeError(msg)

    e = math.floor(coords.easting % GRID_SQUARE_100KM)
    n = math.floor(coords.northing % GRID_SQUARE_100KM)
    width = GRIDREF_MAX_DIGITS
    return GridReference(
        letters=GRID_PREFIXES[row][col],
        eastings=f'{e:0{width}d}',
        northings=f'{n:0{width}d}',
    )


def reduce_precision(ref: GridReference, digits: int) -> GridReference:
    """
    Truncate *ref* to *digits* per axis (the containing coarser square).

    Raises:
        ValueError: If *digits* is outside 1..current precision

    """
    if not 1 <= digits <= ref.precision:
        msg = f'digits must be between 1 and {ref.precision}, got {digits}'
        raise ValueError(msg)
    return GridReference(
        letters=ref.letters,
        eastings=ref.eastings[:digits],
        northings=ref.northings[:digits],
    )
