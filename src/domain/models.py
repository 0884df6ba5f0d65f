from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator, model_validator

from shared.constants import (
    GEOGRAPHIC_BOUNDS,
    GIQTRANS_CGI_PATH_DEFAULT,
    GRID_LETTERS,
    GRIDREF_HTML_SEPARATOR,
    GRIDREF_MAX_DIGITS,
    HELMERT_OSGB36_TO_WGS84,
    HTTP_TIMEOUT_DEFAULT,
    OSTN15_GSB_PATH_DEFAULT,
    OSTN15_TIF_PATH_DEFAULT,
    PROJECTED_BOUNDS,
    TransformType,
    default_transform_type,
)


class ProjectedCoordinate(BaseModel):
    """Easting/northing on the British National Grid, in metres."""

    model_config = {'frozen': True, 'populate_by_name': True}

    easting: float = Field(alias='ea')
    northing: float = Field(alias='no')

    def as_xy(self) -> tuple[float, float]:
        return (self.easting, self.northing)

    def to_dict(self) -> dict:
        """Short-key form, e.g. ``{'ea': 437292.0, 'no': 115541.0}``."""
        return self.model_dump(by_alias=True)


class GeographicCoordinate(BaseModel):
    """Latitude/longitude in decimal degrees (ETRS89, WGS84 equivalent)."""

    model_config = {'frozen': True, 'populate_by_name': True}

    latitude: float = Field(alias='lat')
    longitude: float = Field(alias='lng')

    def as_xy(self) -> tuple[float, float]:
        # X,Y order puts longitude first
        return (self.longitude, self.latitude)

    def to_dict(self) -> dict:
        """Short-key form, e.g. ``{'lat': 50.93, 'lng': -1.47}``."""
        return self.model_dump(by_alias=True)


class GridReference(BaseModel):
    """
    A National Grid reference split into its components.

    ``letters`` names the 100 km square; ``eastings`` and ``northings`` are
    zero-padded digit strings of equal length (1-5 digits).
    """

    model_config = {'frozen': True}

    letters: str
    eastings: str
    northings: str

    @field_validator('letters')
    @classmethod
    def validate_letters(cls, v: str) -> str:
        v = v.upper()
        if len(v) != 2 or any(ch not in GRID_LETTERS for ch in v):
            msg = f'Grid square letters must be two of {GRID_LETTERS}, got {v!r}'
            raise ValueError(msg)
        return v

    @field_validator('eastings', 'northings')
    @classmethod
    def validate_digits(cls, v: str) -> str:
        if not (v.isdigit() and v.isascii() and 1 <= len(v) <= GRIDREF_MAX_DIGITS):
            msg = f'Expected 1-{GRIDREF_MAX_DIGITS} digits, got {v!r}'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def validate_precision(self) -> GridReference:
        if len(self.eastings) != len(self.northings):
            msg = 'Easting and northing digit groups must have the same length'
            raise ValueError(msg)
        return self

    @property
    def major_letter(self) -> str:
        return self.letters[0]

    @property
    def minor_letter(self) -> str:
        return self.letters[1]

    @property
    def precision(self) -> int:
        """Digits per axis."""
        return len(self.eastings)

    @property
    def resolution_m(self) -> int:
        """Side of the square the reference identifies, in metres."""
        return 10 ** (GRIDREF_MAX_DIGITS - self.precision)

    @property
    def text(self) -> str:
        return f'{self.letters} {self.eastings} {self.northings}'

    @property
    def html(self) -> str:
        sep = GRIDREF_HTML_SEPARATOR
        return f'{self.letters}{sep}{self.eastings}{sep}{self.northings}'

    def to_dict(self) -> dict:
        return {
            'text': self.text,
            'html': self.html,
            'letters': self.letters,
            'eastings': self.eastings,
            'northings': self.northings,
        }

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class BoundsCheck:
    """Outcome of a bounds or format check."""

    valid: bool
    message: str = ''

    def __bool__(self) -> bool:
        return self.valid


class BoundingBox(BaseModel):
    """Inclusive rectangle in X,Y order."""

    model_config = {'frozen': True}

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @model_validator(mode='after')
    def validate_order(self) -> BoundingBox:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            msg = (
                f'Bounding box corners are inverted: '
                f'({self.min_x}, {self.min_y}) .. ({self.max_x}, {self.max_y})'
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_corners(
        cls, corners: Sequence[Sequence[float]]
    ) -> BoundingBox:
        """Build from ``[[min_x, min_y], [max_x, max_y]]``."""
        (min_x, min_y), (max_x, max_y) = corners
        return cls(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    def to_corners(self) -> list[list[float]]:
        return [[self.min_x, self.min_y], [self.max_x, self.max_y]]

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


DEFAULT_PROJECTED_BOUNDS = BoundingBox.from_corners(PROJECTED_BOUNDS)
DEFAULT_GEOGRAPHIC_BOUNDS = BoundingBox.from_corners(GEOGRAPHIC_BOUNDS)


class TransformSettings(BaseModel):
    """
    Construction-time configuration of a CoordinateService.

    Collects the strategy choice, dataset locations, service endpoint and
    the supported extent; never mutated after creation.
    """

    model_config = {
        'frozen': True,
        'extra': 'ignore',  # tolerate keys written by newer versions
    }

    # Which transformation strategy to use
    type: TransformType = Field(default_factory=default_transform_type)

    # NTv2 and GeoTIFF grid shift datasets
    gsb_path: str = OSTN15_GSB_PATH_DEFAULT
    tif_path: str = OSTN15_TIF_PATH_DEFAULT

    # GIQTrans endpoint and request timeout (seconds)
    cgi_url: str = GIQTRANS_CGI_PATH_DEFAULT
    timeout_s: float = HTTP_TIMEOUT_DEFAULT

    # Seven Helmert parameters (m, m, m, arc-sec, arc-sec, arc-sec, ppm)
    helmert: tuple[float, float, float, float, float, float, float] = (
        HELMERT_OSGB36_TO_WGS84
    )

    # Supported extent
    projected_bounds: BoundingBox = DEFAULT_PROJECTED_BOUNDS
    geographic_bounds: BoundingBox = DEFAULT_GEOGRAPHIC_BOUNDS

    @field_validator('timeout_s')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            msg = 'timeout_s must be positive'
            raise ValueError(msg)
        return v

    @field_validator('helmert')
    @classmethod
    def validate_helmert(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if not all(math.isfinite(p) for p in v):
            msg = f'helmert parameters must be finite numbers, got {v}'
            raise ValueError(msg)
        return v

    @field_validator('projected_bounds', 'geographic_bounds', mode='before')
    @classmethod
    def parse_corners(cls, v: object) -> object:
        # TOML stores bounds as [[min_x, min_y], [max_x, max_y]]
        if isinstance(v, Sequence) and not isinstance(v, str):
            return BoundingBox.from_corners(v)
        return v
