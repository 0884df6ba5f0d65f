"""Coordinate conversion facade for the British National Grid."""

from __future__ import annotations

import logging

from domain.errors import InvalidFormatError, OutOfRangeError
from domain.models import (
    BoundsCheck,
    GeographicCoordinate,
    GridReference,
    ProjectedCoordinate,
    TransformSettings,
)
from geo.bounds import Coordinates, check_bounds, coerce_coordinates
from geo.gridref import from_gridref, to_gridref
from services.strategies import TransformStrategy, build_strategy
from shared.constants import (
    EASTNORTH_DECIMALS_DEFAULT,
    LATLNG_DECIMALS_DEFAULT,
    MSG_UNSUPPORTED_COORDINATES,
    CoordinateSystem,
)
from shared.rounding import round_half_away

logger = logging.getLogger(__name__)


class CoordinateService:
    """
    Converts between easting/northing, latitude/longitude and grid references.

    Every operation checks its input first. Out-of-range coordinates and
    malformed grid references are logged and give None instead of raising;
    failures of the transformation strategy itself (network, dataset) are
    raised to the caller.
    """

    def __init__(
        self,
        settings: TransformSettings | None = None,
        strategy: TransformStrategy | None = None,
    ):
        """
        Initialize service.

        Args:
            settings: Configuration; defaults to ``TransformSettings()``
            strategy: Explicit strategy instance; built from
                ``settings.type`` when omitted

        """
        self._settings = settings or TransformSettings()
        self._strategy = strategy or build_strategy(self._settings)
        logger.info('Coordinate service using %r', self._strategy)

    @property
    def settings(self) -> TransformSettings:
        return self._settings

    @property
    def strategy(self) -> TransformStrategy:
        return self._strategy

    # ── Validation ────────────────────────────────────────────────

    def check_bounds(self, coordinates: Coordinates) -> BoundsCheck:
        """Check *coordinates* against this service's configured extent."""
        return check_bounds(
            coordinates,
            projected=self._settings.projected_bounds,
            geographic=self._settings.geographic_bounds,
        )

    def _accept(
        self, coordinates: Coordinates, kind: type
    ) -> ProjectedCoordinate | GeographicCoordinate | None:
        coords = coerce_coordinates(coordinates)
        if not isinstance(coords, kind):
            logger.warning(MSG_UNSUPPORTED_COORDINATES)
            return None
        test = self.check_bounds(coords)
        if not test.valid:
            logger.warning(test.message)
            return None
        return coords

    # ── Easting/northing <-> latitude/longitude ───────────────────

    def to_latlng(
        self, coordinates: Coordinates, decimals: int = LATLNG_DECIMALS_DEFAULT
    ) -> GeographicCoordinate | None:
        """
        Return latitude/longitude for an easting/northing.

        With the remote strategy this blocks on the HTTP request; use
        :meth:`to_latlng_async` from inside an event loop.
        """
        coords = self._accept(coordinates, ProjectedCoordinate)
        if coords is None:
            return None
        lng, lat = self._strategy.transform(
            *coords.as_xy(),
            CoordinateSystem.NATIONAL_GRID,
            CoordinateSystem.GEOGRAPHIC,
        )
        return self._geographic(lng, lat, decimals)

    async def to_latlng_async(
        self, coordinates: Coordinates, decimals: int = LATLNG_DECIMALS_DEFAULT
    ) -> GeographicCoordinate | None:
        coords = self._accept(coordinates, ProjectedCoordinate)
        if coords is None:
            return None
        lng, lat = await self._strategy.transform_async(
            *coords.as_xy(),
            CoordinateSystem.NATIONAL_GRID,
            CoordinateSystem.GEOGRAPHIC,
        )
        return self._geographic(lng, lat, decimals)

    def from_latlng(
        self, coordinates: Coordinates, decimals: int = EASTNORTH_DECIMALS_DEFAULT
    ) -> ProjectedCoordinate | None:
        """Return easting/northing for a latitude/longitude."""
        coords = self._accept(coordinates, GeographicCoordinate)
        if coords is None:
            return None
        e, n = self._strategy.transform(
            *coords.as_xy(),
            CoordinateSystem.GEOGRAPHIC,
            CoordinateSystem.NATIONAL_GRID,
        )
        return self._projected(e, n, decimals)

    async def from_latlng_async(
        self, coordinates: Coordinates, decimals: int = EASTNORTH_DECIMALS_DEFAULT
    ) -> ProjectedCoordinate | None:
        coords = self._accept(coordinates, GeographicCoordinate)
        if coords is None:
            return None
        e, n = await self._strategy.transform_async(
            *coords.as_xy(),
            CoordinateSystem.GEOGRAPHIC,
            CoordinateSystem.NATIONAL_GRID,
        )
        return self._projected(e, n, decimals)

    # ── Grid references ───────────────────────────────────────────

    def to_gridref(self, coordinates: Coordinates) -> GridReference | None:
        """Return the 1 m grid reference for an easting/northing."""
        coords = self._accept(coordinates, ProjectedCoordinate)
        if coords is None:
            return None
        try:
            return to_gridref(coords, bounds=self._settings.projected_bounds)
        except OutOfRangeError as exc:
            # Custom bounds can reach past the lettered squares
            logger.warning(str(exc))
            return None

    def from_gridref(self, gridref: str) -> ProjectedCoordinate | None:
        """
        Return the south-west corner of the square named by *gridref*.

        The decoded coordinates are not checked against the bounds.
        """
        try:
            return from_gridref(gridref)
        except InvalidFormatError as exc:
            logger.warning(str(exc))
            return None

    # ── Private helpers ───────────────────────────────────────────

    @staticmethod
    def _geographic(lng: float, lat: float, decimals: int) -> GeographicCoordinate:
        return GeographicCoordinate(
            latitude=round_half_away(lat, decimals),
            longitude=round_half_away(lng, decimals),
        )

    @staticmethod
    def _projected(e: float, n: float, decimals: int) -> ProjectedCoordinate:
        return ProjectedCoordinate(
            easting=round_half_away(e, decimals),
            northing=round_half_away(n, decimals),
        )
