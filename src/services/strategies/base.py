"""Base classes for projected <-> geographic transformation strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pyproj.exceptions import CRSError, ProjError

from domain.errors import TransformError
from shared.constants import CoordinateSystem, TransformType

if TYPE_CHECKING:
    from pyproj import Transformer

    from domain.models import TransformSettings


class TransformStrategy(ABC):
    """
    Base class for all transformation strategies.

    A strategy converts one point between the National Grid and geographic
    coordinates, in either direction. Points are always in X,Y order:
    (easting, northing) or (longitude, latitude).
    """

    transform_type: ClassVar[TransformType]
    # True when the strategy suspends on I/O
    is_async: ClassVar[bool] = False

    def __init__(self, settings: TransformSettings):
        """
        Initialize strategy with settings.

        Args:
            settings: Service settings (dataset paths, endpoint, parameters)

        """
        self.settings = settings
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def transform(
        self,
        x: float,
        y: float,
        source: CoordinateSystem,
        target: CoordinateSystem,
    ) -> tuple[float, float]:
        """
        Transform a point from *source* to *target*.

        Results are not rounded; CoordinateService rounds them to the
        requested number of decimals.

        Returns:
            Transformed point in X,Y order, at full float precision

        """

    async def transform_async(
        self,
        x: float,
        y: float,
        source: CoordinateSystem,
        target: CoordinateSystem,
    ) -> tuple[float, float]:
        """Awaitable form of :meth:`transform`; runs inline by default."""
        return self.transform(x, y, source, target)

    @staticmethod
    def check_direction(source: CoordinateSystem, target: CoordinateSystem) -> None:
        systems = {CoordinateSystem(source), CoordinateSystem(target)}
        if len(systems) != 2:
            msg = f'Source and target must differ, got {source} -> {target}'
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.transform_type.value!r})'


class ProjTransformStrategy(TransformStrategy):
    """Strategy backed by a pair of pyproj transformers built on first use."""

    def __init__(self, settings: TransformSettings):
        super().__init__(settings)
        self._transformers: tuple[Transformer, Transformer] | None = None

    @abstractmethod
    def build_transformers(self) -> tuple[Transformer, Transformer]:
        """
        Build (grid -> geographic, geographic -> grid) transformers.

        Returns:
            Pair of always_xy pyproj transformers

        """

    def get_transformers(self) -> tuple[Transformer, Transformer]:
        if self._transformers is None:
            self._transformers = self.build_transformers()
        return self._transformers

    def handle_proj_error(self, exc: Exception) -> TransformError:
        """Map a PROJ failure to the error raised to callers."""
        return TransformError(f'PROJ transformation failed: {exc}')

    def transform(
        self,
        x: float,
        y: float,
        source: CoordinateSystem,
        target: CoordinateSystem,
    ) -> tuple[float, float]:
        self.check_direction(source, target)
        try:
            t_to_geog, t_from_geog = self.get_transformers()
            t = t_to_geog if source == CoordinateSystem.NATIONAL_GRID else t_from_geog
            x_out, y_out = t.transform(x, y, errcheck=True)
        except (CRSError, ProjError) as exc:
            raise self.handle_proj_error(exc) from exc
        return (x_out, y_out)
