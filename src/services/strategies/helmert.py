from __future__ import annotations

from typing import TYPE_CHECKING

from geo.crs import build_helmert_transformers
from services.strategies.base import ProjTransformStrategy
from shared.constants import HELMERT_OSGB36_TO_WGS84, TransformType

if TYPE_CHECKING:
    from pyproj import Transformer


class FixedParameterStrategy(ProjTransformStrategy):
    """
    Seven-parameter Helmert shift between OSGB36 and WGS84.

    Needs no dataset and no network; accurate to a few metres only.
    """

    transform_type = TransformType.SIMPLE_TOWGS84

    def build_transformers(self) -> tuple[Transformer, Transformer]:
        params = self.settings.helmert
        if params == HELMERT_OSGB36_TO_WGS84:
            self.logger.info('Using the published OSGB36 -> WGS84 Helmert parameters')
        else:
            self.logger.info(
                'Using custom Helmert parameters: '
                f'dx={params[0]}, dy={params[1]}, dz={params[2]}, '
                f'rx={params[3]}", ry={params[4]}", rz={params[5]}", '
                f'ds={params[6]}ppm'
            )
        self.logger.warning(
            'Helmert transformation may be out by several metres; '
            'use an OSTN15 strategy where accuracy matters'
        )
        return build_helmert_transformers(tuple(params))
