"""Transformation strategies package."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domain.errors import ConfigurationError
from services.strategies.base import ProjTransformStrategy, TransformStrategy
from services.strategies.grid_file import (
    GridDatasetStrategy,
    GridShiftFileStrategy,
    RasterGridStrategy,
)
from services.strategies.helmert import FixedParameterStrategy
from services.strategies.remote import RemoteServiceStrategy
from shared.constants import TransformType

if TYPE_CHECKING:
    from domain.models import TransformSettings

STRATEGIES: dict[TransformType, type[TransformStrategy]] = {
    TransformType.OSTN15_CGI: RemoteServiceStrategy,
    TransformType.OSTN15_GSB: GridShiftFileStrategy,
    TransformType.OSTN15_TIF: RasterGridStrategy,
    TransformType.SIMPLE_TOWGS84: FixedParameterStrategy,
}


def build_strategy(settings: TransformSettings) -> TransformStrategy:
    """Instantiate the strategy named by ``settings.type``."""
    try:
        cls = STRATEGIES[TransformType(settings.type)]
    except (KeyError, ValueError) as exc:
        msg = f'Unknown transformation type: {settings.type!r}'
        raise ConfigurationError(msg) from exc
    return cls(settings)


__all__ = [
    'STRATEGIES',
    'FixedParameterStrategy',
    'GridDatasetStrategy',
    'GridShiftFileStrategy',
    'ProjTransformStrategy',
    'RasterGridStrategy',
    'RemoteServiceStrategy',
    'TransformStrategy',
    'build_strategy',
]
