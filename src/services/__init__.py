"""Services package - coordinate conversion facade, strategies and settings."""

from services.coordinate_service import CoordinateService
from services.settings_service import (
    dump_settings,
    load_settings,
    parse_settings,
    save_settings,
    settings_from_env,
)
from services.strategies import (
    FixedParameterStrategy,
    GridShiftFileStrategy,
    RasterGridStrategy,
    RemoteServiceStrategy,
    TransformStrategy,
    build_strategy,
)

__all__ = [
    'CoordinateService',
    'FixedParameterStrategy',
    'GridShiftFileStrategy',
    'RasterGridStrategy',
    'RemoteServiceStrategy',
    'TransformStrategy',
    'build_strategy',
    'dump_settings',
    'load_settings',
    'parse_settings',
    'save_settings',
    'settings_from_env',
]
