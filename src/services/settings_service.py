from __future__ import annotations

import logging
import os
from pathlib import Path

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from domain.errors import ConfigurationError
from domain.models import TransformSettings
from domain.toml_sections import flat_to_sectioned, sectioned_to_flat
from shared.constants import CONFIG_ENV_VAR

logger = logging.getLogger(__name__)


def parse_settings(text: str, source: str = '<string>') -> TransformSettings:
    """
    Parse TOML text into TransformSettings.

    Raises:
        ConfigurationError: On TOML syntax errors or invalid values

    """
    try:
        data = tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        msg = f'Cannot parse settings {source}: {exc}'
        raise ConfigurationError(msg) from exc
    try:
        return TransformSettings.model_validate(sectioned_to_flat(data))
    except ValidationError as exc:
        msg = f'Invalid settings in {source}: {exc}'
        raise ConfigurationError(msg) from exc


def load_settings(path: str | Path) -> TransformSettings:
    """
    Load settings from a TOML file.

    Relative dataset paths are kept as written, i.e. relative to the
    working directory of the process.
    """
    path = Path(path)
    if not path.is_file():
        msg = f'Settings file not found: {path}'
        raise ConfigurationError(msg)
    settings = parse_settings(path.read_text(encoding='utf-8'), str(path))
    logger.info('Loaded settings from %s (type=%s)', path, settings.type.value)
    return settings


def dump_settings(settings: TransformSettings) -> str:
    data = settings.model_dump(mode='json')
    for key in ('projected_bounds', 'geographic_bounds'):
        data[key] = getattr(settings, key).to_corners()
    return tomlkit.dumps(flat_to_sectioned(data))


def save_settings(path: str | Path, settings: TransformSettings) -> Path:
    """Write settings to a TOML file, replacing any existing one."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_settings(settings), encoding='utf-8')
    return path


def settings_from_env(default: str | Path | None = None) -> TransformSettings:
    """
    Settings from the file named by ``OS_TRANSFORM_CONFIG``.

    Falls back to *default*, then to built-in defaults.
    """
    raw = os.environ.get(CONFIG_ENV_VAR) or default
    if not raw:
        return TransformSettings()
    return load_settings(raw)
