"""Mapping layer between flat TransformSettings fields and sectioned TOML.

TransformSettings remains a flat Pydantic model. This module provides two
functions:
- flat_to_sectioned(): flat dict → sectioned dict (for TOML save)
- sectioned_to_flat(): sectioned dict → flat dict (for TOML load)
"""

from __future__ import annotations

# {section_name: {flat_field_name: short_name_in_toml}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'datasets': {
        'gsb_path': 'gsb_path',
        'tif_path': 'tif_path',
    },
    'bounds': {
        'projected_bounds': 'projected',
        'geographic_bounds': 'geographic',
    },
}

# The helmert tuple is stored as one named key per parameter
HELMERT_FIELD = 'helmert'
HELMERT_KEYS = ('dx', 'dy', 'dz', 'rx_as', 'ry_as', 'rz_as', 'ds_ppm')

# Reverse index: flat_field → (section, short_name)
_FLAT_TO_SECTION: dict[str, tuple[str, str]] = {}
for _section, _fields in SECTION_MAP.items():
    for _flat, _short in _fields.items():
        _FLAT_TO_SECTION[_flat] = (_section, _short)

# Reverse index: (section, short_name) → flat_field
_SECTION_TO_FLAT: dict[str, dict[str, str]] = {}
for _section, _fields in SECTION_MAP.items():
    _SECTION_TO_FLAT[_section] = {v: k for k, v in _fields.items()}


def flat_to_sectioned(flat: dict) -> dict:
    """Convert flat TransformSettings dict to sectioned dict for TOML output."""
    result: dict = {'common': {}}
    for key, value in flat.items():
        if key == HELMERT_FIELD:
            result[HELMERT_FIELD] = dict(zip(HELMERT_KEYS, value))
        elif key in _FLAT_TO_SECTION:
            section, short_name = _FLAT_TO_SECTION[key]
            result.setdefault(section, {})[short_name] = value
        else:
            result['common'][key] = value
    return result


def sectioned_to_flat(data: dict) -> dict:
    """
    Convert sectioned TOML dict to flat dict for TransformSettings validation.

    A partial ``[helmert]`` table is passed on as-is so that validation
    reports the missing parameters.
    """
    flat: dict = {}
    for key, value in data.items():
        if isinstance(value, dict) and key == HELMERT_FIELD:
            if set(value) >= set(HELMERT_KEYS):
                flat[HELMERT_FIELD] = tuple(value[k] for k in HELMERT_KEYS)
            else:
                flat[HELMERT_FIELD] = value
        elif isinstance(value, dict) and key in _SECTION_TO_FLAT:
            # Known section: expand short names to flat names
            mapping = _SECTION_TO_FLAT[key]
            for short_name, field_value in value.items():
                flat[mapping.get(short_name, short_name)] = field_value
        elif isinstance(value, dict):
            # Common or unknown section: pass through keys as-is
            flat.update(value)
        else:
            # Top-level key (flat TOML)
            flat[key] = value
    return flat
