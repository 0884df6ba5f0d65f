"""Pytest configuration and fixtures for os-transform tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from domain.models import TransformSettings  # noqa: E402
from shared.constants import TransformType  # noqa: E402


@pytest.fixture()
def helmert_settings():
    """Settings for the offline seven-parameter strategy."""
    return TransformSettings(type=TransformType.SIMPLE_TOWGS84)


@pytest.fixture()
def remote_settings():
    """Settings for the GIQTrans strategy pointing at a dummy host."""
    return TransformSettings(
        type=TransformType.OSTN15_CGI,
        cgi_url='https://giqtrans.example.test/cgi-bin/giqtrans',
        timeout_s=2.0,
    )


@pytest.fixture()
def gsb_file(tmp_path: Path) -> Path:
    """A file carrying only the NTv2 header signature."""
    path = tmp_path / 'OSTN15_NTv2_OSGBtoETRS.gsb'
    path.write_bytes(b'NUM_OREC' + b'\x00' * 56)
    return path


@pytest.fixture()
def tif_file(tmp_path: Path) -> Path:
    """A file carrying only a little-endian TIFF signature."""
    path = tmp_path / 'uk_os_OSTN15_NTv2_OSGBtoETRS.tif'
    path.write_bytes(b'II*\x00' + b'\x00' * 60)
    return path
