from __future__ import annotations

from functools import lru_cache

from pyproj import CRS, Transformer

from shared.constants import BNG_TMERC_PROJ4, WGS84_CODE

# Geographic WGS84
crs_wgs84 = CRS.from_epsg(WGS84_CODE)


def build_bng_towgs84_crs(
    helmert: tuple[float, float, float, float, float, float, float],
) -> CRS:
    """
    Build the National Grid CRS with a seven-parameter shift to WGS84.

    The parameters go straight into ``+towgs84=dx,dy,dz,rx,ry,rz,ds``;
    rotations are arc-seconds and scale is ppm.
    """
    towgs84 = ','.join(str(p) for p in helmert)
    return CRS.from_proj4(
        f'{BNG_TMERC_PROJ4} +towgs84={towgs84} +units=m +no_defs +type=crs'
    )


def build_bng_nadgrid_crs(grid_path: str) -> CRS:
    """Build the National Grid CRS corrected by a grid shift file."""
    return CRS.from_proj4(
        f'{BNG_TMERC_PROJ4} +nadgrids={grid_path} +units=m +no_defs +type=crs'
    )


def build_transformers(crs_bng: CRS) -> tuple[Transformer, Transformer]:
    """
    Return (grid -> WGS84, WGS84 -> grid) transformers for *crs_bng*.

    Both take and return coordinates in X,Y order (easting/northing,
    longitude/latitude).
    """
    t_to_wgs = Transformer.from_crs(crs_bng, crs_wgs84, always_xy=True)
    t_from_wgs = Transformer.from_crs(crs_wgs84, crs_bng, always_xy=True)
    return t_to_wgs, t_from_wgs


@lru_cache(maxsize=8)
def build_helmert_transformers(
    helmert: tuple[float, float, float, float, float, float, float],
) -> tuple[Transformer, Transformer]:
    return build_transformers(build_bng_towgs84_crs(helmert))


@lru_cache(maxsize=8)
def build_grid_transformers(grid_path: str) -> tuple[Transformer, Transformer]:
    """Cached per dataset path; the transformers are read-only afterwards."""
    return build_transformers(build_bng_nadgrid_crs(grid_path))
