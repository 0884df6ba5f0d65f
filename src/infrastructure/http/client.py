from __future__ import annotations

import json
import logging
import ssl

import aiohttp
import certifi

from domain.errors import TransformServiceError
from shared.constants import HTTP_OK, HTTP_TIMEOUT_DEFAULT

logger = logging.getLogger(__name__)


def make_http_session(timeout_s: float = HTTP_TIMEOUT_DEFAULT) -> aiohttp.ClientSession:
    # SSL context backed by the certifi bundle
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    connector = aiohttp.TCPConnector(ssl=ssl_context)
    timeout = aiohttp.ClientTimeout(total=timeout_s, connect=timeout_s)
    return aiohttp.ClientSession(connector=connector, timeout=timeout)


def build_transform_form(
    source_srid: int, target_srid: int, coordinates: tuple[float, float]
) -> dict[str, str]:
    """Form fields of a GIQTrans point transformation request."""
    geometry = {'type': 'Point', 'coordinates': [coordinates[0], coordinates[1]]}
    return {
        'SourceSRID': str(source_srid),
        'TargetSRID': str(target_srid),
        'Geometry': json.dumps(geometry, separators=(',', ':')),
    }


def parse_transform_response(data: object) -> tuple[float, float]:
    """
    Extract the X,Y pair from a GIQTrans JSON response.

    Raises:
        TransformServiceError: If the body has no two-number ``coordinates``

    """
    coords = data.get('coordinates') if isinstance(data, dict) else None
    if (
        not isinstance(coords, list)
        or len(coords) < 2
        or not all(
            isinstance(c, (int, float)) and not isinstance(c, bool)
            for c in coords[:2]
        )
    ):
        msg = f'Malformed transformation response: {data!r}'
        raise TransformServiceError(msg)
    return (float(coords[0]), float(coords[1]))


async def post_transform(
    url: str,
    source_srid: int,
    target_srid: int,
    coordinates: tuple[float, float],
    timeout_s: float = HTTP_TIMEOUT_DEFAULT,
) -> tuple[float, float]:
    """
    Transform one point via the GIQTrans CGI service.

    Sends an URL-encoded POST and waits for the JSON reply. There is no
    retry; any failure surfaces at once.

    Args:
        url: Absolute URL of the service endpoint
        source_srid: EPSG code of the input coordinates
        target_srid: EPSG code of the output coordinates
        coordinates: Input point in X,Y order
        timeout_s: Total request timeout in seconds

    Returns:
        Transformed point in X,Y order

    Raises:
        TransformServiceError: On network errors, timeouts, non-200 status
            or an unparsable body

    """
    form = build_transform_form(source_srid, target_srid, coordinates)
    logger.debug('POST %s %s -> %s %s', url, source_srid, target_srid, coordinates)
    try:
        async with (
            make_http_session(timeout_s) as client,
            client.post(url, data=form) as resp,
        ):
            sc = resp.status
            if sc != HTTP_OK:
                msg = f'Transformation service returned HTTP {sc}'
                raise TransformServiceError(msg, status=sc)
            try:
                data = await resp.json(content_type=None)
            except ValueError as exc:
                msg = f'Transformation service returned invalid JSON: {exc}'
                raise TransformServiceError(msg, status=sc) from exc
    except (TimeoutError, aiohttp.ClientError) as exc:
        detail = str(exc) or type(exc).__name__
        msg = f'Transformation service unreachable: {detail}'
        raise TransformServiceError(msg) from exc

    return parse_transform_response(data)
