"""Tests for http client module."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from domain.errors import TransformServiceError
from infrastructure.http.client import (
    build_transform_form,
    make_http_session,
    parse_transform_response,
    post_transform,
)

URL = 'https://giqtrans.example.test/cgi-bin/giqtrans'


def make_mock_session(status=200, payload=None, json_error=None):
    """Mock aiohttp session whose post() yields a canned response."""
    mock_response = MagicMock()
    mock_response.status = status
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.post = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session


class TestBuildTransformForm:
    """Tests for build_transform_form function."""

    def test_fields(self):
        form = build_transform_form(27700, 4937, (437292, 115541))
        assert form['SourceSRID'] == '27700'
        assert form['TargetSRID'] == '4937'

    def test_geometry_is_geojson_point(self):
        form = build_transform_form(4937, 27700, (-1.4, 50.9))
        assert json.loads(form['Geometry']) == {
            'type': 'Point',
            'coordinates': [-1.4, 50.9],
        }


class TestParseTransformResponse:
    """Tests for parse_transform_response function."""

    def test_valid(self):
        data = {'type': 'Point', 'coordinates': [-1.4672566, 50.9388245]}
        assert parse_transform_response(data) == (-1.4672566, 50.9388245)

    def test_integers_accepted(self):
        assert parse_transform_response({'coordinates': [437292, 115541]}) == (
            437292.0,
            115541.0,
        )

    def test_extra_ordinate_ignored(self):
        """A height ordinate from a 3D SRID is dropped."""
        assert parse_transform_response({'coordinates': [1.0, 2.0, 45.3]}) == (
            1.0,
            2.0,
        )

    @pytest.mark.parametrize(
        'data',
        [
            None,
            [],
            'coordinates',
            {},
            {'coordinates': None},
            {'coordinates': [1.0]},
            {'coordinates': ['1.0', '2.0']},
            {'coordinates': [True, False]},
        ],
    )
    def test_malformed_raises(self, data):
        with pytest.raises(TransformServiceError):
            parse_transform_response(data)


class TestMakeHttpSession:
    """Tests for make_http_session function."""

    @pytest.mark.asyncio
    async def test_creates_session(self):
        session = make_http_session(5.0)
        assert isinstance(session, aiohttp.ClientSession)
        assert session.timeout.total == 5.0
        await session.close()


class TestPostTransform:
    """Tests for post_transform function."""

    @pytest.mark.asyncio
    async def test_success(self):
        mock_session = make_mock_session(
            payload={'type': 'Point', 'coordinates': [-1.4672566, 50.9388245]}
        )
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            result = await post_transform(URL, 27700, 4937, (437292, 115541))

        assert result == (-1.4672566, 50.9388245)
        args, kwargs = mock_session.post.call_args
        assert args == (URL,)
        assert kwargs['data']['SourceSRID'] == '27700'
        assert kwargs['data']['TargetSRID'] == '4937'

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        mock_session = make_mock_session(status=500)
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            with pytest.raises(TransformServiceError) as exc_info:
                await post_transform(URL, 27700, 4937, (437292, 115541))
        assert exc_info.value.status == 500

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        mock_session = make_mock_session(json_error=ValueError('Expecting value'))
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            with pytest.raises(TransformServiceError, match='invalid JSON'):
                await post_transform(URL, 27700, 4937, (437292, 115541))

    @pytest.mark.asyncio
    async def test_malformed_body_raises(self):
        mock_session = make_mock_session(payload={'error': 'bad SRID'})
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            with pytest.raises(TransformServiceError, match='Malformed'):
                await post_transform(URL, 27700, 4937, (437292, 115541))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error',
        [aiohttp.ClientConnectionError('refused'), TimeoutError()],
    )
    async def test_network_error_raises(self, error):
        mock_session = make_mock_session()
        mock_session.__aenter__ = AsyncMock(side_effect=error)
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            with pytest.raises(TransformServiceError, match='unreachable'):
                await post_transform(URL, 27700, 4937, (437292, 115541))

    @pytest.mark.asyncio
    async def test_no_retry(self):
        """A failed call is made exactly once."""
        mock_session = make_mock_session(status=503)
        with patch('infrastructure.http.client.aiohttp.TCPConnector'), \
             patch('infrastructure.http.client.aiohttp.ClientSession', return_value=mock_session):
            with pytest.raises(TransformServiceError):
                await post_transform(URL, 27700, 4937, (437292, 115541))
        assert mock_session.post.call_count == 1
