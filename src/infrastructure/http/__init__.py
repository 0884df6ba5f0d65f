"""HTTP client infrastructure."""
from infrastructure.http.client import (
    build_transform_form,
    make_http_session,
    parse_transform_response,
    post_transform,
)

__all__ = [
    'build_transform_form',
    'make_http_session',
    'parse_transform_response',
    'post_transform',
]
