"""Exception hierarchy for os-transform."""

from __future__ import annotations


class TransformError(Exception):
    """Base exception for all os-transform errors."""


class OutOfRangeError(TransformError):
    """Coordinates lie outside the supported national extent."""


class InvalidFormatError(TransformError):
    """The text is not a well-formed grid reference."""

    def __init__(self, gridref: str, detail: str = 'Invalid grid reference.'):
        self.gridref = gridref
        super().__init__(f"{detail} ('{gridref}')")


class TransformServiceError(TransformError):
    """The remote transformation service failed or returned garbage."""

    def __init__(self, detail: str, status: int | None = None):
        self.status = status
        super().__init__(detail)


class DatasetUnavailableError(TransformError):
    """A grid shift dataset is missing, unreadable or corrupt."""

    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(f'Grid dataset unavailable at {path}: {detail}')


class ConfigurationError(TransformError):
    """Settings are malformed or name an unknown strategy."""
