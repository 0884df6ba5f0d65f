from __future__ import annotations

import asyncio

from infrastructure.http.client import post_transform
from services.strategies.base import TransformStrategy
from shared.constants import (
    BNG_CODE,
    ETRS89_3D_CODE,
    CoordinateSystem,
    TransformType,
)

# SRIDs understood by GIQTrans for each side of the transformation
_SRIDS: dict[CoordinateSystem, int] = {
    CoordinateSystem.NATIONAL_GRID: BNG_CODE,
    CoordinateSystem.GEOGRAPHIC: ETRS89_3D_CODE,
}


class RemoteServiceStrategy(TransformStrategy):
    """OSTN15 via a GIQTrans CGI request."""

    transform_type = TransformType.OSTN15_CGI
    is_async = True

    async def transform_async(
        self,
        x: float,
        y: float,
        source: CoordinateSystem,
        target: CoordinateSystem,
    ) -> tuple[float, float]:
        self.check_direction(source, target)
        return await post_transform(
            self.settings.cgi_url,
            _SRIDS[CoordinateSystem(source)],
            _SRIDS[CoordinateSystem(target)],
            (x, y),
            timeout_s=self.settings.timeout_s,
        )

    def transform(
        self,
        x: float,
        y: float,
        source: CoordinateSystem,
        target: CoordinateSystem,
    ) -> tuple[float, float]:
        """
        Blocking form of :meth:`transform_async`.

        Runs its own event loop, so it cannot be called from a coroutine;
        await :meth:`transform_async` there instead.
        """
        return asyncio.run(self.transform_async(x, y, source, target))
