"""OSTN15 strategies driven by a local grid shift dataset."""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from pyproj.exceptions import CRSError, ProjError

from domain.errors import DatasetUnavailableError, TransformError
from geo.crs import build_grid_transformers
from services.strategies.base import ProjTransformStrategy
from shared.constants import NTV2_SIGNATURE, TIFF_SIGNATURES, TransformType

if TYPE_CHECKING:
    from pyproj import Transformer


class GridDatasetStrategy(ProjTransformStrategy):
    """
    National Grid projection corrected by a grid shift file.

    The dataset is checked and handed to PROJ on first use; the resulting
    transformers are shared by every strategy pointing at the same file.
    """

    # Leading bytes accepted as a valid file of this format
    signatures: ClassVar[tuple[bytes, ...]]
    dataset_kind: ClassVar[str]

    @property
    @abstractmethod
    def dataset_path(self) -> str:
        """Configured location of the dataset."""

    def check_dataset(self) -> Path:
        """
        Verify the dataset exists and starts with a known signature.

        Returns:
            Absolute path of the dataset

        Raises:
            DatasetUnavailableError: If the file is missing, unreadable or
                of the wrong format

        """
        path = Path(self.dataset_path).expanduser().resolve()
        if not path.is_file():
            raise DatasetUnavailableError(str(path), 'file not found')
        head_len = max(len(s) for s in self.signatures)
        try:
            with path.open('rb') as f:
                head = f.read(head_len)
        except OSError as exc:
            raise DatasetUnavailableError(str(path), str(exc)) from exc
        if not any(head.startswith(s) for s in self.signatures):
            raise DatasetUnavailableError(
                str(path), f'not a {self.dataset_kind} file'
            )
        return path

    def build_transformers(self) -> tuple[Transformer, Transformer]:
        path = self.check_dataset()
        self.logger.info('Loading %s grid shift dataset %s', self.dataset_kind, path)
        try:
            return build_grid_transformers(str(path))
        except (CRSError, ProjError) as exc:
            raise DatasetUnavailableError(str(path), str(exc)) from exc

    def handle_proj_error(self, exc: Exception) -> TransformError:
        return DatasetUnavailableError(self.dataset_path, str(exc))


class GridShiftFileStrategy(GridDatasetStrategy):
    """OSTN15 via an NTv2 ``.gsb`` file."""

    transform_type = TransformType.OSTN15_GSB
    signatures = (NTV2_SIGNATURE,)
    dataset_kind = 'NTv2'

    @property
    def dataset_path(self) -> str:
        return self.settings.gsb_path


class RasterGridStrategy(GridDatasetStrategy):
    """OSTN15 via a GeoTIFF ``.tif`` grid."""

    transform_type = TransformType.OSTN15_TIF
    signatures = TIFF_SIGNATURES
    dataset_kind = 'GeoTIFF'

    @property
    def dataset_path(self) -> str:
        return self.settings.tif_path
