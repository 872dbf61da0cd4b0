"""
Campus Registry — Test image stores

Stand-in ImageStore implementations selected through
``settings.IMAGE_STORE`` in tests that exercise storage failures.

@file tests/stores.py
"""

from core.exceptions import StorageError
from core.storage import DjangoStorageImageStore


class FailingImageStore(DjangoStorageImageStore):
    """Uploads normally; every delete fails."""

    def delete(self, key: str) -> None:
        raise StorageError(detail='Error deleting object from storage: bucket unavailable')


class UploadFailingImageStore(DjangoStorageImageStore):
    """Every upload fails."""

    def upload(self, file, folder: str):
        raise StorageError(detail='Error uploading image: bucket unavailable')
