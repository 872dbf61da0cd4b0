"""
Core — Image Storage

Narrow upload / delete-by-key interface over external object storage.
The default implementation delegates to Django's ``default_storage``
(filesystem in development, S3 in production, in-memory in tests), so
services never talk to a storage provider directly.

@file core/storage.py
"""

import logging
import os
import uuid
from dataclasses import dataclass

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils.module_loading import import_string

from core.exceptions import StorageError

logger = logging.getLogger('campus')


@dataclass(frozen=True)
class StoredImage:
    key: str
    url: str


class ImageStore:
    """Capability handed to services that persist images."""

    def upload(self, file, folder: str) -> StoredImage:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError


class DjangoStorageImageStore(ImageStore):
    """ImageStore backed by a Django storage backend."""

    def __init__(self, storage=None):
        self._storage = storage

    @property
    def storage(self):
        return self._storage if self._storage is not None else default_storage

    @staticmethod
    def build_key(filename: str, folder: str) -> str:
        """Unique key such as ``rooms/3f2b...c1.png``."""
        extension = os.path.splitext(filename or '')[1].lower()
        return f'{folder}/{uuid.uuid4()}{extension}'

    def upload(self, file, folder: str) -> StoredImage:
        key = self.build_key(getattr(file, 'name', ''), folder)
        try:
            saved_key = self.storage.save(key, file)
            url = self.storage.url(saved_key)
        except Exception as exc:
            logger.error('Image upload to %s failed: %s', key, exc)
            raise StorageError(detail=f'Error uploading image: {exc}') from exc
        logger.debug('Stored image %s', saved_key)
        return StoredImage(key=saved_key, url=url)

    def delete(self, key: str) -> None:
        try:
            self.storage.delete(key)
        except Exception as exc:
            logger.error('Image delete of %s failed: %s', key, exc)
            raise StorageError(detail=f'Error deleting object from storage: {exc}') from exc

    def exists(self, key: str) -> bool:
        return self.storage.exists(key)


def get_image_store() -> ImageStore:
    """Instantiate the store configured by ``settings.IMAGE_STORE``."""
    store_path = getattr(settings, 'IMAGE_STORE', 'core.storage.DjangoStorageImageStore')
    return import_string(store_path)()
