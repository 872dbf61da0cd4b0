"""
Facilities — Service Layer

Building and Room services.

Buildings are created in batches: one request names several buildings
of the same college. Rooms own an optional image in external object
storage; the image is uploaded before the record is written and
removed before the record is deleted, so a storage failure never leaves
a deleted room pointing at a live image.

@file facilities/services.py
"""

import logging

from django.conf import settings

from core.constants import DEFAULT_IMAGE_MAX_BYTES
from core.exceptions import StorageError
from core.services import HierarchyService
from core.storage import get_image_store

from .models import Building, Room

logger = logging.getLogger('campus')


class BuildingService(HierarchyService):
    model = Building
    label = 'Building'
    label_plural = 'buildings'
    parent_field = 'college'

    @classmethod
    def create_many(cls, *, names, actor=None, **fields) -> list[Building]:
        """Create one building per name, all sharing ``fields`` (the college)."""
        buildings = [cls.create(actor=actor, name=name, **fields) for name in names]
        logger.info('%d buildings created by %s.', len(buildings), actor)
        return buildings


class RoomService(HierarchyService):
    model = Room
    label = 'Room'
    label_plural = 'rooms'
    parent_field = 'building'

    image_store = None

    @classmethod
    def get_image_store(cls):
        return cls.image_store if cls.image_store is not None else get_image_store()

    @staticmethod
    def image_folder() -> str:
        return getattr(settings, 'ROOM_IMAGE_FOLDER', 'rooms')

    @staticmethod
    def image_max_bytes() -> int:
        return getattr(settings, 'ROOM_IMAGE_MAX_BYTES', DEFAULT_IMAGE_MAX_BYTES)

    @classmethod
    def create(cls, *, actor=None, image=None, **fields) -> Room:
        if image is None:
            return super().create(actor=actor, **fields)

        store = cls.get_image_store()
        stored = store.upload(image, cls.image_folder())
        fields.update(image=stored.url, image_key=stored.key)
        try:
            return super().create(actor=actor, **fields)
        except Exception:
            store.delete(stored.key)
            raise

    @classmethod
    def update(cls, *, instance_id, actor=None, image=None, **fields) -> Room:
        """
        Overwrite the given fields. A new image replaces the old one: the
        new object is uploaded first and the old one is deleted once the
        record points at the new URL. Failing to delete the old object
        only leaves it orphaned in storage.
        """
        if image is None:
            return super().update(instance_id=instance_id, actor=actor, **fields)

        room = cls.get_or_404(instance_id)
        old_key = room.image_key

        store = cls.get_image_store()
        stored = store.upload(image, cls.image_folder())
        fields.update(image=stored.url, image_key=stored.key)
        try:
            room = super().update(instance_id=room.pk, actor=actor, **fields)
        except Exception:
            store.delete(stored.key)
            raise

        if old_key:
            try:
                store.delete(old_key)
            except StorageError as exc:
                # The record already points at the new image
                logger.warning('Orphaned image %s of room %s left in storage: %s', old_key, room.pk, exc)
        return room

    @classmethod
    def perform_delete(cls, instance) -> None:
        if instance.image_key:
            cls.get_image_store().delete(instance.image_key)
        instance.delete()
