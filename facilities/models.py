"""
Facilities — Models

Bottom levels of the campus hierarchy: Building → Room.

Building and Room names are not unique. A Room may carry an image held
in external object storage; the record keeps the public URL and the
storage key used to delete it.

@file facilities/models.py
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import HierarchyNode


class Building(HierarchyNode):
    college = models.ForeignKey(
        'institutions.College',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='buildings',
        verbose_name=_('college'),
    )

    class Meta(HierarchyNode.Meta):
        verbose_name = _('building')
        verbose_name_plural = _('buildings')
        indexes = [
            models.Index(fields=['name'], name='building_name_idx'),
        ]


class Room(HierarchyNode):
    image = models.URLField(
        _('image'), max_length=1000, blank=True,
        help_text=_('Public URL of the room image in object storage'),
    )
    image_key = models.CharField(
        _('image key'), max_length=500, blank=True, editable=False,
        help_text=_('Storage key of the image, e.g. rooms/<uuid>.png'),
    )
    description = models.TextField(_('description'), blank=True)
    building = models.ForeignKey(
        Building,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='rooms',
        verbose_name=_('building'),
    )

    class Meta(HierarchyNode.Meta):
        verbose_name = _('room')
        verbose_name_plural = _('rooms')
        indexes = [
            models.Index(fields=['name'], name='room_name_idx'),
        ]
