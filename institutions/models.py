"""
Institutions — Models

Middle levels of the campus hierarchy: University → College.

A University belongs to a State; a College belongs to a University.
Names are unique per kind. Deleting a parent detaches its children.

@file institutions/models.py
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import HierarchyNode


class University(HierarchyNode):
    name = models.CharField(_('name'), max_length=150, unique=True)
    state = models.ForeignKey(
        'geography.State',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='universities',
        verbose_name=_('state'),
    )

    class Meta(HierarchyNode.Meta):
        verbose_name = _('university')
        verbose_name_plural = _('universities')


class College(HierarchyNode):
    name = models.CharField(_('name'), max_length=150, unique=True)
    university = models.ForeignKey(
        University,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='colleges',
        verbose_name=_('university'),
    )

    class Meta(HierarchyNode.Meta):
        verbose_name = _('college')
        verbose_name_plural = _('colleges')
