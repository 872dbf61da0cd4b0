"""
Geography — Models

Top two levels of the campus hierarchy: Country → State.

Country has no parent. A State references its Country; deleting a
Country detaches its states (country set to NULL) instead of cascading.

@file geography/models.py
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import HierarchyNode


class Country(HierarchyNode):
    """A country, identified by a unique name and a unique code (e.g. IN)."""

    name = models.CharField(_('name'), max_length=150, unique=True)
    code = models.CharField(_('code'), max_length=10, unique=True, db_index=True)

    class Meta(HierarchyNode.Meta):
        verbose_name = _('country')
        verbose_name_plural = _('countries')

    def __str__(self):
        return f'{self.name} ({self.code})'

    def save(self, *args, **kwargs):
        if self.code:
            self.code = self.code.strip()
        super().save(*args, **kwargs)


class State(HierarchyNode):
    """A state or province within a country."""

    name = models.CharField(_('name'), max_length=150, unique=True)
    state_code = models.CharField(_('state code'), max_length=10, unique=True, db_index=True)
    country = models.ForeignKey(
        Country,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='states',
        verbose_name=_('country'),
    )

    class Meta(HierarchyNode.Meta):
        verbose_name = _('state')
        verbose_name_plural = _('states')

    def __str__(self):
        return f'{self.name} ({self.state_code})'

    def save(self, *args, **kwargs):
        if self.state_code:
            self.state_code = self.state_code.strip()
        super().save(*args, **kwargs)
