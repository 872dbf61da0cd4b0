"""
Institutions — Django Admin Configuration

@file institutions/admin.py
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from core.admin import AUDIT_FIELDSET, AUDIT_READONLY_FIELDS

from .models import College, University


@admin.register(University)
class UniversityAdmin(admin.ModelAdmin):
    list_display = ('name', 'state_display', 'created_at')
    list_filter = ('state__country',)
    search_fields = ('name', 'state__name')
    readonly_fields = AUDIT_READONLY_FIELDS
    raw_id_fields = ('state',)
    list_select_related = ('state',)
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'state')}),
        AUDIT_FIELDSET,
    )

    @admin.display(description=_('State'))
    def state_display(self, obj):
        return obj.state.name if obj.state else '—'


@admin.register(College)
class CollegeAdmin(admin.ModelAdmin):
    list_display = ('name', 'university_display', 'created_at')
    search_fields = ('name', 'university__name')
    readonly_fields = AUDIT_READONLY_FIELDS
    raw_id_fields = ('university',)
    list_select_related = ('university',)
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'university')}),
        AUDIT_FIELDSET,
    )

    @admin.display(description=_('University'))
    def university_display(self, obj):
        return obj.university.name if obj.university else '—'
