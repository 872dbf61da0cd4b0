"""
Facilities — Django Admin Configuration

Buildings and rooms; rooms show a thumbnail of their stored image.

@file facilities/admin.py
"""

from django.contrib import admin
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from core.admin import AUDIT_FIELDSET, AUDIT_READONLY_FIELDS

from .models import Building, Room


@admin.register(Building)
class BuildingAdmin(admin.ModelAdmin):
    list_display = ('name', 'college_display', 'created_at')
    search_fields = ('name', 'college__name')
    readonly_fields = AUDIT_READONLY_FIELDS
    raw_id_fields = ('college',)
    list_select_related = ('college',)
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'college')}),
        AUDIT_FIELDSET,
    )

    @admin.display(description=_('College'))
    def college_display(self, obj):
        return obj.college.name if obj.college else '—'


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ('name', 'building_display', 'image_preview', 'created_at')
    search_fields = ('name', 'building__name')
    readonly_fields = AUDIT_READONLY_FIELDS + ('image', 'image_key', 'image_preview')
    raw_id_fields = ('building',)
    list_select_related = ('building',)
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'description', 'building')}),
        (_('Image'), {'fields': ('image_preview', 'image', 'image_key')}),
        AUDIT_FIELDSET,
    )

    @admin.display(description=_('Building'))
    def building_display(self, obj):
        return obj.building.name if obj.building else '—'

    @admin.display(description=_('Preview'))
    def image_preview(self, obj):
        if not obj.image:
            return '—'
        return format_html('<img src="{}" style="max-height:48px; border-radius:4px;">', obj.image)
