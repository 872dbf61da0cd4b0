"""
Core — Django Admin Helpers

Fieldset and read-only fields shared by every hierarchy ModelAdmin.

@file core/admin.py
"""

from django.utils.translation import gettext_lazy as _

AUDIT_READONLY_FIELDS = ('id', 'created_at', 'updated_at', 'created_by', 'updated_by')

AUDIT_FIELDSET = (
    _('Audit'), {
        'fields': ('created_at', 'updated_at', 'created_by', 'updated_by'),
        'classes': ('collapse',),
    },
)
