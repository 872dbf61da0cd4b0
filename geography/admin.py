"""
Geography — Django Admin Configuration

Countries with their state counts; states with their country.

@file geography/admin.py
"""

from django.contrib import admin
from django.db.models import Count
from django.utils.translation import gettext_lazy as _

from core.admin import AUDIT_FIELDSET, AUDIT_READONLY_FIELDS

from .models import Country, State


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ('name', 'code', 'states_count', 'created_at')
    search_fields = ('name', 'code')
    readonly_fields = AUDIT_READONLY_FIELDS
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'code')}),
        AUDIT_FIELDSET,
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_states_count=Count('states'))

    @admin.display(description=_('States'), ordering='_states_count')
    def states_count(self, obj):
        return obj._states_count


@admin.register(State)
class StateAdmin(admin.ModelAdmin):
    list_display = ('name', 'state_code', 'country_display', 'created_at')
    list_filter = ('country',)
    search_fields = ('name', 'state_code', 'country__name')
    readonly_fields = AUDIT_READONLY_FIELDS
    raw_id_fields = ('country',)
    list_select_related = ('country',)
    list_per_page = 50
    ordering = ('name',)

    fieldsets = (
        (None, {'fields': ('id', 'name', 'state_code', 'country')}),
        AUDIT_FIELDSET,
    )

    @admin.display(description=_('Country'))
    def country_display(self, obj):
        return obj.country.name if obj.country else '—'
