"""
Geography — Service Layer

Country and State services. Both enforce uniqueness on the name and on
their secondary code.

@file geography/services.py
"""

from core.services import HierarchyService

from .models import Country, State


class CountryService(HierarchyService):
    model = Country
    label = 'Country'
    label_plural = 'countries'
    unique_fields = ('name', 'code')
    duplicate_message = 'Country or country code already exists.'


class StateService(HierarchyService):
    model = State
    label = 'State'
    label_plural = 'states'
    parent_field = 'country'
    unique_fields = ('name', 'state_code')
    duplicate_message = 'State or state code already exists.'
