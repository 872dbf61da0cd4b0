"""
Geography — Views

Country and State endpoints. Both are plain HierarchyViewSets; State
adds the ``/state/<countryId>/country/`` children lookup.

@file geography/views.py
"""

from core.views import HierarchyViewSet, children_route

from .serializers import (
    CountryReadSerializer,
    CountryWithStatesSerializer,
    CountryWriteSerializer,
    StateReadSerializer,
    StateWriteSerializer,
)
from .services import CountryService, StateService


class CountryViewSet(HierarchyViewSet):
    service_class = CountryService
    read_serializer_class = CountryReadSerializer
    write_serializer_class = CountryWriteSerializer
    bulk_ids_field = 'countryIds'


class StateViewSet(HierarchyViewSet):
    service_class = StateService
    read_serializer_class = StateReadSerializer
    write_serializer_class = StateWriteSerializer
    children_serializer_class = CountryWithStatesSerializer
    bulk_ids_field = 'stateIds'

    @children_route('country')
    def by_country(self, request, parent_id=None):
        """States of one country."""
        return self.children_response(parent_id)
