"""
Institutions — Views

University and College endpoints, with the
``/university/<stateId>/state/`` and ``/college/<universityId>/university/``
children lookups.

@file institutions/views.py
"""

from core.views import HierarchyViewSet, children_route

from .serializers import (
    CollegeReadSerializer,
    CollegeWriteSerializer,
    StateWithUniversitiesSerializer,
    UniversityReadSerializer,
    UniversityWithCollegesSerializer,
    UniversityWriteSerializer,
)
from .services import CollegeService, UniversityService


class UniversityViewSet(HierarchyViewSet):
    service_class = UniversityService
    read_serializer_class = UniversityReadSerializer
    write_serializer_class = UniversityWriteSerializer
    children_serializer_class = StateWithUniversitiesSerializer
    bulk_ids_field = 'universityIds'

    @children_route('state')
    def by_state(self, request, parent_id=None):
        return self.children_response(parent_id)


class CollegeViewSet(HierarchyViewSet):
    service_class = CollegeService
    read_serializer_class = CollegeReadSerializer
    write_serializer_class = CollegeWriteSerializer
    children_serializer_class = UniversityWithCollegesSerializer
    bulk_ids_field = 'collegeIds'

    @children_route('university')
    def by_university(self, request, parent_id=None):
        return self.children_response(parent_id)
