"""
Facilities — Views

Building and Room endpoints. Building creation takes a list of names;
Room create/update accept multipart/form-data with an image file.

@file facilities/views.py
"""

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from core.views import HierarchyViewSet, children_route

from .serializers import (
    BuildingCreateSerializer,
    BuildingReadSerializer,
    BuildingWithRoomsSerializer,
    BuildingWriteSerializer,
    CollegeWithBuildingsSerializer,
    RoomReadSerializer,
    RoomWriteSerializer,
)
from .services import BuildingService, RoomService


class BuildingViewSet(HierarchyViewSet):
    service_class = BuildingService
    read_serializer_class = BuildingReadSerializer
    write_serializer_class = BuildingCreateSerializer
    update_serializer_class = BuildingWriteSerializer
    children_serializer_class = CollegeWithBuildingsSerializer
    bulk_ids_field = 'buildingIds'

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        buildings = BuildingService.create_many(
            names=serializer.validated_data['name'],
            college=serializer.validated_data['college'],
            actor=request.user,
        )
        data = BuildingReadSerializer(
            buildings, many=True, context=self.get_serializer_context(),
        ).data
        return Response(data, status=status.HTTP_201_CREATED)

    @children_route('college')
    def by_college(self, request, parent_id=None):
        return self.children_response(parent_id)


class RoomViewSet(HierarchyViewSet):
    service_class = RoomService
    read_serializer_class = RoomReadSerializer
    write_serializer_class = RoomWriteSerializer
    children_serializer_class = BuildingWithRoomsSerializer
    bulk_ids_field = 'roomIds'
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    @children_route('building')
    def by_building(self, request, parent_id=None):
        return self.children_response(parent_id)
