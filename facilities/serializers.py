"""
Facilities — Serializers

Read and write serializers for Building and Room. Building creation
takes a list of names; Room writes accept an optional image upload.

@file facilities/serializers.py
"""

import os

from rest_framework import serializers

from core.constants import ALLOWED_IMAGE_CONTENT_TYPES, ALLOWED_IMAGE_EXTENSIONS
from core.serializers import HierarchyWriteSerializer
from institutions.models import College
from institutions.serializers import CollegeMinimalSerializer

from .models import Building, Room
from .services import RoomService

__all__ = [
    'BuildingReadSerializer',
    'BuildingCreateSerializer',
    'BuildingWriteSerializer',
    'CollegeWithBuildingsSerializer',
    'RoomReadSerializer',
    'RoomWriteSerializer',
    'BuildingWithRoomsSerializer',
]


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

class BuildingMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Building
        fields = ['id', 'name', 'college']


class BuildingReadSerializer(serializers.ModelSerializer):
    college_detail = CollegeMinimalSerializer(source='college', read_only=True)

    class Meta:
        model = Building
        fields = ['id', 'name', 'college', 'college_detail', 'created_at', 'updated_at']
        read_only_fields = fields


class BuildingCreateSerializer(serializers.Serializer):
    """``{"name": ["Block A", "Block B"], "college": "<uuid>"}``"""

    name = serializers.ListField(
        child=serializers.CharField(max_length=150),
        allow_empty=False,
    )
    college = serializers.PrimaryKeyRelatedField(queryset=College.objects.all())


class BuildingWriteSerializer(HierarchyWriteSerializer):
    class Meta:
        model = Building
        fields = ['name', 'college']
        extra_kwargs = {
            'college': {'allow_null': False},
        }


class CollegeWithBuildingsSerializer(serializers.ModelSerializer):
    buildings = BuildingMinimalSerializer(many=True, read_only=True)

    class Meta:
        model = College
        fields = ['id', 'name', 'university', 'created_at', 'updated_at', 'buildings']
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Room
# ---------------------------------------------------------------------------

class RoomMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = ['id', 'name', 'image', 'description', 'building']


class RoomReadSerializer(serializers.ModelSerializer):
    building_detail = BuildingMinimalSerializer(source='building', read_only=True)

    class Meta:
        model = Room
        fields = [
            'id', 'name', 'image', 'description',
            'building', 'building_detail',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class RoomWriteSerializer(HierarchyWriteSerializer):
    """Accepts JSON or multipart/form-data with an ``image`` file field."""

    image = serializers.ImageField(required=False, write_only=True)

    class Meta:
        model = Room
        fields = ['name', 'description', 'building', 'image']
        extra_kwargs = {
            'building': {'required': True, 'allow_null': False},
        }

    def validate_image(self, value):
        extension = os.path.splitext(value.name or '')[1].lower()
        content_type = getattr(value, 'content_type', '') or ''
        if extension not in ALLOWED_IMAGE_EXTENSIONS or content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
            raise serializers.ValidationError('Only images (jpeg, jpg, png) are allowed.')

        max_bytes = RoomService.image_max_bytes()
        if value.size >= max_bytes:
            raise serializers.ValidationError(
                f'Image must be smaller than {max_bytes // (1024 * 1024)} MB.',
            )
        return value


class BuildingWithRoomsSerializer(serializers.ModelSerializer):
    rooms = RoomMinimalSerializer(many=True, read_only=True)

    class Meta:
        model = Building
        fields = ['id', 'name', 'college', 'created_at', 'updated_at', 'rooms']
        read_only_fields = fields
