"""
Institutions — Serializers

@file institutions/serializers.py
"""

from rest_framework import serializers

from core.serializers import HierarchyWriteSerializer
from geography.models import State
from geography.serializers import StateMinimalSerializer

from .models import College, University


class UniversityMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = University
        fields = ['id', 'name', 'state']


class UniversityReadSerializer(serializers.ModelSerializer):
    state_detail = StateMinimalSerializer(source='state', read_only=True)

    class Meta:
        model = University
        fields = ['id', 'name', 'state', 'state_detail', 'created_at', 'updated_at']
        read_only_fields = fields


class UniversityWriteSerializer(HierarchyWriteSerializer):
    class Meta:
        model = University
        fields = ['name', 'state']
        extra_kwargs = {
            'state': {'required': True, 'allow_null': False},
        }


class CollegeMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = College
        fields = ['id', 'name', 'university']


class CollegeReadSerializer(serializers.ModelSerializer):
    university_detail = UniversityMinimalSerializer(source='university', read_only=True)

    class Meta:
        model = College
        fields = ['id', 'name', 'university', 'university_detail', 'created_at', 'updated_at']
        read_only_fields = fields


class CollegeWriteSerializer(HierarchyWriteSerializer):
    class Meta:
        model = College
        fields = ['name', 'university']
        extra_kwargs = {
            'university': {'required': True, 'allow_null': False},
        }


# ---------------------------------------------------------------------------
# Parent with children
# ---------------------------------------------------------------------------

class StateWithUniversitiesSerializer(serializers.ModelSerializer):
    universities = UniversityMinimalSerializer(many=True, read_only=True)

    class Meta:
        model = State
        fields = ['id', 'name', 'state_code', 'country', 'created_at', 'updated_at', 'universities']
        read_only_fields = fields


class UniversityWithCollegesSerializer(serializers.ModelSerializer):
    colleges = CollegeMinimalSerializer(many=True, read_only=True)

    class Meta:
        model = University
        fields = ['id', 'name', 'state', 'created_at', 'updated_at', 'colleges']
        read_only_fields = fields
