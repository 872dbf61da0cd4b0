"""
Geography — Serializers

Read, write and parent-with-children serializers for Country and State.

@file geography/serializers.py
"""

from rest_framework import serializers

from core.serializers import HierarchyWriteSerializer

from .models import Country, State


# ---------------------------------------------------------------------------
# Country
# ---------------------------------------------------------------------------

class CountryMinimalSerializer(serializers.ModelSerializer):
    """Minimal fields for embedding in State representations."""

    class Meta:
        model = Country
        fields = ['id', 'name', 'code']


class CountryReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Country
        fields = ['id', 'name', 'code', 'created_at', 'updated_at']
        read_only_fields = fields


class CountryWriteSerializer(HierarchyWriteSerializer):
    class Meta:
        model = Country
        fields = ['name', 'code']


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

class StateMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = State
        fields = ['id', 'name', 'state_code', 'country']


class StateReadSerializer(serializers.ModelSerializer):
    country_detail = CountryMinimalSerializer(source='country', read_only=True)

    class Meta:
        model = State
        fields = [
            'id', 'name', 'state_code',
            'country', 'country_detail',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class StateWriteSerializer(HierarchyWriteSerializer):
    class Meta:
        model = State
        fields = ['name', 'state_code', 'country']
        extra_kwargs = {
            'country': {'required': True, 'allow_null': False},
        }


class CountryWithStatesSerializer(serializers.ModelSerializer):
    """A country and every state that references it."""

    states = StateMinimalSerializer(many=True, read_only=True)

    class Meta:
        model = Country
        fields = ['id', 'name', 'code', 'created_at', 'updated_at', 'states']
        read_only_fields = fields
