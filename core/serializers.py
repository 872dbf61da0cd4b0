"""
Core — Serializers

Request serializers shared by every hierarchy endpoint: list query
parameters and the bulk-delete body.

@file core/serializers.py
"""

from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from core.constants import DEFAULT_PAGE_SIZE


class QueryOptionsSerializer(serializers.Serializer):
    """``?name=&sortBy=&limit=&page=`` on list endpoints."""

    name = serializers.CharField(required=False)
    sortBy = serializers.CharField(required=False)
    # Values above MAX_PAGE_SIZE are clamped by core.pagination.paginate
    limit = serializers.IntegerField(min_value=1, default=DEFAULT_PAGE_SIZE)
    page = serializers.IntegerField(min_value=1, default=1)

    def get_filters(self) -> dict:
        data = self.validated_data
        return {'name': data['name']} if 'name' in data else {}

    def get_options(self) -> dict:
        data = self.validated_data
        return {
            'sortBy': data.get('sortBy'),
            'limit': data['limit'],
            'page': data['page'],
        }


class BulkDeleteSerializer(serializers.Serializer):
    """
    ``{"<entity>Ids": [uuid, ...]}`` body of the deletemany endpoints.

    The key differs per entity (countryIds, roomIds, ...), so the field is
    added at construction time.
    """

    def __init__(self, *args, ids_field='ids', **kwargs):
        super().__init__(*args, **kwargs)
        self.ids_field = ids_field
        self.fields[ids_field] = serializers.ListField(
            child=serializers.UUIDField(), allow_empty=False,
        )

    def get_ids(self) -> list:
        return self.validated_data[self.ids_field]


class HierarchyWriteSerializer(serializers.ModelSerializer):
    """
    Base write serializer. Uniqueness is checked by the service layer,
    so ModelSerializer's automatic UniqueValidators are dropped.
    """

    def get_validators(self):
        return []

    def get_fields(self):
        fields = super().get_fields()
        for field in fields.values():
            field.validators = [
                v for v in field.validators
                if not isinstance(v, UniqueValidator)
            ]
        return fields

    def validate(self, attrs):
        if self.partial and not attrs:
            raise serializers.ValidationError('At least one field must be provided.')
        return attrs
