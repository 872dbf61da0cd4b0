"""
Core — Hierarchy ViewSet

Request handlers shared by all six hierarchy levels. Each app declares a
subclass with its service, serializers and the key of the bulk-delete
body; the "children by parent" route is declared on the child viewset
because its URL names the parent kind.

@file core/views.py
"""

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.constants import UUID_PATTERN
from core.exceptions import ResourceNotFoundError
from core.permissions import CanModifyHierarchy
from core.serializers import BulkDeleteSerializer, QueryOptionsSerializer


class HierarchyViewSet(viewsets.ModelViewSet):
    """
    CRUD, paginated list, bulk delete and children lookup for one level.

    List / retrieve is open to any authenticated user.
    Create / update / delete restricted to staff.
    """

    service_class = None
    read_serializer_class = None
    write_serializer_class = None
    update_serializer_class = None
    children_serializer_class = None
    bulk_ids_field = 'ids'

    permission_classes = [IsAuthenticated, CanModifyHierarchy]
    lookup_value_regex = UUID_PATTERN
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        return self.service_class.get_queryset()

    def get_serializer_class(self):
        if self.action in ('list', 'retrieve'):
            return self.read_serializer_class
        if self.action in ('update', 'partial_update') and self.update_serializer_class:
            return self.update_serializer_class
        return self.write_serializer_class

    def get_object(self):
        instance = self.service_class.get_or_404(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, instance)
        return instance

    def read_response(self, instance, status_code=status.HTTP_200_OK):
        serializer = self.read_serializer_class(instance, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def list(self, request, *args, **kwargs):
        params = QueryOptionsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        result = self.service_class.query(params.get_filters(), params.get_options())
        results = self.read_serializer_class(
            result.results, many=True, context=self.get_serializer_context(),
        ).data
        return Response(result.to_representation(results))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.service_class.create(
            actor=request.user, **serializer.validated_data,
        )
        return self.read_response(instance, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = self.service_class.update(
            instance_id=instance.pk,
            actor=request.user,
            **serializer.validated_data,
        )
        return self.read_response(instance)

    def destroy(self, request, *args, **kwargs):
        self.service_class.delete(
            instance_id=self.kwargs[self.lookup_field], actor=request.user,
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['delete'], url_path='deletemany')
    def delete_many(self, request):
        ser = BulkDeleteSerializer(data=request.data, ids_field=self.bulk_ids_field)
        ser.is_valid(raise_exception=True)
        result = self.service_class.delete_many(ser.get_ids(), actor=request.user)
        if not result.is_complete:
            label_plural = self.service_class.label_plural
            raise ResourceNotFoundError(detail={
                'detail': f'Some {label_plural} not found: {", ".join(result.not_found)}',
                'deleted': result.deleted,
                'not_found': result.not_found,
            })
        return Response(status=status.HTTP_204_NO_CONTENT)

    def children_response(self, parent_id):
        """``{"<parent kind>": {...parent, "<children>": [...]}}``"""
        parent = self.service_class.children_of(parent_id)
        serializer = self.children_serializer_class(parent, context=self.get_serializer_context())
        return Response({self.service_class.parent_field: serializer.data})


def children_route(parent_kind: str):
    """``@action`` for ``GET /<child>/<parent id>/<parent kind>/``."""
    return action(
        detail=False,
        methods=['get'],
        url_path=rf'(?P<parent_id>{UUID_PATTERN})/{parent_kind}',
    )
