"""
Core — Hierarchy Service

One generic CRUD service for every level of the campus hierarchy.
Each app subclasses HierarchyService once per model and only declares
what differs: the model, its parent field, the fields that must be
unique and the human label used in error messages.

Operations:
  - query()        filter + sortBy/limit/page, parent joined
  - exists()       name / secondary-code collision check
  - create()       uniqueness check, then insert
  - update()       fetch, uniqueness check excluding self, overwrite
  - delete()       fetch, remove
  - delete_many()  best-effort batch delete with aggregate result
  - children_of()  parent existence check, then parent + children

@file core/services.py
"""

import logging
from dataclasses import dataclass, field

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Prefetch, Q
from django_filters.filterset import filterset_factory
from rest_framework.exceptions import ValidationError

from core.constants import DEFAULT_PAGE_SIZE
from core.exceptions import (
    DuplicateResourceError,
    InternalServiceError,
    ResourceNotFoundError,
    StorageError,
)
from core.pagination import QueryResult, paginate, parse_sort_by

logger = logging.getLogger('campus')


@dataclass
class BulkDeleteResult:
    """Outcome of a batch delete. Deletions listed here are not rolled back."""

    deleted: list[str] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.not_found


class HierarchyService:
    """
    Generic service parameterised by a HierarchyNode model.

    Subclasses set:
      model              concrete model class
      label              'Country', 'State', ... (error messages)
      label_plural       'countries', 'states', ... (bulk error messages)
      parent_field       FK name to the enclosing level, or None
      unique_fields      ('name',) or ('name', '<code field>'); empty for none
      duplicate_message  detail of the conflict error
    """

    model = None
    label = 'Resource'
    label_plural = 'resources'
    parent_field = None
    unique_fields = ()
    duplicate_message = 'Resource already exists.'
    filter_fields = ['name']
    sort_fields = None
    unsortable_fields = ('created_by', 'updated_by', 'image_key')

    # --- Reads ---

    @classmethod
    def get_queryset(cls):
        queryset = cls.model.objects.all()
        if cls.parent_field:
            queryset = queryset.select_related(cls.parent_field)
        return queryset

    @classmethod
    def get_sort_fields(cls) -> tuple:
        """Every concrete column except the audit actors and storage keys."""
        if cls.sort_fields is not None:
            return tuple(cls.sort_fields)
        return tuple(
            f.name for f in cls.model._meta.concrete_fields
            if f.name not in cls.unsortable_fields
        )

    @classmethod
    def get_filterset_class(cls):
        return filterset_factory(cls.model, fields=cls.filter_fields)

    @classmethod
    def query(cls, filters=None, options=None) -> QueryResult:
        """
        Return one page of records matching ``filters``.

        ``options`` accepts ``sortBy`` ('field:asc|desc'), ``limit`` and
        ``page``. A page past the end yields an empty result list.
        """
        options = options or {}
        filterset = cls.get_filterset_class()(
            data=filters or {}, queryset=cls.get_queryset(),
        )
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)

        ordering = parse_sort_by(options.get('sortBy'), cls.get_sort_fields())
        if not ordering:
            ordering = list(cls.model._meta.ordering)
        queryset = filterset.qs.order_by(*ordering, 'pk')

        return paginate(
            queryset,
            page=options.get('page') or 1,
            limit=options.get('limit') or DEFAULT_PAGE_SIZE,
        )

    @classmethod
    def get_by_id(cls, instance_id):
        return cls.get_queryset().filter(pk=instance_id).first()

    @classmethod
    def get_or_404(cls, instance_id):
        instance = cls.get_by_id(instance_id)
        if instance is None:
            raise ResourceNotFoundError(detail=f'{cls.label} not found.')
        return instance

    # --- Uniqueness ---

    @classmethod
    def exists(cls, name=None, secondary_code=None, exclude_id=None) -> bool:
        """
        True if another record matches ``name`` OR the secondary code.

        ``exclude_id`` removes the record being updated from the match so
        it never collides with itself.
        """
        values = dict(zip(cls.unique_fields, (name, secondary_code)))
        condition = Q()
        for field_name, value in values.items():
            if value not in (None, ''):
                condition |= Q(**{field_name: value.strip() if isinstance(value, str) else value})
        if not condition:
            return False

        queryset = cls.model.objects.filter(condition)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    @classmethod
    def _ensure_unique(cls, fields: dict, exclude_id=None) -> None:
        if not cls.unique_fields:
            return
        candidates = [fields.get(name) for name in cls.unique_fields]
        if not any(value not in (None, '') for value in candidates):
            return
        if cls.exists(*candidates, exclude_id=exclude_id):
            raise DuplicateResourceError(detail=cls.duplicate_message)

    @classmethod
    def _save(cls, instance) -> None:
        try:
            with transaction.atomic():
                instance.save()
        except IntegrityError as exc:
            # A concurrent writer won the check-then-insert race.
            logger.warning('%s save hit a unique constraint: %s', cls.label, exc)
            raise DuplicateResourceError(detail=cls.duplicate_message) from exc

    # --- Writes ---

    @classmethod
    def create(cls, *, actor=None, **fields):
        cls._ensure_unique(fields)
        instance = cls.model(**fields)
        instance.created_by = actor
        instance.updated_by = actor
        cls._save(instance)
        logger.info('%s %s created by %s.', cls.label, instance.pk, actor)
        return instance

    @classmethod
    def update(cls, *, instance_id, actor=None, **fields):
        instance = cls.get_or_404(instance_id)
        for key in ('id', 'pk', 'created_at', 'created_by'):
            fields.pop(key, None)

        cls._ensure_unique(fields, exclude_id=instance.pk)

        for field_name, value in fields.items():
            setattr(instance, field_name, value)
        instance.updated_by = actor
        cls._save(instance)
        return instance

    @classmethod
    def perform_delete(cls, instance) -> None:
        """Remove one record. Subclasses release external resources first."""
        instance.delete()

    @classmethod
    def delete(cls, *, instance_id, actor=None):
        instance = cls.get_or_404(instance_id)
        pk = instance.pk
        cls.perform_delete(instance)
        logger.info('%s %s deleted by %s.', cls.label, pk, actor)
        return instance

    @classmethod
    def delete_many(cls, ids, *, actor=None) -> BulkDeleteResult:
        """
        Delete each id independently.

        Missing ids are collected, not raised: the caller decides how to
        report a partial batch. Records deleted before a missing id was
        seen stay deleted. An unexpected failure on any single id aborts
        the rest of the batch.
        """
        result = BulkDeleteResult()
        for instance_id in dict.fromkeys(ids):
            instance = cls.get_by_id(instance_id)
            if instance is None:
                result.not_found.append(str(instance_id))
                continue
            try:
                cls.perform_delete(instance)
            except (DatabaseError, StorageError) as exc:
                logger.error('Bulk delete of %s %s failed: %s', cls.label, instance_id, exc)
                raise InternalServiceError(
                    detail=f'Error deleting {cls.label.lower()} with ID {instance_id}: {exc}',
                ) from exc
            result.deleted.append(str(instance_id))

        logger.info(
            'Bulk delete of %s by %s: %d deleted, %d not found.',
            cls.label_plural, actor, len(result.deleted), len(result.not_found),
        )
        return result

    # --- Parent / children ---

    @classmethod
    def get_parent_model(cls):
        return cls.model._meta.get_field(cls.parent_field).related_model

    @classmethod
    def get_children_accessor(cls) -> str:
        """Reverse accessor on the parent, e.g. 'states' for State.country."""
        return cls.model._meta.get_field(cls.parent_field).remote_field.get_accessor_name()

    @classmethod
    def children_of(cls, parent_id):
        """
        Return the parent record with its children prefetched.

        The parent is looked up first so a missing parent is a clean
        404 and the children query is never issued for it.
        """
        parent_model = cls.get_parent_model()
        if not parent_model.objects.filter(pk=parent_id).exists():
            raise ResourceNotFoundError(
                detail=f'{parent_model._meta.verbose_name.title()} not found.',
            )
        accessor = cls.get_children_accessor()
        children = cls.model.objects.order_by(*cls.model._meta.ordering, 'pk')
        return (
            parent_model.objects
            .prefetch_related(Prefetch(accessor, queryset=children))
            .get(pk=parent_id)
        )
