"""
Core — Pagination

Page/limit pagination shared by every hierarchy list endpoint.

A page past the end is not an error: it yields an empty result list
with accurate totals, which is why DRF's PageNumberPagination (404 on
an invalid page) is not used here.

@file core/pagination.py
"""

import math
from dataclasses import dataclass

from rest_framework.exceptions import ValidationError

from core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SORT_DESC, SORT_DIRECTIONS


@dataclass
class QueryResult:
    """One page of a filtered, sorted query plus the totals of the full match."""

    results: list
    page: int
    limit: int
    total_pages: int
    total_results: int

    def to_representation(self, results=None) -> dict:
        return {
            'results': self.results if results is None else results,
            'page': self.page,
            'limit': self.limit,
            'totalPages': self.total_pages,
            'totalResults': self.total_results,
        }


def parse_sort_by(sort_by: str | None, allowed_fields) -> list[str]:
    """
    Translate ``name:asc,created_at:desc`` into ``order_by`` arguments.

    A criterion without a direction sorts ascending.
    """
    if not sort_by:
        return []

    ordering = []
    for criterion in sort_by.split(','):
        criterion = criterion.strip()
        if not criterion:
            continue
        field_name, _, direction = criterion.partition(':')
        direction = (direction or 'asc').strip().lower()
        if field_name not in allowed_fields:
            raise ValidationError({
                'sortBy': [f'Cannot sort by "{field_name}". Allowed: {", ".join(allowed_fields)}.'],
            })
        if direction not in SORT_DIRECTIONS:
            raise ValidationError({
                'sortBy': [f'Invalid sort direction "{direction}". Use asc or desc.'],
            })
        ordering.append(f'-{field_name}' if direction == SORT_DESC else field_name)
    return ordering


def paginate(queryset, *, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> QueryResult:
    """Slice ``queryset`` to the requested page and count the full match."""
    limit = max(1, min(int(limit), MAX_PAGE_SIZE))
    page = max(1, int(page))

    total_results = queryset.count()
    total_pages = math.ceil(total_results / limit)
    offset = (page - 1) * limit

    if offset >= total_results:
        results = []
    else:
        results = list(queryset[offset:offset + limit])

    return QueryResult(
        results=results,
        page=page,
        limit=limit,
        total_pages=total_pages,
        total_results=total_results,
    )
