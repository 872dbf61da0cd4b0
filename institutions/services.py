"""
Institutions — Service Layer

University and College services. Names are unique per kind.

@file institutions/services.py
"""

from core.services import HierarchyService

from .models import College, University


class UniversityService(HierarchyService):
    model = University
    label = 'University'
    label_plural = 'universities'
    parent_field = 'state'
    unique_fields = ('name',)
    duplicate_message = 'University already exists.'


class CollegeService(HierarchyService):
    model = College
    label = 'College'
    label_plural = 'colleges'
    parent_field = 'university'
    unique_fields = ('name',)
    duplicate_message = 'College already exists.'
