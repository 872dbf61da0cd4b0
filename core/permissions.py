"""
Core — Permissions

Hierarchy data is readable by any authenticated user. Only staff and
superusers can create, edit or delete.

@file core/permissions.py
"""

from rest_framework.permissions import BasePermission


class CanModifyHierarchy(BasePermission):
    """Read for authenticated users; writes for staff and superusers."""

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if request.method in ('GET', 'HEAD', 'OPTIONS'):
            return True
        return user.is_superuser or user.is_staff
