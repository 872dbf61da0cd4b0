"""
Institutions — Application Configuration
"""

from django.apps import AppConfig


class InstitutionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'institutions'
    verbose_name = 'Universities & Colleges'
