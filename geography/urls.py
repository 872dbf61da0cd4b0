"""
Geography — URL Configuration

@file geography/urls.py
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import CountryViewSet, StateViewSet

app_name = 'geography'

router = SimpleRouter()
router.register('country', CountryViewSet, basename='country')
router.register('state', StateViewSet, basename='state')

urlpatterns = [
    path('', include(router.urls)),
]
