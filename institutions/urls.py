"""
Institutions — URL Configuration

@file institutions/urls.py
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import CollegeViewSet, UniversityViewSet

app_name = 'institutions'

router = SimpleRouter()
router.register('university', UniversityViewSet, basename='university')
router.register('college', CollegeViewSet, basename='college')

urlpatterns = [
    path('', include(router.urls)),
]
