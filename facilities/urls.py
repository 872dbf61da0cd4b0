"""
Facilities — URL Configuration

@file facilities/urls.py
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import BuildingViewSet, RoomViewSet

app_name = 'facilities'

router = SimpleRouter()
router.register('building', BuildingViewSet, basename='building')
router.register('room', RoomViewSet, basename='room')

urlpatterns = [
    path('', include(router.urls)),
]
