"""
Campus Registry — Root URL Configuration

All API endpoints are namespaced under /api/v1/. Each hierarchy app
mounts its routers at the API root, so the paths are /api/v1/country/,
/api/v1/state/, ... /api/v1/room/.

@file config/urls.py
"""

from django.contrib import admin
from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

admin.site.site_header = 'Campus Registry Administration'
admin.site.site_title = 'Campus Registry'
admin.site.index_title = 'Countries, institutions and facilities'


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """Campus Registry API v1 — endpoint directory."""
    def link(name):
        return reverse(f'api-v1:{name}', request=request, format=format)

    return Response({
        'auth': {
            'login': link('token-obtain'),
            'refresh': link('token-refresh'),
        },
        'geography': {
            'countries': link('geography:country-list'),
            'states': link('geography:state-list'),
        },
        'institutions': {
            'universities': link('institutions:university-list'),
            'colleges': link('institutions:college-list'),
        },
        'facilities': {
            'buildings': link('facilities:building-list'),
            'rooms': link('facilities:room-list'),
        },
    })


api_v1_patterns = [
    path('', api_root, name='api-root'),
    path('auth/login/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('', include('geography.urls', namespace='geography')),
    path('', include('institutions.urls', namespace='institutions')),
    path('', include('facilities.urls', namespace='facilities')),
]

urlpatterns = [
    path('admin/', admin.site.urls),

    # DRF session auth (powers the "Log in" button on the browsable API)
    path('api/auth/', include('rest_framework.urls', namespace='rest_framework')),

    # Versioned API
    path('api/v1/', include((api_v1_patterns, 'api-v1'))),
]
