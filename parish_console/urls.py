"""
URL configuration for parish_console project.

Every console resource lives under ``/api``; the Django admin provides the
HTML screens.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from core.views import health_check

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'),
         name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Routes
    path('api/health/', health_check, name='health-check'),
    path('api/users/', include('authentication.urls')),
    path('api/', include('dashboard.urls')),
    path('api/', include('leadership.urls')),
    path('api/', include('sacraments.urls')),
    path('api/', include('ministries.urls')),
    path('api/', include('members.urls')),
    path('api/', include('events.urls')),
]
