"""
Event scheduler URL configuration.
"""

from django.urls import path, include

from core.routers import ConsoleRouter

from .views import EventViewSet

router = ConsoleRouter()
router.register(r'events', EventViewSet, basename='event')

app_name = 'events'

urlpatterns = [
    path('', include(router.urls)),
]
