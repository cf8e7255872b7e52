"""
Leadership URL configuration.
"""

from django.urls import path, include

from core.routers import ConsoleRouter

from .views import UnitLeaderViewSet, ZonalLeaderViewSet

router = ConsoleRouter()
router.register(r'zonal-leaders', ZonalLeaderViewSet, basename='zonal-leader')
router.register(r'unit-leaders', UnitLeaderViewSet, basename='unit-leader')

app_name = 'leadership'

urlpatterns = [
    path('', include(router.urls)),
]
