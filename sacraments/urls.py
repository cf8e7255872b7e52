"""
Sacramental register URL configuration.
"""

from django.urls import path, include

from core.routers import ConsoleRouter

from .views import BaptismViewSet, BurialViewSet, MarriageViewSet

router = ConsoleRouter()
router.register(r'baptisms', BaptismViewSet, basename='baptism')
router.register(r'burials', BurialViewSet, basename='burial')
router.register(r'marriages', MarriageViewSet, basename='marriage')

app_name = 'sacraments'

urlpatterns = [
    path('', include(router.urls)),
]
