"""
Member registration URL configuration.
"""

from django.urls import path, include

from core.routers import ConsoleRouter

from .views import MemberRegistrationViewSet

router = ConsoleRouter()
router.register(r'member-registrations', MemberRegistrationViewSet, basename='member-registration')

app_name = 'members'

urlpatterns = [
    path('', include(router.urls)),
]
