"""
Ministry roster URL configuration.
"""

from django.urls import path, include

from core.routers import ConsoleRouter

from .views import (
    ChoirMemberViewSet,
    ParishCommitteeMemberViewSet,
    SundaySchoolTeacherViewSet,
    YouthMemberViewSet,
)

router = ConsoleRouter()
router.register(r'choiristors', ChoirMemberViewSet, basename='choir-member')
router.register(r'youth-association', YouthMemberViewSet, basename='youth-member')
router.register(r'sunday-school-teachers', SundaySchoolTeacherViewSet, basename='sunday-school-teacher')
router.register(r'parish-committee', ParishCommitteeMemberViewSet, basename='parish-committee-member')

app_name = 'ministries'

urlpatterns = [
    path('', include(router.urls)),
]
