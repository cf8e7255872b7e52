"""
Ministry roster endpoints.
"""

from core.api_tags import APITags, record_viewset_schema
from core.viewsets import ConsoleRecordViewSet

from .models import ChoirMember, ParishCommitteeMember, SundaySchoolTeacher, YouthMember
from .serializers import (
    ChoirMemberSerializer,
    ParishCommitteeMemberSerializer,
    SundaySchoolTeacherSerializer,
    YouthMemberSerializer,
)

NAME_SEARCH = ['first_name', 'last_name']


@record_viewset_schema(APITags.MINISTRIES, 'choir member')
class ChoirMemberViewSet(ConsoleRecordViewSet):
    queryset = ChoirMember.objects.all()
    serializer_class = ChoirMemberSerializer
    record_type = 'choir_member'
    search_fields = NAME_SEARCH
    filterset_fields = ['choir_type', 'voice_part', 'is_active_member']
    ordering_fields = ['last_name', 'joined_date', 'created_at']


@record_viewset_schema(APITags.MINISTRIES, 'youth member')
class YouthMemberViewSet(ConsoleRecordViewSet):
    queryset = YouthMember.objects.all()
    serializer_class = YouthMemberSerializer
    record_type = 'youth_member'
    search_fields = NAME_SEARCH
    filterset_fields = ['is_active_member']
    ordering_fields = ['last_name', 'joined_date', 'created_at']


@record_viewset_schema(APITags.MINISTRIES, 'Sunday school teacher')
class SundaySchoolTeacherViewSet(ConsoleRecordViewSet):
    queryset = SundaySchoolTeacher.objects.all()
    serializer_class = SundaySchoolTeacherSerializer
    record_type = 'sunday_school_teacher'
    search_fields = NAME_SEARCH
    filterset_fields = ['is_active', 'class_name']
    ordering_fields = ['last_name', 'appointed_date', 'created_at']


@record_viewset_schema(APITags.MINISTRIES, 'parish committee member')
class ParishCommitteeMemberViewSet(ConsoleRecordViewSet):
    queryset = ParishCommitteeMember.objects.all()
    serializer_class = ParishCommitteeMemberSerializer
    record_type = 'parish_committee_member'
    search_fields = NAME_SEARCH
    filterset_fields = ['zonal_number', 'unit_number']
    ordering_fields = ['last_name', 'zonal_number', 'joined_date', 'created_at']
