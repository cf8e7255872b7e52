"""
Member registration endpoints.
"""

from django.db.models import Prefetch

from core.api_tags import APITags, record_viewset_schema
from core.viewsets import ConsoleRecordViewSet

from .models import Child, MemberRegistration
from .serializers import MemberRegistrationSerializer


@record_viewset_schema(APITags.MEMBERS, 'member registration')
class MemberRegistrationViewSet(ConsoleRecordViewSet):
    """
    Family registrations with their children nested in each record.

    A PATCH that includes ``children`` replaces the whole list; one without
    it leaves the children as they are.
    """

    queryset = MemberRegistration.objects.prefetch_related(
        Prefetch('children', queryset=Child.objects.order_by('position', 'id'))
    )
    serializer_class = MemberRegistrationSerializer
    record_type = 'member_registration'
    search_fields = ['name_of_father', 'name_of_mother', 'church', 'contact_no']
    filterset_fields = ['church']
    ordering_fields = ['name_of_father', 'church', 'created_at']
