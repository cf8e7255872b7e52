"""
Zonal and unit leader endpoints.
"""

from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from core.api_tags import APITags, record_viewset_schema
from core.viewsets import ConsoleRecordViewSet

from .models import UnitLeader, ZonalLeader
from .serializers import UnitLeaderSerializer, ZonalLeaderSerializer


@record_viewset_schema(APITags.LEADERSHIP, 'zonal leader')
class ZonalLeaderViewSet(ConsoleRecordViewSet):
    """
    Zonal leaders, listed in resolution order (zone, then appointment).
    """

    queryset = ZonalLeader.objects.all()
    serializer_class = ZonalLeaderSerializer
    record_type = 'zonal_leader'
    search_fields = ['first_name', 'last_name', 'zone_number']
    filterset_fields = ['zone_number']
    ordering_fields = ['zone_number', 'appointed_date', 'created_at', 'last_name']
    protected_message = (
        'Unit leaders still report to this zonal leader. '
        'Reassign or delete them first.'
    )

    @extend_schema(
        summary="Resolve a zone's leader",
        description="The zonal leader a new unit leader in this zone would report to.",
        tags=[APITags.LEADERSHIP],
        responses={
            200: ZonalLeaderSerializer,
            404: OpenApiResponse(description="No zonal leader assigned to the zone"),
        },
    )
    @action(detail=False, methods=['get'], url_path=r'by-zone/(?P<zone>[^/.]+)')
    def by_zone(self, request, zone=None):
        leader = ZonalLeader.objects.for_zone(zone)
        if leader is None:
            raise NotFound(f'There is no zonal leader assigned to Zone {zone}.')
        return Response(self.get_serializer(leader).data)


@record_viewset_schema(APITags.LEADERSHIP, 'unit leader')
class UnitLeaderViewSet(ConsoleRecordViewSet):

    queryset = UnitLeader.objects.select_related('zonal_leader')
    serializer_class = UnitLeaderSerializer
    record_type = 'unit_leader'
    search_fields = ['first_name', 'last_name']
    filterset_fields = ['zonal_number', 'unit_number', 'zonal_leader']
    ordering_fields = ['zonal_number', 'unit_number', 'appointed_date', 'created_at']
