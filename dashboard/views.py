"""
Dashboard view.
"""

from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.api_tags import APITags

from .serializers import DashboardSerializer
from .services import build_dashboard


@extend_schema(
    summary="Dashboard overview",
    description=(
        "Record totals, active roster counts, pledged monthly donations, the "
        "next upcoming events and the latest additions across the console."
    ),
    tags=[APITags.DASHBOARD],
    responses={200: DashboardSerializer},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_view(request):
    return Response(DashboardSerializer(build_dashboard(request.user)).data)
