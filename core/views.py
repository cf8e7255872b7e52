"""
Health check endpoint for load balancers and uptime monitoring.
"""

import time

from django.conf import settings
from django.db import connections, DatabaseError
from django.utils import timezone
from django.views.decorators.cache import never_cache
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
import structlog

from .api_tags import system_health_schema

logger = structlog.get_logger(__name__)


@system_health_schema(
    summary="Service health",
    description="Database connectivity for the console API. 503 when the database is unreachable."
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
@never_cache
def health_check(request):
    """
    Report whether the API can reach its database.

    **Response Codes**:
    - `200 OK`: Service is healthy
    - `503 Service Unavailable`: Database is unreachable
    """
    db_status = check_database_health()
    overall_status = db_status['status']

    health_data = {
        'status': overall_status,
        'timestamp': timezone.now(),
        'version': getattr(settings, 'SPECTACULAR_SETTINGS', {}).get('VERSION', '1.0.0'),
        'checks': {'database': db_status},
    }

    if overall_status == 'healthy':
        return Response(health_data, status=status.HTTP_200_OK)
    return Response(health_data, status=status.HTTP_503_SERVICE_UNAVAILABLE)


def check_database_health():
    """Check database connectivity and response time."""
    start_time = time.time()

    try:
        db_conn = connections['default']
        with db_conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        response_time = int((time.time() - start_time) * 1000)
        logger.error("Database health check failed", error=str(e))
        return {
            'status': 'unhealthy',
            'response_time_ms': response_time,
            'details': f'Database connection failed: {str(e)[:100]}'
        }

    return {
        'status': 'healthy',
        'response_time_ms': int((time.time() - start_time) * 1000),
        'details': f'{db_conn.vendor.title()} connection successful'
    }
