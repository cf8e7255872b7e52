"""
Request logging middleware.

Tags every request with a correlation ID, echoes it back in the
``X-Correlation-ID`` response header, and logs one line per API request with
its status code and duration.
"""

import time
from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

from ..logging.structured import get_contextual_logger, setup_request_logging, get_client_ip

logger = get_contextual_logger('parish_console.requests')


class RequestLoggingMiddleware(MiddlewareMixin):
    """Correlation-ID tagging and access logging for ``/api`` requests."""

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        setup_request_logging(request)
        request._started_at = time.monotonic()
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        correlation_id = getattr(request, 'correlation_id', None)
        if correlation_id:
            response['X-Correlation-ID'] = correlation_id

        if not request.path.startswith('/api/'):
            return response

        started_at = getattr(request, '_started_at', None)
        duration_ms = (time.monotonic() - started_at) * 1000 if started_at else None
        user = getattr(request, 'user', None)

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"{request.method} {request.path} {response.status_code}",
            extra={
                'correlation_id': correlation_id,
                'request_method': request.method,
                'request_path': request.path,
                'status_code': response.status_code,
                'duration_ms': round(duration_ms, 2) if duration_ms is not None else None,
                'user_id': str(user.id) if user is not None and user.is_authenticated else None,
                'ip_address': get_client_ip(request),
            }
        )
        return response
