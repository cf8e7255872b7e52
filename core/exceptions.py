"""
Custom exception handlers for the parish console API.

Implements Problem+JSON (RFC 7807) for standardized error responses. Every
error body also carries an ``error`` string, which the console shows as its
dismissible message.
"""

import logging
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler

from .logging.structured import get_client_ip


logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Something went wrong. Please try again.'


class ProblemDetailException(APIException):
    """
    Custom exception for Problem+JSON (RFC 7807) responses.

    Allows raising exceptions with standardized error details.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'A problem occurred'
    default_code = 'error'

    def __init__(self, title=None, detail=None, status_code=None, type_uri='about:blank', instance=None):
        self.title = title or 'Error'
        self.type_uri = type_uri
        self.instance = instance

        if status_code:
            self.status_code = status_code

        super().__init__(detail or self.default_detail)


def problem_exception_handler(exc, context):
    """
    Custom exception handler that returns Problem+JSON responses (RFC 7807).

    This provides standardized error responses across all API endpoints.
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(
            exc.message_dict if hasattr(exc, 'error_dict') else exc.messages)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        detail = get_error_detail(response.data)
        problem_data = {
            'type': getattr(exc, 'type_uri', 'about:blank'),
            'title': getattr(exc, 'title', None) or get_error_title(response.status_code),
            'status': response.status_code,
            'detail': detail,
            'error': detail or GENERIC_ERROR_MESSAGE,
        }

        request = context.get('request')
        if request:
            problem_data['instance'] = request.build_absolute_uri()

        # Add validation errors for 400 Bad Request
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            problem_data['invalid_params'] = format_validation_errors(
                response.data)

        log_error(exc, context, response.status_code)

        response.data = problem_data
        response['Content-Type'] = 'application/problem+json'

    return response


def get_error_title(status_code):
    """Get human-readable title for HTTP status code."""
    titles = {
        400: 'Bad Request',
        401: 'Unauthorized',
        403: 'Forbidden',
        404: 'Not Found',
        405: 'Method Not Allowed',
        409: 'Conflict',
        429: 'Too Many Requests',
        500: 'Internal Server Error',
        503: 'Service Unavailable',
    }
    return titles.get(status_code, 'Error')


def get_error_detail(data):
    """Extract human-readable detail from response data."""
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        elif 'error' in data:
            return str(data['error'])
        elif 'non_field_errors' in data:
            return '; '.join(str(e) for e in data['non_field_errors'])
        else:
            # Return first error message found
            for key, value in data.items():
                if isinstance(value, list) and value:
                    return f"{key}: {_first_message(value)}"
                elif isinstance(value, dict) and value:
                    return f"{key}: {get_error_detail(value)}"
                elif isinstance(value, str):
                    return f"{key}: {value}"
    elif isinstance(data, list) and data:
        return _first_message(data)

    return str(data)


def _first_message(errors):
    # Nested list serializers report one (possibly empty) dict per item
    for error in errors:
        if isinstance(error, dict):
            if error:
                return get_error_detail(error)
        else:
            return str(error)
    return str(errors)


def format_validation_errors(data):
    """Format validation errors for Problem+JSON invalid_params."""
    if not isinstance(data, dict):
        return []

    invalid_params = []
    for field, errors in data.items():
        if isinstance(errors, list):
            for error in errors:
                invalid_params.append({
                    'name': field,
                    'reason': get_error_detail(error) if isinstance(error, dict) else str(error)
                })
        else:
            invalid_params.append({
                'name': field,
                'reason': get_error_detail(errors) if isinstance(errors, dict) else str(errors)
            })

    return invalid_params


def log_error(exc, context, status_code):
    """Log error for monitoring and debugging."""
    request = context.get('request')
    user = getattr(request, 'user', None)

    logger.warning(
        f"API Error {status_code}: {exc}",
        extra={
            'status_code': status_code,
            'exception_type': type(exc).__name__,
            'user_id': str(user.id) if user and user.is_authenticated else None,
            'request_path': request.path if request else None,
            'request_method': request.method if request else None,
            'ip_address': get_client_ip(request) if request else None,
        },
        exc_info=status_code >= 500
    )
