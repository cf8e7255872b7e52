"""
Structured logging utilities with JSON formatting and sensitive data filtering.

Provides:
- Correlation ID tracking across requests
- PII and sensitive data filtering (parishioner phone numbers, emails, tokens)
- Structured JSON output for log aggregation
- Business and security event helpers used by the record viewsets
"""

import json
import logging
import re
import uuid
import traceback
from typing import Dict, Any, Optional
from datetime import datetime
from django.http import HttpRequest


# LogRecord attributes that are never user data
_RESERVED_ATTRS = frozenset({
    'name', 'msg', 'args', 'levelno', 'levelname', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'exc_info', 'exc_text',
    'stack_info', 'taskName', 'message', 'asctime',
})


class SensitiveDataFilter(logging.Filter):
    """
    Filter to remove sensitive data from log records.

    Member registrations and leader records carry contact numbers and
    addresses; these must not leak into log files.
    """

    SENSITIVE_PATTERNS = [
        # Email addresses
        (re.compile(
            r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b'), '[EMAIL]'),
        # Phone numbers: (123) 456-7890, 123-456-7890, 123.456.7890, +94 77 123 4567
        (re.compile(r'(\+\d{1,3}[\s-]?)?\b(\(\d{3}\)\s*|\d{2,3}[-.\s])\d{3}[-.\s]?\d{4}\b'), '[PHONE]'),
        # Passwords and tokens in key=value form
        (re.compile(
            r'(password|token|secret|key)\s*[:=]\s*[\'"][^\'"\s]+[\'"]', re.IGNORECASE), r'\1=[FILTERED]'),
        # JWT tokens
        (re.compile(
            r'eyJ[A-Za-z0-9-_=]+\.[A-Za-z0-9-_=]+\.?[A-Za-z0-9-_.+/=]*'), '[JWT_TOKEN]'),
    ]

    # Fields that are masked entirely
    SENSITIVE_FIELDS = {
        'password', 'token', 'refresh', 'secret', 'key', 'authorization',
        'access_token', 'refresh_token', 'csrf_token', 'session_key',
        'contact_number', 'contact_no', 'phone_number',
    }

    def filter(self, record: logging.LogRecord) -> bool:
        """Scrub the record in place; always lets it through."""
        if isinstance(record.msg, str):
            record.msg = self._filter_string(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = self._filter_dict(record.args)
            else:
                record.args = tuple(self._filter_value(arg) for arg in record.args)

        for attr_name, attr_value in list(record.__dict__.items()):
            if attr_name in _RESERVED_ATTRS or attr_name.startswith('_'):
                continue
            if attr_name.lower() in self.SENSITIVE_FIELDS:
                setattr(record, attr_name, '[FILTERED]')
            else:
                setattr(record, attr_name, self._filter_value(attr_value))

        return True

    def _filter_value(self, value):
        if isinstance(value, str):
            return self._filter_string(value)
        if isinstance(value, dict):
            return self._filter_dict(value)
        if isinstance(value, list):
            return [self._filter_value(item) for item in value]
        return value

    def _filter_string(self, text: str) -> str:
        """Filter sensitive patterns from string."""
        if not text:
            return text

        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def _filter_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Filter sensitive fields from dictionary."""
        filtered_data = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in self.SENSITIVE_FIELDS:
                filtered_data[key] = '[FILTERED]'
            else:
                filtered_data[key] = self._filter_value(value)
        return filtered_data


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON for better parsing by log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Extra attributes (correlation_id, user_id, request_path, ...)
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith('_') or key in log_entry:
                continue
            log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ContextualLogger:
    """
    Logger with context awareness for requests, users, and correlation IDs.

    Context bound at construction is merged into every record's extras.
    """

    def __init__(self, name: str, **context):
        self.logger = logging.getLogger(name)
        self._local_context = context

    def _log_with_context(self, level: int, message: str, *args, **kwargs):
        extra = dict(kwargs.get('extra') or {})
        extra.update(self._local_context)
        kwargs['extra'] = extra

        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log_with_context(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log_with_context(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log_with_context(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log_with_context(logging.ERROR, message, *args, **kwargs)


def get_contextual_logger(name: str, **context) -> ContextualLogger:
    """Get a contextual logger instance bound to ``context``."""
    return ContextualLogger(name, **context)


def setup_request_logging(request: HttpRequest) -> str:
    """
    Set up logging context for a request.

    Returns the correlation ID for this request. An incoming
    ``X-Correlation-ID`` header is reused so client and server logs line up.
    """
    correlation_id = request.META.get(
        'HTTP_X_CORRELATION_ID') or str(uuid.uuid4())
    request.correlation_id = correlation_id
    return correlation_id


def log_security_event(event_type: str, request: HttpRequest, details: Dict[str, Any] = None, user=None):
    """
    Log a security-related event.

    Args:
        event_type: Type of security event (login_failed, logout, etc.)
        request: HTTP request object
        details: Additional details about the event
        user: User object if available
    """
    logger = get_contextual_logger('security')

    log_data = {
        'event_type': event_type,
        'ip_address': get_client_ip(request),
        'user_agent': request.META.get('HTTP_USER_AGENT', ''),
        'request_path': request.path,
        'correlation_id': getattr(request, 'correlation_id', None),
    }

    if user:
        log_data['user_id'] = str(user.id)

    if details:
        log_data['details'] = details

    logger.info(f"Security event: {event_type}", extra=log_data)


def log_business_event(event_type: str, user=None, details: Dict[str, Any] = None):
    """
    Log record lifecycle events (baptism_created, unit_leader_updated, ...).

    Args:
        event_type: Type of business event
        user: User associated with the event
        details: Additional details about the event
    """
    logger = get_contextual_logger('business', business_event=True)

    log_data = {'event_type': event_type}

    if user is not None and getattr(user, 'is_authenticated', False):
        log_data['user_id'] = str(user.id)

    if details:
        # LogRecord refuses extras that shadow its own attributes
        log_data.update({
            (f'detail_{key}' if key in _RESERVED_ATTRS else key): value
            for key, value in details.items()
        })

    logger.info(f"Business event: {event_type}", extra=log_data)


def get_client_ip(request: HttpRequest) -> Optional[str]:
    """Get client IP address from request, considering proxies."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '')
