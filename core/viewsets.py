"""
Base viewset shared by the console record types.
"""

from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
import structlog

from .exceptions import ProblemDetailException
from .logging.structured import log_business_event

logger = structlog.get_logger(__name__)


class ConsoleRecordViewSet(viewsets.ModelViewSet):
    """
    Add/list/view/edit/delete for one record type.

    Edits are partial (PATCH), matching the console forms. Subclasses set
    ``record_type`` (used in business event names) and ``search_fields``.
    """

    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
    record_type = 'record'
    protected_message = 'This record is still referenced by other records.'

    def perform_create(self, serializer):
        instance = serializer.save()
        self._log_event('created', instance)

    def perform_update(self, serializer):
        instance = serializer.save()
        self._log_event('updated', instance)

    def perform_destroy(self, instance):
        record_id = instance.pk
        try:
            instance.delete()
        except ProtectedError:
            logger.info(
                "Delete refused, record still referenced",
                record_type=self.record_type,
                record_id=str(record_id)
            )
            raise ProblemDetailException(
                title='Conflict',
                detail=self.protected_message,
                status_code=status.HTTP_409_CONFLICT
            )
        log_business_event(
            f"{self.record_type}_deleted",
            user=self.request.user,
            details={'record_id': str(record_id)}
        )

    def _log_event(self, action, instance):
        log_business_event(
            f"{self.record_type}_{action}",
            user=self.request.user,
            details={'record_id': str(instance.pk)}
        )
        logger.debug(
            "Console record saved",
            record_type=self.record_type,
            record_id=str(instance.pk),
            action=action
        )
