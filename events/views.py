"""
Event scheduler endpoints.
"""

from core.api_tags import APITags, record_viewset_schema
from core.viewsets import ConsoleRecordViewSet

from .filters import EventFilter
from .models import Event
from .serializers import EventSerializer


@record_viewset_schema(APITags.EVENTS, 'event')
class EventViewSet(ConsoleRecordViewSet):
    """
    Calendar events. ``?start=`` and ``?end=`` select the events that overlap
    a window, which is how the calendar asks for one month at a time.
    """

    queryset = Event.objects.select_related('created_by')
    serializer_class = EventSerializer
    filterset_class = EventFilter
    record_type = 'event'
    search_fields = ['title', 'location', 'description']
    ordering_fields = ['start_date', 'end_date', 'created_at']

    def perform_create(self, serializer):
        instance = serializer.save(created_by=self.request.user)
        self._log_event('created', instance)
