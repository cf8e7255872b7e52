"""
Calendar window filter for events.
"""

import django_filters

from .models import Event


class EventFilter(django_filters.FilterSet):
    """
    Filter events for a calendar view.

    Supports filtering by:
    - start (datetime) - events ending on or after this moment
    - end (datetime) - events starting on or before this moment
    - category
    """

    start = django_filters.IsoDateTimeFilter(method='filter_window', label='Window start')
    end = django_filters.IsoDateTimeFilter(method='filter_window', label='Window end')

    class Meta:
        model = Event
        fields = ['category', 'all_day']

    def filter_window(self, queryset, name, value):
        return queryset.overlapping(**{name: value})
