"""
Parish calendar events.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.models import ConsoleRecord


class EventCategory(models.TextChoices):
    MASS = 'mass', _('Mass')
    MEETING = 'meeting', _('Meeting')
    HOLIDAY = 'holiday', _('Special Event')
    OTHER = 'other', _('Other Service')


CATEGORY_COLORS = {
    EventCategory.MASS: '#3b82f6',
    EventCategory.MEETING: '#ec4899',
    EventCategory.HOLIDAY: '#f59e0b',
    EventCategory.OTHER: '#10b981',
}
DEFAULT_COLOR = CATEGORY_COLORS[EventCategory.OTHER]


class Recurrence(models.TextChoices):
    DAILY = 'daily', _('Daily')
    WEEKLY = 'weekly', _('Weekly')
    MONTHLY = 'monthly', _('Monthly')
    YEARLY = 'yearly', _('Yearly')


class EventQuerySet(models.QuerySet):

    def upcoming(self, now=None):
        return self.filter(start_date__gte=now or timezone.now()).order_by('start_date')

    def overlapping(self, start=None, end=None):
        """Events touching the window [start, end]; either bound may be open."""
        queryset = self
        if start is not None:
            queryset = queryset.filter(end_date__gte=start)
        if end is not None:
            queryset = queryset.filter(start_date__lte=end)
        return queryset


class Event(ConsoleRecord):
    """A scheduled Mass, meeting, feast day or other parish service."""

    title = models.CharField(_('title'), max_length=200)
    description = models.TextField(_('description'), blank=True)
    start_date = models.DateTimeField(_('start'), db_index=True)
    end_date = models.DateTimeField(_('end'))
    location = models.CharField(_('location'), max_length=200, blank=True)
    category = models.CharField(
        _('category'),
        max_length=20,
        choices=EventCategory.choices,
        default=EventCategory.OTHER
    )
    color = models.CharField(_('colour'), max_length=7, default=DEFAULT_COLOR)
    all_day = models.BooleanField(_('all day'), default=False)
    recurrence = models.CharField(
        _('recurrence'),
        max_length=10,
        choices=Recurrence.choices,
        blank=True,
        help_text=_('Empty for a one-off event')
    )
    reminder = models.BooleanField(_('reminder'), default=False)
    reminder_time = models.DateTimeField(_('reminder time'), null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='events'
    )

    objects = EventQuerySet.as_manager()

    class Meta(ConsoleRecord.Meta):
        verbose_name = _('Event')
        verbose_name_plural = _('Events')

    def __str__(self):
        return self.title

    @property
    def recurring(self):
        return bool(self.recurrence)
