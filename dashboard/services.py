"""
Dashboard aggregates.

Everything here is read-only; the figures are recomputed on every request.
"""

from django.conf import settings
from django.db.models import Sum
from django.utils import timezone
import structlog

from events.models import Event
from leadership.models import UnitLeader, ZonalLeader
from members.models import Child, MemberRegistration
from ministries.models import ChoirMember, ParishCommitteeMember, SundaySchoolTeacher, YouthMember
from sacraments.models import Baptism, Burial, Marriage

logger = structlog.get_logger(__name__)


# (totals key, model, activity title, display name)
RECORD_SOURCES = [
    ('baptisms', Baptism, 'Baptism recorded', lambda r: r.child_name),
    ('burials', Burial, 'Burial recorded', lambda r: r.name_of_deceased),
    ('marriages', Marriage, 'Marriage recorded', str),
    ('choir_members', ChoirMember, 'Choir member added', lambda r: r.full_name),
    ('youth_members', YouthMember, 'Youth member added', lambda r: r.full_name),
    ('sunday_school_teachers', SundaySchoolTeacher, 'Sunday school teacher added', lambda r: r.full_name),
    ('parish_committee_members', ParishCommitteeMember, 'Committee member added', lambda r: r.full_name),
    ('zonal_leaders', ZonalLeader, 'Zonal leader appointed', lambda r: r.full_name),
    ('unit_leaders', UnitLeader, 'Unit leader appointed', lambda r: r.full_name),
    ('member_registrations', MemberRegistration, 'New member registered', str),
    ('events', Event, 'Event created', lambda r: r.title),
]


def get_totals():
    totals = {key: model.objects.count() for key, model, _, _ in RECORD_SOURCES}
    totals['children'] = Child.objects.count()
    return totals


def get_active_counts():
    return {
        'choir_members': ChoirMember.objects.active().count(),
        'youth_members': YouthMember.objects.active().count(),
        'sunday_school_teachers': SundaySchoolTeacher.objects.active().count(),
    }


def get_monthly_donations():
    total = MemberRegistration.objects.aggregate(
        total=Sum('capable_donation_per_month'))['total']
    return total or 0


def get_upcoming_events(limit=None, now=None):
    limit = limit or settings.DASHBOARD_UPCOMING_EVENTS
    return list(Event.objects.upcoming(now=now)[:limit])


def get_recent_activity(limit=None):
    """
    The most recently created records of any type, newest first.

    Takes the newest ``limit`` rows of each type, then merges.
    """
    limit = limit or settings.DASHBOARD_RECENT_ACTIVITY
    activity = []
    for key, model, title, name in RECORD_SOURCES:
        for record in model.objects.order_by('-created_at')[:limit]:
            activity.append({
                'type': key,
                'id': str(record.pk),
                'title': title,
                'name': name(record),
                'created_at': record.created_at,
            })
    activity.sort(key=lambda item: item['created_at'], reverse=True)
    return activity[:limit]


def build_dashboard(user, now=None):
    now = now or timezone.now()
    dashboard = {
        'welcome': {
            'church_name': user.church_name,
            'parish_name': user.parish_name,
        },
        'totals': get_totals(),
        'active': get_active_counts(),
        'monthly_donations': get_monthly_donations(),
        'upcoming_events': get_upcoming_events(now=now),
        'recent_activity': get_recent_activity(),
    }
    logger.debug("Dashboard built", user_id=str(user.id))
    return dashboard
