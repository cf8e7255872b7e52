"""
Tests for the dashboard overview.
"""

import datetime
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from authentication.tests.factories import UserFactory
from events.tests.factories import EventFactory
from members.tests.factories import ChildFactory, MemberRegistrationFactory
from ministries.tests.factories import ChoirMemberFactory, SundaySchoolTeacherFactory
from sacraments.tests.factories import BaptismFactory

from ..services import get_recent_activity


@pytest.mark.django_db
class TestDashboardView(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory(church_name="St. Sebastian's Church")
        self.client.force_authenticate(user=self.user)

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)

        assert self.client.get('/api/dashboard').status_code == status.HTTP_401_UNAUTHORIZED

    def test_empty_console(self):
        response = self.client.get(reverse('dashboard:overview'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['welcome']['church_name'] == "St. Sebastian's Church"
        assert set(response.data['totals'].values()) == {0}
        assert response.data['monthly_donations'] == Decimal('0.00')
        assert response.data['upcoming_events'] == []
        assert response.data['recent_activity'] == []

    def test_totals_and_active_counts(self):
        registration = MemberRegistrationFactory(capable_donation_per_month=Decimal('1000.50'))
        MemberRegistrationFactory(capable_donation_per_month=None)
        MemberRegistrationFactory(capable_donation_per_month=Decimal('499.50'))
        ChildFactory.create_batch(3, registration=registration)
        ChoirMemberFactory(is_active_member=True)
        ChoirMemberFactory(is_active_member=False)
        SundaySchoolTeacherFactory(is_active=False)
        BaptismFactory()

        response = self.client.get('/api/dashboard/')
        totals = response.data['totals']

        assert totals['member_registrations'] == 3
        assert totals['children'] == 3
        assert totals['choir_members'] == 2
        assert totals['baptisms'] == 1
        assert response.data['active'] == {
            'choir_members': 1,
            'youth_members': 0,
            'sunday_school_teachers': 0,
        }
        assert response.data['monthly_donations'] == Decimal('1500.00')

    def test_upcoming_events_are_next_five(self):
        now = timezone.now()
        EventFactory(title='Yesterday', start_date=now - datetime.timedelta(days=1),
                     end_date=now - datetime.timedelta(hours=23))
        for day in range(7, 0, -1):
            EventFactory(title=f'Day {day}', start_date=now + datetime.timedelta(days=day),
                         end_date=now + datetime.timedelta(days=day, hours=1))

        response = self.client.get('/api/dashboard')

        assert [e['title'] for e in response.data['upcoming_events']] == [
            'Day 1', 'Day 2', 'Day 3', 'Day 4', 'Day 5'
        ]

    def test_recent_activity_merges_record_types(self):
        BaptismFactory(child_name='Ayesha')
        ChoirMemberFactory(first_name='Priyanka', last_name='Silva')
        MemberRegistrationFactory(name_of_father='Ruwan', name_of_mother='Dilani')

        activity = self.client.get('/api/dashboard').data['recent_activity']

        assert [a['name'] for a in activity] == ['Ruwan & Dilani', 'Priyanka Silva', 'Ayesha']
        assert activity[0]['title'] == 'New member registered'


@pytest.mark.django_db
def test_recent_activity_is_limited():
    BaptismFactory.create_batch(4)
    ChoirMemberFactory.create_batch(4)

    assert len(get_recent_activity(limit=5)) == 5
