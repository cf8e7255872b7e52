"""
Tests for the leadership admin screens.
"""

import pytest
from django.test import TestCase
from django.urls import reverse

from authentication.tests.factories import SuperUserFactory

from ..models import UnitLeader, ZonalLeader
from .factories import ZonalLeaderFactory


def person_form(**overrides):
    data = {
        'first_name': 'Nimal',
        'last_name': 'Jayasuriya',
        'date_of_birth': '1975-04-12',
        'address': '12 Church Road',
        'contact_number': '0771234567',
        'appointed_date': '2023-01-15',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestUnitLeaderAdmin(TestCase):

    def setUp(self):
        self.client.force_login(SuperUserFactory())
        self.url = reverse('admin:leadership_unitleader_add')

    def test_zone_without_leader_is_not_saved(self):
        ZonalLeaderFactory(zone_number='1')

        response = self.client.post(
            self.url, person_form(zonal_number='3', unit_number='2'))

        assert response.status_code == 200
        assert 'zonal_number' in response.context['adminform'].form.errors
        assert not UnitLeader.objects.exists()

    def test_zone_with_leader_assigns_it(self):
        leader = ZonalLeaderFactory(zone_number='3')

        response = self.client.post(
            self.url, person_form(zonal_number='3', unit_number='2'))

        assert response.status_code == 302
        unit_leader = UnitLeader.objects.get()
        assert unit_leader.zonal_leader == leader
        assert unit_leader.zonal_leader.zone_number == '3'


@pytest.mark.django_db
class TestZonalLeaderAdmin(TestCase):

    def setUp(self):
        self.client.force_login(SuperUserFactory())
        self.url = reverse('admin:leadership_zonalleader_add')
        # Read-only unit leader inline
        self.inline_management = {
            'unit_leaders-TOTAL_FORMS': '0',
            'unit_leaders-INITIAL_FORMS': '0',
            'unit_leaders-MIN_NUM_FORMS': '0',
            'unit_leaders-MAX_NUM_FORMS': '0',
        }

    def test_add_leader_for_free_zone(self):
        response = self.client.post(
            self.url, {**person_form(zone_number='5'), **self.inline_management})

        assert response.status_code == 302
        assert ZonalLeader.objects.get().zone_number == '5'

    def test_second_leader_for_occupied_zone_is_refused(self):
        ZonalLeaderFactory(zone_number='4')

        response = self.client.post(
            self.url, {**person_form(zone_number='4'), **self.inline_management})

        assert response.status_code == 200
        assert 'zone_number' in response.context['adminform'].form.errors
        assert ZonalLeader.objects.count() == 1
