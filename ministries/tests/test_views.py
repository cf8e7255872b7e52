"""
Tests for the ministry roster endpoints.
"""

import pytest
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from authentication.tests.factories import UserFactory

from ..models import ChoirMember, ParishCommitteeMember, SundaySchoolTeacher, YouthMember
from .factories import (
    ChoirMemberFactory,
    ParishCommitteeMemberFactory,
    SundaySchoolTeacherFactory,
    YouthMemberFactory,
)


class MinistryViewTestCase(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)


@pytest.mark.django_db
class TestChoirMemberViewSet(MinistryViewTestCase):

    def test_create_keeps_instrument_order(self):
        data = {
            'first_name': 'Shanika',
            'last_name': 'Mendis',
            'date_of_birth': '1998-09-21',
            'address': '3 Lake View',
            'contact_number': '0723334445',
            'joined_date': '2020-01-05',
            'voice_part': 'Alto',
            'is_active_member': True,
            'instruments_played': ['Violin', '', 'Guitar'],
            'choir_type': 'English',
        }

        response = self.client.post('/api/choiristors', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['instruments_played'] == ['Violin', 'Guitar']
        assert ChoirMember.objects.get().instruments_played == ['Violin', 'Guitar']

    def test_instruments_default_to_empty(self):
        data = {
            'first_name': 'Shanika',
            'last_name': 'Mendis',
            'date_of_birth': '1998-09-21',
            'address': '3 Lake View',
            'contact_number': '0723334445',
            'joined_date': '2020-01-05',
            'voice_part': 'Alto',
            'choir_type': 'Junior',
        }

        response = self.client.post('/api/choiristors', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['instruments_played'] == []
        assert response.data['is_active_member'] is True

    def test_invalid_voice_part(self):
        member = ChoirMemberFactory()

        response = self.client.patch(
            f'/api/choiristors/{member.id}', {'voice_part': 'Baritone'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_search_by_name(self):
        ChoirMemberFactory(first_name='Priyanka', last_name='Silva')
        ChoirMemberFactory(first_name='Dinesh', last_name='Priyankara')
        ChoirMemberFactory(first_name='Ruwan', last_name='Dias')

        response = self.client.get('/api/choiristors', {'search': 'PRIYANK'})

        assert len(response.data) == 2

    def test_filter_by_choir_type(self):
        ChoirMemberFactory(choir_type='Junior')
        ChoirMemberFactory(choir_type='Senior')

        response = self.client.get('/api/choiristors', {'choir_type': 'Junior'})

        assert [row['choir_type'] for row in response.data] == ['Junior']


@pytest.mark.django_db
class TestYouthMemberViewSet(MinistryViewTestCase):

    def test_create_without_position(self):
        data = {
            'first_name': 'Kasun',
            'last_name': 'Rajapaksha',
            'date_of_birth': '2005-03-11',
            'joined_date': '2021-06-01',
            'address': '9 School Lane',
            'contact_number': '0754445556',
            'is_active_member': False,
        }

        response = self.client.post('/api/youth-association', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['position'] == ''
        assert YouthMember.objects.active().count() == 0

    def test_edit_and_delete(self):
        member = YouthMemberFactory()

        patched = self.client.patch(
            f'/api/youth-association/{member.id}', {'position': 'President'}, format='json')
        deleted = self.client.delete(f'/api/youth-association/{member.id}')

        assert patched.data['position'] == 'President'
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert not YouthMember.objects.exists()


@pytest.mark.django_db
class TestSundaySchoolTeacherViewSet(MinistryViewTestCase):

    def test_is_active_defaults_to_true(self):
        data = {
            'first_name': 'Anoma',
            'last_name': 'Wijesinghe',
            'date_of_birth': '1980-12-01',
            'appointed_date': '2015-01-10',
            'address': '21 Temple Road',
            'contact_number': '0765556667',
            'class_name': 'Grade 4',
        }

        response = self.client.post('/api/sunday-school-teachers', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_active'] is True
        assert response.data['remarks'] == ''

    def test_search_ignores_class_name(self):
        SundaySchoolTeacherFactory(first_name='Grace', class_name='Grade 1')
        SundaySchoolTeacherFactory(first_name='Mark', class_name='Grace Class')

        response = self.client.get('/api/sunday-school-teachers', {'search': 'grace'})

        assert [row['first_name'] for row in response.data] == ['Grace']
        assert SundaySchoolTeacher.objects.count() == 2


@pytest.mark.django_db
class TestParishCommitteeViewSet(MinistryViewTestCase):

    def test_create(self):
        data = {
            'first_name': 'Lalith',
            'last_name': 'Gunawardena',
            'address': '5 Market Street',
            'zonal_number': '8',
            'unit_number': '6',
            'joined_date': '2019-04-01',
            'representing_committee': 'Liturgy Committee',
        }

        response = self.client.post('/api/parish-committee', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['phone_number'] == ''
        assert ParishCommitteeMember.objects.get().zonal_number == '8'

    def test_zone_out_of_range(self):
        member = ParishCommitteeMemberFactory()

        response = self.client.patch(
            f'/api/parish-committee/{member.id}', {'zonal_number': '9'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['invalid_params'][0]['name'] == 'zonal_number'

    def test_unit_out_of_range(self):
        member = ParishCommitteeMemberFactory()

        response = self.client.patch(
            f'/api/parish-committee/{member.id}', {'unit_number': '7'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
