"""
Tests for the baptism, burial and marriage endpoints.
"""

import datetime

import pytest
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from authentication.tests.factories import UserFactory

from ..models import Baptism, Burial, Marriage
from .factories import BaptismFactory, BurialFactory, MarriageFactory


class SacramentViewTestCase(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)


BAPTISM = {
    'child_name': 'Ayesha Fernando',
    'date_of_birth': '2024-01-10',
    'place_of_birth': 'Negombo',
    'date_of_baptism': '2024-03-03',
    'time_of_baptism': '10:30:00',
    'name_of_mother': 'Dilani Fernando',
    'name_of_father': 'Ruwan Fernando',
    'name_of_godfather': 'Sunil Perera',
    'name_of_godmother': 'Mala Perera',
    'current_address': '7 Harbour Road, Negombo',
    'contact_number': '0771112223',
    'are_parents_married': True,
    'is_father_catholic': False,
}


@pytest.mark.django_db
class TestBaptismViewSet(SacramentViewTestCase):

    def test_created_values_are_returned_unchanged(self):
        response = self.client.post('/api/baptisms', BAPTISM, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        record_id = response.data['id']

        detail = self.client.get(f'/api/baptisms/{record_id}')
        listed = self.client.get('/api/baptisms').data
        for field, value in BAPTISM.items():
            assert detail.data[field] == value
            assert listed[0][field] == value

    def test_baptism_before_birth_is_refused(self):
        data = dict(BAPTISM, date_of_baptism='2023-12-31')

        response = self.client.post('/api/baptisms', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['invalid_params'][0]['name'] == 'date_of_baptism'

    def test_missing_required_field(self):
        data = {k: v for k, v in BAPTISM.items() if k != 'child_name'}

        response = self.client.post('/api/baptisms', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'child_name: This field is required.'

    def test_search_is_case_insensitive_on_child_name(self):
        BaptismFactory(child_name='Thisuri Silva', name_of_father='Kamal')
        BaptismFactory(child_name='Kamal Jr', name_of_father='Nimal')

        response = self.client.get('/api/baptisms', {'search': 'KAMAL'})

        assert [row['child_name'] for row in response.data] == ['Kamal Jr']

    def test_edit_is_partial(self):
        baptism = BaptismFactory()

        response = self.client.patch(
            f'/api/baptisms/{baptism.id}',
            {'place_of_birth': 'Kandy'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        baptism.refresh_from_db()
        assert baptism.place_of_birth == 'Kandy'

    def test_delete(self):
        baptism = BaptismFactory()

        response = self.client.delete(f'/api/baptisms/{baptism.id}')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Baptism.objects.exists()

    def test_unknown_id(self):
        response = self.client.get('/api/baptisms/7f1f0a3c-0000-4000-8000-000000000000')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['status'] == 404


@pytest.mark.django_db
class TestBurialViewSet(SacramentViewTestCase):

    def test_create(self):
        data = {
            'name_of_deceased': 'Joseph Perera',
            'date_of_death': '2024-05-01',
            'date_of_birth': '1940-07-19',
            'burial_date': '2024-05-04',
            'baptized': True,
            'cause_of_death': 'Heart failure',
            'custodian': 'Anthony Perera',
        }

        response = self.client.post('/api/burials', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Burial.objects.get().cause_of_death == 'Heart failure'

    def test_burial_before_death_is_refused(self):
        burial = BurialFactory()

        response = self.client.patch(
            f'/api/burials/{burial.id}',
            {'burial_date': str(burial.date_of_death - datetime.timedelta(days=1))},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['invalid_params'][0]['name'] == 'burial_date'

    def test_search_matches_deceased_and_custodian(self):
        BurialFactory(name_of_deceased='Maria Costa', custodian='Peter Costa')
        BurialFactory(name_of_deceased='Anne Silva', custodian='Maria Silva')
        BurialFactory(name_of_deceased='Paul Dias', custodian='Ruth Dias')

        response = self.client.get('/api/burials', {'search': 'maria'})

        assert {row['name_of_deceased'] for row in response.data} == {'Maria Costa', 'Anne Silva'}


@pytest.mark.django_db
class TestMarriageViewSet(SacramentViewTestCase):

    def test_create(self):
        data = {
            'name_of_bride': 'Nadeesha Silva',
            'name_of_groom': 'Kamal Perera',
            'date_of_marriage': '2025-02-14',
            'time_of_mass': '09:00:00',
            'shortened_couple_name': 'Kamal & Nadeesha',
            'mass_type': 'Half',
            'need_church_choir': 'Yes',
            'use_church_decos': 'No',
        }

        response = self.client.post('/api/marriages/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['mass_type'] == 'Half'

    def test_invalid_mass_type(self):
        marriage = MarriageFactory()

        response = self.client.patch(
            f'/api/marriages/{marriage.id}',
            {'mass_type': 'Quarter'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['invalid_params'][0]['name'] == 'mass_type'

    def test_search_by_couple_name(self):
        MarriageFactory(shortened_couple_name='Kamal & Nadeesha')
        MarriageFactory(shortened_couple_name='Ruwan & Dilani')

        response = self.client.get('/api/marriages', {'search': 'nadeesha'})

        assert len(response.data) == 1
        assert Marriage.objects.count() == 2

    def test_filter_by_mass_type(self):
        MarriageFactory(mass_type='Full')
        MarriageFactory(mass_type='Half')

        response = self.client.get('/api/marriages', {'mass_type': 'Half'})

        assert [row['mass_type'] for row in response.data] == ['Half']
