"""
Tests for the health check and request logging middleware.
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestHealthCheck:

    def test_healthy(self):
        response = APIClient().get('/api/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'healthy'
        assert response.data['checks']['database']['status'] == 'healthy'

    def test_database_down(self):
        with patch('core.views.connections') as connections:
            connections.__getitem__.return_value.cursor.side_effect = DatabaseError('gone')
            response = APIClient().get('/api/health/')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['status'] == 'unhealthy'


@pytest.mark.django_db
def test_correlation_id_is_echoed():
    response = APIClient().get('/api/health/', HTTP_X_CORRELATION_ID='abc-123')

    assert response['X-Correlation-ID'] == 'abc-123'


@pytest.mark.django_db
def test_correlation_id_is_generated():
    response = APIClient().get('/api/health/')

    assert response['X-Correlation-ID']
