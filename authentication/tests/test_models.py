"""
Tests for the email-login user model.
"""

import pytest
from django.contrib.auth import get_user_model

User = get_user_model()


@pytest.mark.django_db
class TestUserManager:

    def test_create_user_normalises_email(self):
        user = User.objects.create_user(
            email='Office@StMarys.Example',
            password='Vespers-Candle-42',
            church_name="St. Mary's",
            parish_name='Holy Family',
        )

        assert user.email == 'office@stmarys.example'
        assert user.check_password('Vespers-Candle-42')
        assert not user.is_staff

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='x')

    def test_create_superuser(self):
        user = User.objects.create_superuser(
            email='admin@parish.example',
            password='Vespers-Candle-42',
            church_name="St. Mary's",
            parish_name='Holy Family',
        )

        assert user.is_staff
        assert user.is_superuser

    def test_str_is_email(self):
        user = User(email='office@parish.example')
        assert str(user) == 'office@parish.example'
