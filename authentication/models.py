"""
Authentication models for the parish console.

Console accounts belong to a church and parish and sign in with their email
address.
"""

import uuid
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _
import structlog

logger = structlog.get_logger(__name__)


class UserManager(BaseUserManager):
    """Manager for email-login users."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("The email address must be set")
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get('is_superuser') is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        user = self._create_user(email, password, **extra_fields)
        logger.info("Superuser created", user_id=str(user.id))
        return user


class User(AbstractUser):
    """
    Console account.

    Uses email as the login identifier; the username column is dropped.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    email = models.EmailField(
        _('email address'),
        unique=True,
        help_text="Required. Used to sign in to the console."
    )
    church_name = models.CharField(
        _('church name'),
        max_length=200,
        help_text="Church this account administers."
    )
    parish_name = models.CharField(
        _('parish name'),
        max_length=200,
        help_text="Parish the church belongs to."
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['church_name', 'parish_name']

    objects = UserManager()

    class Meta:
        db_table = 'auth_user'
        ordering = ['email']

    def __str__(self):
        return self.email
