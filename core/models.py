"""
Shared model bases for the parish console record types.
"""

import uuid

from django.db import models


class ConsoleRecord(models.Model):
    """
    Abstract base for every console record.

    Gives each record an opaque UUID identifier and server-assigned
    creation/update timestamps.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['-created_at']


class PersonRecord(ConsoleRecord):
    """Abstract base for records describing a single named person."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)

    class Meta(ConsoleRecord.Meta):
        abstract = True

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()
