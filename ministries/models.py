"""
Ministry rosters: choir, youth association, Sunday school and the parish
committee.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.choices import UnitNumber, ZoneNumber
from core.models import PersonRecord


class ActiveQuerySet(models.QuerySet):

    def active(self):
        return self.filter(**{self.model.ACTIVE_FIELD: True})


class ChoirMember(PersonRecord):
    """A member of one of the parish choirs."""

    ACTIVE_FIELD = 'is_active_member'

    class VoicePart(models.TextChoices):
        SOPRANO = 'Soprano', _('Soprano')
        ALTO = 'Alto', _('Alto')
        TENOR = 'Tenor', _('Tenor')
        BASS = 'Bass', _('Bass')

    class ChoirType(models.TextChoices):
        SENIOR = 'Senior', _('Senior')
        JUNIOR = 'Junior', _('Junior')
        ENGLISH = 'English', _('English')

    date_of_birth = models.DateField(_('date of birth'))
    address = models.TextField(_('address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    joined_date = models.DateField(_('joined date'))
    voice_part = models.CharField(_('voice part'), max_length=10, choices=VoicePart.choices)
    is_active_member = models.BooleanField(_('active member'), default=True)
    instruments_played = models.JSONField(
        _('instruments played'),
        default=list,
        blank=True,
        help_text=_('Instrument names, in the order entered')
    )
    choir_type = models.CharField(_('choir'), max_length=10, choices=ChoirType.choices)

    objects = ActiveQuerySet.as_manager()

    class Meta(PersonRecord.Meta):
        verbose_name = _('Choir Member')
        verbose_name_plural = _('Choir Members')


class YouthMember(PersonRecord):

    ACTIVE_FIELD = 'is_active_member'

    date_of_birth = models.DateField(_('date of birth'))
    joined_date = models.DateField(_('joined date'))
    address = models.TextField(_('address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    position = models.CharField(_('position'), max_length=100, blank=True)
    is_active_member = models.BooleanField(_('active member'), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta(PersonRecord.Meta):
        verbose_name = _('Youth Association Member')
        verbose_name_plural = _('Youth Association Members')


class SundaySchoolTeacher(PersonRecord):

    ACTIVE_FIELD = 'is_active'

    date_of_birth = models.DateField(_('date of birth'))
    appointed_date = models.DateField(_('appointed date'))
    address = models.TextField(_('address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    class_name = models.CharField(_('class'), max_length=100)
    remarks = models.TextField(_('remarks'), blank=True)
    is_active = models.BooleanField(_('active'), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta(PersonRecord.Meta):
        verbose_name = _('Sunday School Teacher')
        verbose_name_plural = _('Sunday School Teachers')


class ParishCommitteeMember(PersonRecord):

    address = models.TextField(_('address'))
    phone_number = models.CharField(_('phone number'), max_length=30, blank=True)
    zonal_number = models.CharField(_('zonal number'), max_length=2, choices=ZoneNumber.choices)
    unit_number = models.CharField(_('unit number'), max_length=2, choices=UnitNumber.choices)
    position = models.CharField(_('position'), max_length=100, blank=True)
    joined_date = models.DateField(_('joined date'))
    representing_committee = models.CharField(_('representing committee'), max_length=200)

    class Meta(PersonRecord.Meta):
        verbose_name = _('Parish Committee Member')
        verbose_name_plural = _('Parish Committee Members')
