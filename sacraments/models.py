"""
Sacramental registers: baptisms, burials and marriages.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.choices import YesNo
from core.models import ConsoleRecord


class Baptism(ConsoleRecord):
    """A child's baptism entry in the parish register."""

    child_name = models.CharField(_('child name'), max_length=200, db_index=True)
    date_of_birth = models.DateField(_('date of birth'))
    place_of_birth = models.CharField(_('place of birth'), max_length=200)
    date_of_baptism = models.DateField(_('date of baptism'))
    time_of_baptism = models.TimeField(_('time of baptism'))
    name_of_mother = models.CharField(_('name of mother'), max_length=200)
    name_of_father = models.CharField(_('name of father'), max_length=200)
    name_of_godfather = models.CharField(_('name of godfather'), max_length=200)
    name_of_godmother = models.CharField(_('name of godmother'), max_length=200)
    current_address = models.TextField(_('current address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    are_parents_married = models.BooleanField(_('parents married'), null=True, blank=True)
    is_father_catholic = models.BooleanField(_('father is catholic'), null=True, blank=True)

    class Meta(ConsoleRecord.Meta):
        verbose_name = _('Baptism')
        verbose_name_plural = _('Baptisms')

    def __str__(self):
        return f"{self.child_name} ({self.date_of_baptism})"


class Burial(ConsoleRecord):

    name_of_deceased = models.CharField(_('name of deceased'), max_length=200, db_index=True)
    date_of_death = models.DateField(_('date of death'))
    date_of_birth = models.DateField(_('date of birth'))
    burial_date = models.DateField(_('burial date'))
    baptized = models.BooleanField(_('baptized'), default=False)
    cause_of_death = models.CharField(_('cause of death'), max_length=255)
    custodian = models.CharField(
        _('custodian'),
        max_length=200,
        help_text=_('Family member or guardian arranging the burial')
    )

    class Meta(ConsoleRecord.Meta):
        verbose_name = _('Burial')
        verbose_name_plural = _('Burials')

    def __str__(self):
        return self.name_of_deceased


class Marriage(ConsoleRecord):

    class MassType(models.TextChoices):
        FULL = 'Full', _('Full')
        HALF = 'Half', _('Half')

    name_of_bride = models.CharField(_('name of bride'), max_length=200)
    name_of_groom = models.CharField(_('name of groom'), max_length=200)
    date_of_marriage = models.DateField(_('date of marriage'))
    time_of_mass = models.TimeField(_('time of mass'))
    shortened_couple_name = models.CharField(
        _('shortened couple name'),
        max_length=200,
        help_text=_('How the couple is announced, e.g. "Kamal & Nadeesha"')
    )
    mass_type = models.CharField(_('mass type'), max_length=10, choices=MassType.choices)
    need_church_choir = models.CharField(_('need church choir'), max_length=3, choices=YesNo.choices)
    use_church_decos = models.CharField(_('use church decorations'), max_length=3, choices=YesNo.choices)

    class Meta(ConsoleRecord.Meta):
        verbose_name = _('Marriage')
        verbose_name_plural = _('Marriages')

    def __str__(self):
        return self.shortened_couple_name or f"{self.name_of_bride} & {self.name_of_groom}"
