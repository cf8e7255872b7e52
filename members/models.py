"""
Family member registrations and their children.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import ConsoleRecord


class MemberRegistration(ConsoleRecord):
    """
    A registered parish family: both parents, their marriage, and children.
    """

    church = models.CharField(_('church'), max_length=200)

    name_of_father = models.CharField(_('name of father'), max_length=200)
    occupation_of_father = models.CharField(_('occupation of father'), max_length=200, blank=True)
    date_of_birth_of_father = models.DateField(_('father date of birth'), null=True, blank=True)
    baptised_date_of_father = models.DateField(_('father baptised date'), null=True, blank=True)
    baptised_church = models.CharField(_('father baptised church'), max_length=200, blank=True)

    name_of_mother = models.CharField(_('name of mother'), max_length=200)
    occupation_of_mother = models.CharField(_('occupation of mother'), max_length=200, blank=True)
    date_of_birth_of_mother = models.DateField(_('mother date of birth'), null=True, blank=True)
    baptised_date_of_mother = models.DateField(_('mother baptised date'), null=True, blank=True)

    address = models.TextField(_('address'))
    contact_no = models.CharField(_('contact number'), max_length=30)

    married_date = models.DateField(_('married date'), null=True, blank=True)
    married_church = models.CharField(_('married church'), max_length=200, blank=True)

    capable_donation_per_month = models.DecimalField(
        _('capable donation per month'),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )

    class Meta(ConsoleRecord.Meta):
        verbose_name = _('Member Registration')
        verbose_name_plural = _('Member Registrations')

    def __str__(self):
        return f"{self.name_of_father} & {self.name_of_mother}"


class Child(models.Model):
    """A child listed on a registration; kept in the order entered."""

    registration = models.ForeignKey(
        MemberRegistration,
        on_delete=models.CASCADE,
        related_name='children'
    )
    position = models.PositiveIntegerField(default=0)
    name_of_child = models.CharField(_('name of child'), max_length=200)
    date_of_birth_child = models.DateField(_('date of birth'))
    baptised_date_of_child = models.DateField(_('baptised date'), null=True, blank=True)
    baptised_church_of_child = models.CharField(_('baptised church'), max_length=200, blank=True)

    class Meta:
        verbose_name = _('Child')
        verbose_name_plural = _('Children')
        ordering = ['registration', 'position', 'id']

    def __str__(self):
        return self.name_of_child
