"""
Leadership models: zonal leaders and the unit leaders reporting to them.
"""

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.choices import ZoneNumber
from core.models import PersonRecord

from .resolver import resolve_zonal_leader


class ZonalLeaderQuerySet(models.QuerySet):

    def for_zone(self, zone_number):
        """Resolve the leader of ``zone_number`` (first match in list order)."""
        return resolve_zonal_leader(zone_number, self)


class ZonalLeader(PersonRecord):
    """Leader of a zone; unit leaders in the zone report to them."""

    date_of_birth = models.DateField(_('date of birth'))
    address = models.TextField(_('address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    appointed_date = models.DateField(_('appointed date'))
    zone_number = models.CharField(
        _('zone number'),
        max_length=10,
        db_index=True,
        help_text=_('Zone this leader is responsible for (usually 1-8)')
    )

    objects = ZonalLeaderQuerySet.as_manager()

    class Meta:
        verbose_name = _('Zonal Leader')
        verbose_name_plural = _('Zonal Leaders')
        # Resolution is first-match in this order
        ordering = ['zone_number', 'appointed_date', 'created_at']

    def clean(self):
        super().clean()
        self.zone_number = (self.zone_number or '').strip()

        occupied = ZonalLeader.objects.filter(
            zone_number=self.zone_number).exclude(pk=self.pk)
        if self.zone_number and occupied.exists():
            raise ValidationError({
                'zone_number': _('Zone %(zone)s already has a zonal leader.') % {
                    'zone': self.zone_number}
            })

        if self.pk and self.unit_leaders.exclude(zonal_number=self.zone_number).exists():
            raise ValidationError({
                'zone_number': _('The zone cannot change while unit leaders report to this leader.')
            })


class UnitLeader(PersonRecord):
    """Leader of a unit within a zone."""

    date_of_birth = models.DateField(_('date of birth'))
    address = models.TextField(_('address'))
    contact_number = models.CharField(_('contact number'), max_length=30)
    appointed_date = models.DateField(_('appointed date'))
    zonal_number = models.CharField(
        _('zonal number'),
        max_length=2,
        choices=ZoneNumber.choices,
    )
    unit_number = models.CharField(_('unit number'), max_length=10)
    zonal_leader = models.ForeignKey(
        ZonalLeader,
        on_delete=models.PROTECT,
        related_name='unit_leaders',
        verbose_name=_('zonal leader'),
        help_text=_('Resolved from the zonal number')
    )

    class Meta(PersonRecord.Meta):
        verbose_name = _('Unit Leader')
        verbose_name_plural = _('Unit Leaders')
        indexes = [
            models.Index(fields=['zonal_number', 'unit_number'], name='unit_leader_zone_unit_idx'),
        ]
