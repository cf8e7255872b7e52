"""
Enumerations shared by several console record types.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ZoneNumber(models.TextChoices):
    ZONE_1 = '1', _('Zone 1')
    ZONE_2 = '2', _('Zone 2')
    ZONE_3 = '3', _('Zone 3')
    ZONE_4 = '4', _('Zone 4')
    ZONE_5 = '5', _('Zone 5')
    ZONE_6 = '6', _('Zone 6')
    ZONE_7 = '7', _('Zone 7')
    ZONE_8 = '8', _('Zone 8')


class UnitNumber(models.TextChoices):
    UNIT_1 = '1', _('Unit 1')
    UNIT_2 = '2', _('Unit 2')
    UNIT_3 = '3', _('Unit 3')
    UNIT_4 = '4', _('Unit 4')
    UNIT_5 = '5', _('Unit 5')
    UNIT_6 = '6', _('Unit 6')


class YesNo(models.TextChoices):
    YES = 'Yes', _('Yes')
    NO = 'No', _('No')
