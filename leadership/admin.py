"""
Admin screens for zonal and unit leaders.
"""

from django import forms
from django.contrib import admin

from .models import UnitLeader, ZonalLeader
from .resolver import LeaderAssignment


class UnitLeaderInline(admin.TabularInline):
    model = UnitLeader
    extra = 0
    fields = ('first_name', 'last_name', 'unit_number', 'contact_number')
    readonly_fields = fields
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(ZonalLeader)
class ZonalLeaderAdmin(admin.ModelAdmin):

    list_display = ('full_name', 'zone_number', 'contact_number', 'appointed_date', 'created_at')
    list_filter = ('zone_number',)
    search_fields = ('first_name', 'last_name', 'zone_number')
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [UnitLeaderInline]


class UnitLeaderAdminForm(forms.ModelForm):
    """
    Resolves the zonal leader from the selected zone.

    The form will not save while the zone has no zonal leader.
    """

    class Meta:
        model = UnitLeader
        exclude = ('zonal_leader',)

    def clean(self):
        cleaned_data = super().clean()
        zone = cleaned_data.get('zonal_number')
        if zone:
            assignment = LeaderAssignment.for_zone(zone, ZonalLeader.objects.all())
            if assignment.can_submit:
                self.instance.zonal_leader = assignment.leader
            else:
                self.add_error('zonal_number', assignment.message)
        return cleaned_data


@admin.register(UnitLeader)
class UnitLeaderAdmin(admin.ModelAdmin):

    form = UnitLeaderAdminForm
    list_display = (
        'full_name',
        'zonal_number',
        'unit_number',
        'zonal_leader',
        'contact_number',
        'appointed_date',
    )
    list_filter = ('zonal_number', 'unit_number')
    search_fields = ('first_name', 'last_name')
    list_select_related = ('zonal_leader',)
    readonly_fields = ('id', 'assigned_zonal_leader', 'created_at', 'updated_at')

    @admin.display(description='Zonal leader')
    def assigned_zonal_leader(self, obj):
        return obj.zonal_leader if obj.zonal_leader_id else '-'
