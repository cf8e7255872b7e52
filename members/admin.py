"""
Admin screens for member registrations.
"""

from django.contrib import admin
from django.db.models import Count

from .models import Child, MemberRegistration


class ChildInline(admin.TabularInline):
    """Children are edited on the registration page."""
    model = Child
    extra = 0
    fields = ('position', 'name_of_child', 'date_of_birth_child', 'baptised_date_of_child', 'baptised_church_of_child')
    ordering = ('position',)


@admin.register(MemberRegistration)
class MemberRegistrationAdmin(admin.ModelAdmin):

    list_display = ('name_of_father', 'name_of_mother', 'church', 'contact_no', 'child_count', 'created_at')
    list_filter = ('church',)
    search_fields = ('name_of_father', 'name_of_mother', 'church', 'contact_no')
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [ChildInline]

    fieldsets = (
        (None, {
            'fields': ('id', 'church', 'address', 'contact_no')
        }),
        ('Father', {
            'fields': (
                'name_of_father',
                'occupation_of_father',
                'date_of_birth_of_father',
                'baptised_date_of_father',
                'baptised_church',
            )
        }),
        ('Mother', {
            'fields': (
                'name_of_mother',
                'occupation_of_mother',
                'date_of_birth_of_mother',
                'baptised_date_of_mother',
            )
        }),
        ('Marriage & Donations', {
            'fields': ('married_date', 'married_church', 'capable_donation_per_month')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_children=Count('children'))

    @admin.display(description='Children', ordering='num_children')
    def child_count(self, obj):
        return obj.num_children
