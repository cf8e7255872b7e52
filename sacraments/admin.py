"""
Admin screens for the sacramental registers.
"""

from django.contrib import admin

from .models import Baptism, Burial, Marriage


@admin.register(Baptism)
class BaptismAdmin(admin.ModelAdmin):

    list_display = ('child_name', 'date_of_baptism', 'time_of_baptism', 'name_of_father', 'name_of_mother')
    list_filter = ('are_parents_married', 'is_father_catholic', 'date_of_baptism')
    search_fields = ('child_name',)
    date_hierarchy = 'date_of_baptism'
    readonly_fields = ('id', 'created_at', 'updated_at')

    fieldsets = (
        ('Child', {
            'fields': ('id', 'child_name', 'date_of_birth', 'place_of_birth')
        }),
        ('Baptism', {
            'fields': ('date_of_baptism', 'time_of_baptism', 'name_of_godfather', 'name_of_godmother')
        }),
        ('Parents', {
            'fields': (
                'name_of_father',
                'name_of_mother',
                'are_parents_married',
                'is_father_catholic',
                'current_address',
                'contact_number',
            )
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Burial)
class BurialAdmin(admin.ModelAdmin):

    list_display = ('name_of_deceased', 'date_of_death', 'burial_date', 'baptized', 'custodian')
    list_filter = ('baptized',)
    search_fields = ('name_of_deceased', 'custodian')
    date_hierarchy = 'burial_date'
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(Marriage)
class MarriageAdmin(admin.ModelAdmin):

    list_display = ('shortened_couple_name', 'name_of_bride', 'name_of_groom', 'date_of_marriage', 'time_of_mass', 'mass_type')
    list_filter = ('mass_type', 'need_church_choir', 'use_church_decos')
    search_fields = ('name_of_bride', 'name_of_groom', 'shortened_couple_name')
    date_hierarchy = 'date_of_marriage'
    readonly_fields = ('id', 'created_at', 'updated_at')
