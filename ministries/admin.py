"""
Admin screens for the ministry rosters.
"""

from django.contrib import admin

from .models import ChoirMember, ParishCommitteeMember, SundaySchoolTeacher, YouthMember


@admin.register(ChoirMember)
class ChoirMemberAdmin(admin.ModelAdmin):

    list_display = ('full_name', 'choir_type', 'voice_part', 'instruments', 'is_active_member', 'joined_date')
    list_filter = ('choir_type', 'voice_part', 'is_active_member')
    search_fields = ('first_name', 'last_name')
    readonly_fields = ('id', 'created_at', 'updated_at')

    @admin.display(description='Instruments')
    def instruments(self, obj):
        return ', '.join(obj.instruments_played or [])


@admin.register(YouthMember)
class YouthMemberAdmin(admin.ModelAdmin):

    list_display = ('full_name', 'position', 'contact_number', 'is_active_member', 'joined_date')
    list_filter = ('is_active_member',)
    search_fields = ('first_name', 'last_name')
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(SundaySchoolTeacher)
class SundaySchoolTeacherAdmin(admin.ModelAdmin):

    list_display = ('full_name', 'class_name', 'contact_number', 'is_active', 'appointed_date')
    list_filter = ('is_active', 'class_name')
    search_fields = ('first_name', 'last_name')
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(ParishCommitteeMember)
class ParishCommitteeMemberAdmin(admin.ModelAdmin):

    list_display = ('full_name', 'position', 'representing_committee', 'zonal_number', 'unit_number', 'joined_date')
    list_filter = ('zonal_number', 'unit_number', 'representing_committee')
    search_fields = ('first_name', 'last_name')
    readonly_fields = ('id', 'created_at', 'updated_at')
