"""
Serializers for the ministry rosters.
"""

from rest_framework import serializers

from .models import ChoirMember, ParishCommitteeMember, SundaySchoolTeacher, YouthMember

READ_ONLY = ['id', 'full_name', 'created_at', 'updated_at']


class ChoirMemberSerializer(serializers.ModelSerializer):

    full_name = serializers.CharField(read_only=True)
    instruments_played = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        required=False,
    )

    class Meta:
        model = ChoirMember
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'date_of_birth',
            'address',
            'contact_number',
            'joined_date',
            'voice_part',
            'is_active_member',
            'instruments_played',
            'choir_type',
            'created_at',
            'updated_at',
        ]
        read_only_fields = READ_ONLY

    def validate_instruments_played(self, value):
        # The form adds an empty row per "add instrument" click
        return [name.strip() for name in value if name.strip()]


class YouthMemberSerializer(serializers.ModelSerializer):

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = YouthMember
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'date_of_birth',
            'joined_date',
            'address',
            'contact_number',
            'position',
            'is_active_member',
            'created_at',
            'updated_at',
        ]
        read_only_fields = READ_ONLY


class SundaySchoolTeacherSerializer(serializers.ModelSerializer):

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = SundaySchoolTeacher
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'date_of_birth',
            'appointed_date',
            'address',
            'contact_number',
            'class_name',
            'remarks',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = READ_ONLY


class ParishCommitteeMemberSerializer(serializers.ModelSerializer):

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = ParishCommitteeMember
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'address',
            'phone_number',
            'zonal_number',
            'unit_number',
            'position',
            'joined_date',
            'representing_committee',
            'created_at',
            'updated_at',
        ]
        read_only_fields = READ_ONLY
