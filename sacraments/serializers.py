"""
Serializers for the sacramental registers.
"""

from rest_framework import serializers

from .models import Baptism, Burial, Marriage

TIMESTAMPS = ['id', 'created_at', 'updated_at']


class BaptismSerializer(serializers.ModelSerializer):

    class Meta:
        model = Baptism
        fields = [
            'id',
            'child_name',
            'date_of_birth',
            'place_of_birth',
            'date_of_baptism',
            'time_of_baptism',
            'name_of_mother',
            'name_of_father',
            'name_of_godfather',
            'name_of_godmother',
            'current_address',
            'contact_number',
            'are_parents_married',
            'is_father_catholic',
            'created_at',
            'updated_at',
        ]
        read_only_fields = TIMESTAMPS

    def validate(self, attrs):
        born = attrs.get('date_of_birth', getattr(self.instance, 'date_of_birth', None))
        baptised = attrs.get('date_of_baptism', getattr(self.instance, 'date_of_baptism', None))
        if born and baptised and baptised < born:
            raise serializers.ValidationError({
                'date_of_baptism': 'Date of baptism cannot be before the date of birth.'
            })
        return attrs


class BurialSerializer(serializers.ModelSerializer):

    class Meta:
        model = Burial
        fields = [
            'id',
            'name_of_deceased',
            'date_of_death',
            'date_of_birth',
            'burial_date',
            'baptized',
            'cause_of_death',
            'custodian',
            'created_at',
            'updated_at',
        ]
        read_only_fields = TIMESTAMPS

    def validate(self, attrs):
        def current(name):
            return attrs.get(name, getattr(self.instance, name, None))

        born, died, buried = current('date_of_birth'), current('date_of_death'), current('burial_date')
        if born and died and died < born:
            raise serializers.ValidationError({
                'date_of_death': 'Date of death cannot be before the date of birth.'
            })
        if died and buried and buried < died:
            raise serializers.ValidationError({
                'burial_date': 'Burial date cannot be before the date of death.'
            })
        return attrs


class MarriageSerializer(serializers.ModelSerializer):

    class Meta:
        model = Marriage
        fields = [
            'id',
            'name_of_bride',
            'name_of_groom',
            'date_of_marriage',
            'time_of_mass',
            'shortened_couple_name',
            'mass_type',
            'need_church_choir',
            'use_church_decos',
            'created_at',
            'updated_at',
        ]
        read_only_fields = TIMESTAMPS
