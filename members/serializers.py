"""
Member registration serializers.

Children are written through the registration: ``children`` on create
builds the list, and on update replaces it wholesale when present.
"""

from django.db import transaction
from rest_framework import serializers

from .models import Child, MemberRegistration


class BlankAsNullMixin:
    """
    The registration form submits untouched optional inputs as "".
    Treat those as "not given" for nullable fields.
    """

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = {
                key: (None if value == '' and self._is_nullable(key) else value)
                for key, value in data.items()
            }
        return super().to_internal_value(data)

    def _is_nullable(self, name):
        field = self.fields.get(name)
        return field is not None and getattr(field, 'allow_null', False)


class ChildSerializer(BlankAsNullMixin, serializers.ModelSerializer):

    class Meta:
        model = Child
        fields = [
            'name_of_child',
            'date_of_birth_child',
            'baptised_date_of_child',
            'baptised_church_of_child',
        ]


class MemberRegistrationSerializer(BlankAsNullMixin, serializers.ModelSerializer):

    children = ChildSerializer(many=True, required=False)
    capable_donation_per_month = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
        coerce_to_string=False,
    )

    class Meta:
        model = MemberRegistration
        fields = [
            'id',
            'church',
            'name_of_father',
            'occupation_of_father',
            'date_of_birth_of_father',
            'baptised_date_of_father',
            'baptised_church',
            'name_of_mother',
            'occupation_of_mother',
            'date_of_birth_of_mother',
            'baptised_date_of_mother',
            'address',
            'contact_no',
            'married_date',
            'married_church',
            'capable_donation_per_month',
            'children',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    @transaction.atomic
    def create(self, validated_data):
        children = validated_data.pop('children', [])
        registration = MemberRegistration.objects.create(**validated_data)
        self._write_children(registration, children)
        return registration

    @transaction.atomic
    def update(self, instance, validated_data):
        children = validated_data.pop('children', None)
        instance = super().update(instance, validated_data)
        if children is not None:
            instance.children.all().delete()
            self._write_children(instance, children)
        return instance

    def _write_children(self, registration, children):
        Child.objects.bulk_create([
            Child(registration=registration, position=index, **child)
            for index, child in enumerate(children)
        ])
