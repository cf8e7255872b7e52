"""
Event serializers.
"""

from rest_framework import serializers

from authentication.serializers import UserSerializer

from .models import CATEGORY_COLORS, Event, Recurrence

NO_RECURRENCE = 'none'


class EventSerializer(serializers.ModelSerializer):
    """
    ``color`` follows the category palette unless one is sent. ``recurring``
    is derived from ``recurrence``; "none" or empty means a one-off event.
    """

    recurrence = serializers.ChoiceField(
        choices=[NO_RECURRENCE] + list(Recurrence.values),
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    recurring = serializers.BooleanField(read_only=True)
    color = serializers.RegexField(
        r'^#[0-9A-Fa-f]{6}$',
        required=False,
        error_messages={'invalid': 'Enter a colour as #rrggbb.'}
    )
    created_by = UserSerializer(read_only=True)

    class Meta:
        model = Event
        fields = [
            'id',
            'title',
            'description',
            'start_date',
            'end_date',
            'location',
            'category',
            'color',
            'all_day',
            'recurring',
            'recurrence',
            'reminder',
            'reminder_time',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'recurring', 'created_by', 'created_at', 'updated_at']

    def validate_recurrence(self, value):
        if value in (None, NO_RECURRENCE):
            return ''
        return value

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({
                'end_date': 'End date must not be before the start date.'
            })

        if 'color' not in attrs and 'category' in attrs:
            attrs['color'] = CATEGORY_COLORS[attrs['category']]
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['recurrence'] = instance.recurrence or None
        return data
