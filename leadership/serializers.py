"""
Serializers for zonal and unit leaders.
"""

from rest_framework import serializers

from .models import UnitLeader, ZonalLeader
from .resolver import LeaderAssignment, normalize_zone


class ZonalLeaderSerializer(serializers.ModelSerializer):

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = ZonalLeader
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'date_of_birth',
            'address',
            'contact_number',
            'appointed_date',
            'zone_number',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'full_name', 'created_at', 'updated_at']

    def validate_zone_number(self, value):
        zone = normalize_zone(value)
        if not zone:
            raise serializers.ValidationError('Zone number is required.')

        occupied = ZonalLeader.objects.filter(zone_number=zone)
        if self.instance is not None:
            occupied = occupied.exclude(pk=self.instance.pk)
        if occupied.exists():
            raise serializers.ValidationError(
                f'Zone {zone} already has a zonal leader.')

        if (
            self.instance is not None
            and zone != self.instance.zone_number
            and self.instance.unit_leaders.exists()
        ):
            raise serializers.ValidationError(
                'The zone cannot change while unit leaders report to this leader.')
        return zone


class ZonalLeaderSummarySerializer(serializers.ModelSerializer):
    """Embedded in unit-leader responses."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = ZonalLeader
        fields = ['id', 'first_name', 'last_name', 'full_name', 'contact_number', 'zone_number']
        read_only_fields = fields


class UnitLeaderSerializer(serializers.ModelSerializer):
    """
    Unit leader with its zonal leader resolved from ``zonal_number``.

    ``zonal_leader`` may be sent (the console prefills it) but must agree with
    the zone; it is always set from the zone's current leader.
    """

    zonal_leader = serializers.PrimaryKeyRelatedField(
        queryset=ZonalLeader.objects.all(),
        required=False
    )
    zonal_leader_detail = ZonalLeaderSummarySerializer(
        source='zonal_leader', read_only=True)
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = UnitLeader
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'date_of_birth',
            'address',
            'contact_number',
            'appointed_date',
            'zonal_number',
            'unit_number',
            'zonal_leader',
            'zonal_leader_detail',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'full_name', 'created_at', 'updated_at']

    def validate(self, attrs):
        zone = attrs.get('zonal_number')
        if zone is None and self.instance is not None:
            zone = self.instance.zonal_number

        assignment = LeaderAssignment.for_zone(zone, ZonalLeader.objects.all())
        if not assignment.can_submit:
            raise serializers.ValidationError({'zonal_number': assignment.message})

        requested = attrs.get('zonal_leader')
        if requested is not None and requested.pk != assignment.leader_id:
            raise serializers.ValidationError({
                'zonal_leader': f'This zonal leader does not lead Zone {assignment.zone_number}.'
            })

        attrs['zonal_leader'] = assignment.leader
        return attrs
