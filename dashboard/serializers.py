"""
Dashboard response serializers.
"""

from rest_framework import serializers


class WelcomeSerializer(serializers.Serializer):
    church_name = serializers.CharField()
    parish_name = serializers.CharField()


class UpcomingEventSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    location = serializers.CharField()
    category = serializers.CharField()
    color = serializers.CharField()


class ActivitySerializer(serializers.Serializer):
    type = serializers.CharField()
    id = serializers.CharField()
    title = serializers.CharField()
    name = serializers.CharField()
    created_at = serializers.DateTimeField()


class DashboardSerializer(serializers.Serializer):
    welcome = WelcomeSerializer()
    totals = serializers.DictField(child=serializers.IntegerField())
    active = serializers.DictField(child=serializers.IntegerField())
    monthly_donations = serializers.DecimalField(
        max_digits=14, decimal_places=2, coerce_to_string=False)
    upcoming_events = UpcomingEventSerializer(many=True)
    recent_activity = ActivitySerializer(many=True)
