"""
Core serializers for common response types.
"""

from rest_framework import serializers


class InvalidParamSerializer(serializers.Serializer):
    name = serializers.CharField()
    reason = serializers.CharField()


class ProblemResponseSerializer(serializers.Serializer):
    """Problem+JSON error body returned by every API error."""
    type = serializers.CharField(default='about:blank')
    title = serializers.CharField(help_text="Short summary of the status code")
    status = serializers.IntegerField()
    detail = serializers.CharField(help_text="Human-readable explanation")
    error = serializers.CharField(help_text="Message the console shows to the user")
    instance = serializers.CharField(required=False)
    invalid_params = InvalidParamSerializer(many=True, required=False)


class MessageResponseSerializer(serializers.Serializer):
    """Serializer for simple message responses."""
    message = serializers.CharField(help_text="Response message")
