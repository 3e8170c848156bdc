from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class FieldErrorSerializer(serializers.Serializer):
    """One validation problem; 400 responses carry a list of these."""

    field = serializers.CharField()
    message = serializers.CharField()
