from rest_framework import serializers

from .exceptions import REQUIRED_FIELDS_MESSAGE
from .models import ContactSubmission


class ContactSubmissionSerializer(serializers.ModelSerializer):
    # Presence only: no email format check, whitespace counts as a value.
    name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    email = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    company = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    message = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )

    class Meta:
        model = ContactSubmission
        fields = ["name", "email", "company", "message"]

    def validate(self, attrs):
        # Falsy raw values such as 0 are missing even though CharField would
        # turn them into "0".
        raw = self.initial_data
        required = ("name", "email", "message")
        if not all(raw.get(field) and attrs.get(field) for field in required):
            raise serializers.ValidationError(REQUIRED_FIELDS_MESSAGE)
        attrs["company"] = attrs.get("company") or ""
        return attrs
