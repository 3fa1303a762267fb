from rest_framework import serializers

from .models import UserProfile
from .profile_merge import PROFILE_PARTS


class UserProfileSerializer(serializers.ModelSerializer):
    """Profile read shape, grouped into the same parts the edit screen uses."""

    id = serializers.IntegerField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    parts = serializers.SerializerMethodField()

    class Meta:
        model = UserProfile
        fields = ["id", "username", "email", "parts", "updated_at"]

    def get_parts(self, obj):
        return {
            part: {wire: getattr(obj, field) for wire, field in fields.items()}
            for part, fields in PROFILE_PARTS.items()
        }


class ProfileFieldsSerializer(serializers.ModelSerializer):
    """Validates the merged model field values before they are saved."""

    class Meta:
        model = UserProfile
        fields = [
            "full_name",
            "job_title",
            "bio",
            "company_name",
            "company_role",
            "department_name",
            "years_at_company",
            "years_in_role",
            "years_in_dept",
        ]


class ProfilePartsSerializer(serializers.Serializer):
    parts = serializers.DictField(child=serializers.DictField(), allow_empty=False)
