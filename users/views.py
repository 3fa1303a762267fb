"""
Views for the users app.

Only the authenticated user's own profile is exposed here; JWT issuance
is handled by simplejwt's views (see `users/urls.py`).
"""
import logging

from django.forms.models import model_to_dict
from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import UserProfile
from .profile_merge import collect_parts, merge_parts
from .serializers import ProfileFieldsSerializer, ProfilePartsSerializer, UserProfileSerializer

logger = logging.getLogger(__name__)


class MeProfileView(APIView):
    """
    GET   /api/auth/me/profile/
    PATCH /api/auth/me/profile/   { "parts": { "organization": {...}, "tenure": {...} } }
    """
    permission_classes = [permissions.IsAuthenticated]

    def _profile(self, request):
        profile, _ = UserProfile.objects.get_or_create(user=request.user)
        return profile

    @extend_schema(responses=UserProfileSerializer)
    def get(self, request):
        return Response(UserProfileSerializer(self._profile(request)).data)

    @extend_schema(request=ProfilePartsSerializer, responses=UserProfileSerializer)
    def patch(self, request):
        ser = ProfilePartsSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        pending = collect_parts(ser.validated_data["parts"])

        profile = self._profile(request)
        base = model_to_dict(profile, fields=ProfileFieldsSerializer.Meta.fields)
        merged = merge_parts(base, pending)

        fields = ProfileFieldsSerializer(profile, data=merged)
        fields.is_valid(raise_exception=True)
        fields.save()

        logger.info("[USERS] Profile parts %s updated for user=%s", sorted(pending), request.user.id)
        return Response(UserProfileSerializer(profile).data)
