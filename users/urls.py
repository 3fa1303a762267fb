"""
Authentication and profile endpoints for the users app.

This module exposes the simplejwt obtain/refresh/verify views and the
authenticated user's profile view.
"""
from django.urls import path
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

from .views import MeProfileView

urlpatterns = [
    path("token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("token/verify/", TokenVerifyView.as_view(), name="token_verify"),

    path("me/profile/", MeProfileView.as_view(), name="me-profile"),
]
