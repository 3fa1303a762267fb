"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the
organizational fields shown next to marketing plan interactions.  A
`OneToOneField` links each profile to its user.  The `UserProfile` is
created automatically via signals when a new user instance is saved.
"""
from django.contrib.auth.models import User
from django.db import models


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    full_name = models.CharField(max_length=255, blank=True)
    job_title = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)

    # organization
    company_name = models.CharField(max_length=255, blank=True)
    company_role = models.CharField(max_length=255, blank=True)
    department_name = models.CharField(max_length=255, blank=True)

    # tenure, in whole years
    years_at_company = models.PositiveIntegerField(null=True, blank=True)
    years_in_role = models.PositiveIntegerField(null=True, blank=True)
    years_in_dept = models.PositiveIntegerField(null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["company_name"], name="users_userp_company_5b1f0e_idx"),
            models.Index(fields=["department_name"], name="users_userp_departm_8c2a41_idx"),
        ]

    def display_name(self) -> str:
        """Profile name, falling back to the auth user's first/last name."""
        name = (self.full_name or "").strip()
        if name:
            return name
        return (self.user.get_full_name() or "").strip()

    def __str__(self) -> str:
        return f"Profile<{self.user.username}>"
