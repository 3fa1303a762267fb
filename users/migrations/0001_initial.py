"""
Initial migration for the users app.

Defines the `UserProfile` model holding the organizational fields that
interaction snapshots are built from.  Every user gets a profile through
the `post_save` signal in `users/signals.py`.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(blank=True, max_length=255)),
                ("job_title", models.CharField(blank=True, max_length=255)),
                ("bio", models.TextField(blank=True)),
                ("company_name", models.CharField(blank=True, max_length=255)),
                ("company_role", models.CharField(blank=True, max_length=255)),
                ("department_name", models.CharField(blank=True, max_length=255)),
                ("years_at_company", models.PositiveIntegerField(blank=True, null=True)),
                ("years_in_role", models.PositiveIntegerField(blank=True, null=True)),
                ("years_in_dept", models.PositiveIntegerField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["company_name"], name="users_userp_company_5b1f0e_idx"),
                    models.Index(fields=["department_name"], name="users_userp_departm_8c2a41_idx"),
                ],
            },
        ),
    ]
