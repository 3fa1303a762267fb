"""
Initial migration for the marketing app: comments, questions, likes and
approvals scoped to marketing plan sections.
"""
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

SECTION_CHOICES = [
    ("executive-summary", "Executive Summary"),
    ("mission-statement", "Mission Statement"),
    ("marketing-objectives", "Marketing Objectives"),
    ("key-performance", "Key Performance Areas"),
    ("swot-analysis", "SWOT Analysis"),
    ("market-research", "Market Research"),
    ("marketing-strategy", "Marketing Strategy"),
    ("challenges-solutions", "Challenges & Solutions"),
    ("execution", "Execution"),
    ("budget", "Budget"),
    ("conclusion", "Conclusion"),
    ("feedback", "Feedback"),
]


def _base_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("section", models.CharField(choices=SECTION_CHOICES, db_index=True, max_length=64)),
        ("section_anchor", models.CharField(blank=True, default="", max_length=128)),
        ("user_context", models.JSONField(default=dict)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Comment",
            fields=_base_fields() + [
                ("content", models.TextField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["section", "-created_at"], name="mkt_comment_section_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=_base_fields() + [
                ("content", models.TextField()),
                ("is_answered", models.BooleanField(default=False)),
                ("answer", models.TextField(blank=True, default="")),
                ("answered_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("answered_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["section", "is_answered"], name="mkt_question_answered_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=_base_fields() + [
                ("reaction", models.CharField(blank=True, default="", max_length=64)),
            ],
            options={
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(fields=("section", "user"), name="mkt_unique_like_per_user_section"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Approval",
            fields=_base_fields() + [
                ("status", models.CharField(choices=[("approved", "Approved"), ("rejected", "Rejected"), ("pending", "Pending")], max_length=16)),
                ("comments", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["section", "user", "created_at"], name="mkt_approval_history_idx"),
                ],
            },
        ),
    ]
