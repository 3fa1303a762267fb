"""
Database models for the marketing app.

We persist four interaction kinds, each scoped to one marketing plan
section (and optionally a sub-anchor inside it):
- Comment: freeform text, append-only.
- Question: text that may be answered exactly once.
- Like: at most one per (section, user), enforced by a unique constraint.
- Approval: append-only decision history per (section, user).

Every row carries `user_context`, the author's organizational snapshot
captured at write time (see marketing/snapshot.py).  It is never
rewritten after insert, so later profile edits do not change how old
interactions render.
"""

from django.conf import settings
from django.db import models

from .sections import MarketingPlanSection


class BaseInteraction(models.Model):
    """
    Fields shared by all interaction kinds.

    Fields:
        section: one of MarketingPlanSection.
        section_anchor: optional sub-anchor within the section ("sectionId" on the wire).
        user: FK to the acting user.
        user_context: immutable write-time snapshot of the user's profile.
        created_at: creation timestamp.
    """

    section = models.CharField(max_length=64, choices=MarketingPlanSection.choices, db_index=True)
    section_anchor = models.CharField(max_length=128, blank=True, default="")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="+")
    user_context = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True


class Comment(BaseInteraction):
    content = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["section", "-created_at"], name="mkt_comment_section_idx"),
        ]

    def __str__(self) -> str:
        return f"Comment({self.id}) on {self.section} by {self.user_id}"


class Question(BaseInteraction):
    """
    A question about a section.  Unanswered until the first accepted
    answer; answered is terminal (see store.set_answer).
    """

    content = models.TextField()
    is_answered = models.BooleanField(default=False)
    answer = models.TextField(blank=True, default="")
    answered_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    answered_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["section", "is_answered"], name="mkt_question_answered_idx"),
        ]

    def __str__(self) -> str:
        status = "answered" if self.is_answered else "open"
        return f"[{self.section}] {status}: {self.content[:50]}"


class Like(BaseInteraction):
    reaction = models.CharField(max_length=64, blank=True, default="")

    class Meta:
        ordering = ["id"]
        # only ONE like per user per section; the toggle relies on this
        constraints = [
            models.UniqueConstraint(
                fields=["section", "user"],
                name="mkt_unique_like_per_user_section",
            )
        ]

    def __str__(self) -> str:
        return f"{self.user_id} likes {self.section}"


class Approval(BaseInteraction):
    class Status(models.TextChoices):
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"
        PENDING = "pending", "Pending"

    status = models.CharField(max_length=16, choices=Status.choices)
    comments = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["section", "user", "created_at"], name="mkt_approval_history_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} {self.status} {self.section}"
