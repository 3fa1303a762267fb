"""
Approval decisions: append-only history plus derived current status.

Nothing here updates or deletes an Approval row.  The current status of a
user for a section is recomputed from history on every read: the entry
with the latest `created_at` wins, ties broken by insertion order.  A
user with no history is `pending`.
"""
import logging
from typing import Optional

from rest_framework.exceptions import ValidationError

from . import store
from .models import Approval
from .sections import validate_section

logger = logging.getLogger(__name__)

LATEST_FIRST = ("-created_at", "-id")
OLDEST_FIRST = ("created_at", "id")


def submit(section: str, ctx, status, comments: Optional[str] = None, section_anchor: Optional[str] = None) -> Approval:
    validate_section(section)
    if status not in Approval.Status.values:
        raise ValidationError({"status": [f"Must be one of: {', '.join(Approval.Status.values)}."]})
    record = store.append(
        store.APPROVALS,
        section,
        ctx,
        section_anchor=section_anchor or "",
        status=status,
        comments=(comments or "").strip(),
    )
    logger.info("[MARKETING] Approval %s submitted section=%s user=%s", status, section, ctx.actor_id)
    return record


def history(section: str, user_id) -> list[Approval]:
    validate_section(section)
    return list(Approval.objects.filter(section=section, user_id=user_id).order_by(*OLDEST_FIRST))


def current_status(section: str, user_id) -> str:
    validate_section(section)
    latest = (
        Approval.objects
        .filter(section=section, user_id=user_id)
        .order_by(*LATEST_FIRST)
        .values_list("status", flat=True)
        .first()
    )
    return latest or Approval.Status.PENDING.value


def current_statuses(section: str) -> dict:
    """{user_id: current status} for every user with at least one decision."""
    validate_section(section)
    out = {}
    rows = Approval.objects.filter(section=section).order_by(*OLDEST_FIRST).values_list("user_id", "status")
    for user_id, status in rows:
        out[user_id] = status
    return out
