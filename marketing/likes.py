"""
Like toggle: create-or-retract the caller's like on a section.

At most one Like exists per (section, user); the database unique
constraint `mkt_unique_like_per_user_section` guarantees it.  A toggle is
a delete-or-insert inside one transaction.  When two toggles race, both
may find nothing to delete and both try to insert; the loser's insert
fails on the constraint and it retries, this time deleting the winner's
row.  Two racing toggles therefore end with no like, same as two
sequential ones.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from .exceptions import ConflictError
from .models import Like
from .sections import validate_section

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class ToggleResult:
    liked: bool
    record: Optional[Like] = None


def _retract(section: str, user) -> int:
    deleted, _ = Like.objects.filter(section=section, user=user).delete()
    return deleted


def _insert(section: str, ctx, reaction: str, section_anchor: str) -> Like:
    return Like.objects.create(
        section=section,
        section_anchor=section_anchor,
        user=ctx.actor,
        user_context=ctx.snapshot(),
        reaction=reaction,
    )


def toggle(section: str, ctx, reaction: Optional[str] = None, section_anchor: Optional[str] = None) -> ToggleResult:
    validate_section(section)
    reaction = (reaction or "").strip()
    section_anchor = section_anchor or ""
    attempts = getattr(settings, "MARKETING_TOGGLE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)

    for attempt in range(1, attempts + 1):
        try:
            with transaction.atomic():
                if _retract(section, ctx.actor):
                    logger.info("[MARKETING] Like removed section=%s user=%s", section, ctx.actor_id)
                    return ToggleResult(liked=False)
                like = _insert(section, ctx, reaction, section_anchor)
        except IntegrityError:
            logger.warning(
                "[MARKETING] Like toggle collided with a concurrent toggle section=%s user=%s attempt=%s",
                section, ctx.actor_id, attempt,
            )
            continue

        logger.info("[MARKETING] Like added id=%s section=%s user=%s", like.pk, section, ctx.actor_id)
        return ToggleResult(liked=True, record=like)

    raise ConflictError("Could not toggle like because of concurrent updates; please retry.")
