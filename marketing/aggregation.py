"""
Aggregation reader: everything attached to one section, for display.

Each kind is read independently.  A kind whose read fails is reported in
`SectionAggregate.errors` and left empty; the other kinds are still
returned.  Records are paired with the snapshot stored on the row, never
with the author's current profile.
"""
import logging
from dataclasses import dataclass, field

from django.db import DatabaseError, transaction

from . import store
from .sections import validate_section
from .snapshot import UserContextSnapshot

logger = logging.getLogger(__name__)

KINDS = (store.COMMENTS, store.QUESTIONS, store.LIKES, store.APPROVALS)


@dataclass(frozen=True)
class InteractionWithContext:
    interaction: object
    user_context: UserContextSnapshot


@dataclass
class SectionAggregate:
    section: str
    comments: list = field(default_factory=list)
    questions: list = field(default_factory=list)
    likes: list = field(default_factory=list)
    approvals: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def join(record) -> InteractionWithContext:
    return InteractionWithContext(
        interaction=record,
        user_context=UserContextSnapshot.from_dict(record.user_context),
    )


def read_kind(kind: str, section: str) -> list[InteractionWithContext]:
    return [join(record) for record in store.list_by_section(kind, section)]


def read_section(section: str) -> SectionAggregate:
    validate_section(section)
    aggregate = SectionAggregate(section=section)
    for kind in KINDS:
        try:
            with transaction.atomic():
                setattr(aggregate, kind, read_kind(kind, section))
        except DatabaseError as exc:
            logger.exception("[MARKETING] Failed to read %s for section=%s", kind, section)
            aggregate.errors.append({"kind": kind, "message": str(exc) or f"Failed to read {kind}"})
    return aggregate


def summarize(aggregate: SectionAggregate) -> dict:
    """Counts shown in the section's interaction stats bar."""
    approval_tally = {"approved": 0, "rejected": 0, "pending": 0}
    for item in aggregate.approvals:
        status = item.interaction.status
        if status in approval_tally:
            approval_tally[status] += 1

    return {
        "comments": len(aggregate.comments),
        "questions": len(aggregate.questions),
        "answeredQuestions": sum(1 for item in aggregate.questions if item.interaction.is_answered),
        "likes": len(aggregate.likes),
        "approvals": len(aggregate.approvals),
        **approval_tally,
    }
