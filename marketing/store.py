"""
Interaction store: the only writer of marketing interaction rows.

`append` and `list_by_section` work for every kind; the two state changes
that are not plain appends (answering a question, toggling a like) are
dedicated atomic operations, `set_answer` here and `likes.toggle`.
"""
import logging

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from .exceptions import QuestionAlreadyAnswered, QuestionNotFound
from .models import Approval, Comment, Like, Question
from .sections import validate_section

logger = logging.getLogger(__name__)

COMMENTS = "comments"
QUESTIONS = "questions"
LIKES = "likes"
APPROVALS = "approvals"

KIND_MODELS = {
    COMMENTS: Comment,
    QUESTIONS: Question,
    LIKES: Like,
    APPROVALS: Approval,
}

# comments newest-first; everything else in insertion order
KIND_ORDERING = {
    COMMENTS: ("-created_at", "-id"),
    QUESTIONS: ("id",),
    LIKES: ("id",),
    APPROVALS: ("id",),
}


def model_for(kind: str):
    try:
        return KIND_MODELS[kind]
    except KeyError:
        raise ValueError(f"Unknown interaction kind {kind!r}") from None


def _required_text(name: str, value) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError({name: ["This field may not be blank."]})
    return text


def append(kind: str, section: str, ctx, *, section_anchor: str = "", **fields):
    """
    Insert one interaction for the acting user.

    The context snapshot is taken here, once, and stored with the row.
    """
    validate_section(section)
    model = model_for(kind)
    record = model.objects.create(
        section=section,
        section_anchor=section_anchor or "",
        user=ctx.actor,
        user_context=ctx.snapshot(),
        **fields,
    )
    logger.info("[MARKETING] Appended %s id=%s section=%s user=%s", kind, record.pk, section, ctx.actor_id)
    return record


def list_by_section(kind: str, section: str) -> list:
    validate_section(section)
    model = model_for(kind)
    return list(model.objects.filter(section=section).order_by(*KIND_ORDERING[kind]))


def add_comment(section: str, ctx, content, section_anchor: str = "") -> Comment:
    validate_section(section)
    return append(COMMENTS, section, ctx, section_anchor=section_anchor, content=_required_text("content", content))


def add_question(section: str, ctx, content, section_anchor: str = "") -> Question:
    validate_section(section)
    return append(QUESTIONS, section, ctx, section_anchor=section_anchor, content=_required_text("content", content))


def set_answer(question_id, answer, ctx) -> Question:
    """
    Answer a question exactly once.

    The write is a single conditional UPDATE on `is_answered = false`, so
    two racing answers cannot both succeed.  Raises `QuestionNotFound` for
    an unknown id and `QuestionAlreadyAnswered` when it was answered before.
    """
    try:
        question_id = int(question_id)
    except (TypeError, ValueError):
        raise QuestionNotFound() from None
    answer = _required_text("answer", answer)
    now = timezone.now()
    updated = (
        Question.objects
        .filter(pk=question_id, is_answered=False)
        .update(
            answer=answer,
            is_answered=True,
            answered_by=ctx.actor,
            answered_at=now,
            updated_at=now,
        )
    )
    if not updated:
        if Question.objects.filter(pk=question_id).exists():
            logger.info("[MARKETING] Rejected second answer for question=%s user=%s", question_id, ctx.actor_id)
            raise QuestionAlreadyAnswered()
        raise QuestionNotFound()

    logger.info("[MARKETING] Answered question=%s user=%s", question_id, ctx.actor_id)
    return Question.objects.get(pk=question_id)
