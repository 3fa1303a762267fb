"""
Tests for the section registry and the interaction store.

Covers section validation, per-kind ordering, section isolation of reads,
and the write-time user context captured on every row.
"""
import pytest
from rest_framework.exceptions import ValidationError

from marketing import store
from marketing.exceptions import InvalidSection
from marketing.models import Comment, Question
from marketing.sections import (
    SECTION_IDS,
    is_valid,
    section_title,
    table_of_contents,
    validate_section,
)


def test_registry_is_closed():
    assert len(SECTION_IDS) == 12
    assert is_valid("budget")
    assert not is_valid("not-a-real-section")
    assert not is_valid(None)
    assert validate_section("swot-analysis") == "swot-analysis"
    with pytest.raises(InvalidSection):
        validate_section("Budget")


def test_table_of_contents_keeps_document_order():
    toc = table_of_contents()
    assert [s["id"] for s in toc][:2] == ["executive-summary", "mission-statement"]
    assert toc[-1] == {"id": "feedback", "title": "Feedback", "position": 12}
    assert section_title("swot-analysis") == "SWOT Analysis"


@pytest.mark.django_db
def test_add_comment_captures_author_context(actor_context, user):
    """Concrete scenario: an Ops manager comments on the budget section."""
    comment = store.add_comment("budget", actor_context, "Looks good")
    assert comment.content == "Looks good"
    assert comment.user_id == user.id
    assert comment.user_context["fullName"] == "Uma One"
    assert comment.user_context["department"] == "Ops"
    assert comment.user_context["role"] == "Manager"
    assert comment.user_context["yearsAtCompany"] == 4


@pytest.mark.django_db
def test_list_by_section_never_leaks_other_sections(actor_context):
    store.add_comment("budget", actor_context, "b1")
    store.add_comment("execution", actor_context, "e1")
    store.add_question("budget", actor_context, "q?")
    store.add_question("conclusion", actor_context, "other?")

    for section in ("budget", "execution", "conclusion", "feedback"):
        for kind in (store.COMMENTS, store.QUESTIONS, store.LIKES, store.APPROVALS):
            assert all(r.section == section for r in store.list_by_section(kind, section))

    assert [c.content for c in store.list_by_section(store.COMMENTS, "budget")] == ["b1"]


@pytest.mark.django_db
def test_comments_newest_first_questions_in_insertion_order(actor_context):
    for text in ("first", "second", "third"):
        store.add_comment("budget", actor_context, text)
        store.add_question("budget", actor_context, f"{text}?")

    assert [c.content for c in store.list_by_section(store.COMMENTS, "budget")] == ["third", "second", "first"]
    assert [q.content for q in store.list_by_section(store.QUESTIONS, "budget")] == ["first?", "second?", "third?"]


@pytest.mark.django_db
def test_blank_content_is_rejected(actor_context):
    with pytest.raises(ValidationError):
        store.add_comment("budget", actor_context, "   ")
    with pytest.raises(ValidationError):
        store.add_question("budget", actor_context, None)
    assert Comment.objects.count() == 0
    assert Question.objects.count() == 0


@pytest.mark.django_db
def test_invalid_section_touches_no_storage(actor_context):
    with pytest.raises(InvalidSection):
        store.add_comment("not-a-real-section", actor_context, "hello")
    with pytest.raises(InvalidSection):
        store.list_by_section(store.COMMENTS, "not-a-real-section")
    assert Comment.objects.count() == 0


def test_unknown_kind():
    with pytest.raises(ValueError):
        store.model_for("reactions")
