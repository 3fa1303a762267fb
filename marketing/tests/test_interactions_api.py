"""
API tests for the marketing interaction endpoints.

Every response, success or failure, uses the `{success, message, data}`
envelope.  Writes capture the caller's organizational context server-side.
"""
import pytest

from marketing.models import Approval, Comment, Like, Question

BASE = "/api/marketing"


@pytest.mark.django_db
def test_requires_authentication(api_client):
    resp = api_client.get(f"{BASE}/comments/budget")
    assert resp.status_code == 401
    body = resp.json()
    assert body["success"] is False
    assert body["message"]


@pytest.mark.django_db
def test_comment_scenario_ops_manager(auth_client, user):
    """An Ops manager comments on the budget; the comment carries their context."""
    resp = auth_client.post(f"{BASE}/comments/budget", {"content": "Looks good"}, format="json")
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    interaction = body["data"]["interaction"]
    assert interaction["content"] == "Looks good"
    assert interaction["userId"] == user.id
    assert interaction["section"] == "budget"
    assert interaction["sectionId"] is None
    assert body["data"]["userContext"]["fullName"] == "Uma One"
    assert body["data"]["userContext"]["department"] == "Ops"

    listing = auth_client.get(f"{BASE}/comments/budget").json()
    assert listing["success"] is True
    assert [c["interaction"]["content"] for c in listing["data"]["comments"]] == ["Looks good"]


@pytest.mark.django_db
def test_body_section_must_match_path(auth_client):
    resp = auth_client.post(
        f"{BASE}/comments/budget",
        {"content": "hi", "section": "execution", "sectionId": "budget-table"},
        format="json",
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert Comment.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize(
    "method, path, payload",
    [
        ("get", "comments/not-a-real-section", None),
        ("get", "questions/not-a-real-section", None),
        ("get", "likes/not-a-real-section", None),
        ("get", "approvals/not-a-real-section", None),
        ("get", "approvals/not-a-real-section/status", None),
        ("post", "comments/not-a-real-section", {"content": "x"}),
        ("post", "questions/not-a-real-section", {"content": "x?"}),
        ("post", "likes/not-a-real-section", {}),
        ("post", "approvals/not-a-real-section", {"status": "approved"}),
        ("get", "sections/not-a-real-section", None),
    ],
)
def test_invalid_section_is_rejected_without_writing(auth_client, method, path, payload):
    resp = getattr(auth_client, method)(f"{BASE}/{path}", payload, format="json")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "section" in body["errors"]
    assert Comment.objects.count() == Question.objects.count() == Like.objects.count() == Approval.objects.count() == 0


@pytest.mark.django_db
def test_question_answer_flow(auth_client, other_client):
    created = auth_client.post(
        f"{BASE}/questions/market-research", {"content": "Which segment?", "sectionId": "segments"}, format="json"
    ).json()["data"]["interaction"]
    assert created["isAnswered"] is False
    assert created["answer"] is None
    assert created["sectionId"] == "segments"

    first = other_client.put(f"{BASE}/questions/{created['id']}/answer", {"answer": "A"}, format="json")
    assert first.status_code == 200
    assert first.json()["data"]["interaction"]["answer"] == "A"
    assert first.json()["data"]["interaction"]["isAnswered"] is True

    second = auth_client.put(f"{BASE}/questions/{created['id']}/answer", {"answer": "B"}, format="json")
    assert second.status_code == 409
    assert second.json()["success"] is False
    assert Question.objects.get(pk=created["id"]).answer == "A"

    missing = auth_client.put(f"{BASE}/questions/999999/answer", {"answer": "A"}, format="json")
    assert missing.status_code == 404


@pytest.mark.django_db
def test_answer_with_non_numeric_id_is_an_enveloped_404(auth_client):
    resp = auth_client.put(f"{BASE}/questions/abc/answer", {"answer": "A"}, format="json")
    assert resp.status_code == 404
    assert resp["Content-Type"].startswith("application/json")
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Question not found."


@pytest.mark.django_db
def test_like_toggle_endpoint(auth_client):
    on = auth_client.post(f"{BASE}/likes/swot-analysis", {"reaction": "clap"}, format="json")
    assert on.status_code == 201
    assert on.json()["data"]["liked"] is True
    assert on.json()["data"]["interaction"]["reaction"] == "clap"

    off = auth_client.post(f"{BASE}/likes/swot-analysis", {}, format="json")
    assert off.status_code == 200
    assert off.json()["data"] == {"liked": False}

    assert auth_client.get(f"{BASE}/likes/swot-analysis").json()["data"]["likes"] == []


@pytest.mark.django_db
def test_approvals_and_status(auth_client, other_client, user, other_user):
    auth_client.post(f"{BASE}/approvals/budget", {"status": "approved"}, format="json")
    auth_client.post(f"{BASE}/approvals/budget", {"status": "rejected", "comments": "Too high"}, format="json")
    other_client.post(f"{BASE}/approvals/budget", {"status": "approved"}, format="json")

    history = auth_client.get(f"{BASE}/approvals/budget").json()["data"]["approvals"]
    assert [a["interaction"]["status"] for a in history] == ["approved", "rejected", "approved"]
    assert history[1]["interaction"]["comments"] == "Too high"

    status = auth_client.get(f"{BASE}/approvals/budget/status").json()["data"]
    assert status["currentStatus"] == "rejected"
    assert {s["userId"]: s["status"] for s in status["statuses"]} == {
        user.id: "rejected",
        other_user.id: "approved",
    }

    bad = auth_client.post(f"{BASE}/approvals/budget", {"status": "maybe"}, format="json")
    assert bad.status_code == 400


@pytest.mark.django_db
def test_section_list_and_detail(auth_client):
    toc = auth_client.get(f"{BASE}/sections").json()["data"]["sections"]
    assert len(toc) == 12

    auth_client.post(f"{BASE}/comments/execution", {"content": "Timeline ok"}, format="json")
    auth_client.post(f"{BASE}/likes/execution", {}, format="json")
    detail = auth_client.get(f"{BASE}/sections/execution").json()
    assert detail["success"] is True
    data = detail["data"]
    assert data["errors"] == []
    assert data["stats"]["comments"] == 1
    assert data["stats"]["likes"] == 1
    assert data["questions"] == [] and data["approvals"] == []
