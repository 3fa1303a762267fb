"""
Tests for authentication and profile management in the users app.

Covers JWT issuance, the `/api/auth/me/profile/` endpoint with its
multi-part PATCH, the pure part reducer, and the guarantee that editing a
profile never rewrites the context stored on earlier interactions.
"""
import pytest
from rest_framework.exceptions import ValidationError

from users.models import UserProfile
from users.profile_merge import collect_parts, merge_parts, reduce_part


@pytest.mark.django_db
def test_login_and_verify(api_client, user):
    """Ensure a user can obtain, refresh and verify a JWT."""
    login_resp = api_client.post(
        "/api/auth/token/", {"username": "u1", "password": "pass12345"}, format="json"
    )
    assert login_resp.status_code == 200
    tokens = login_resp.json()
    assert "access" in tokens and "refresh" in tokens

    refreshed = api_client.post("/api/auth/token/refresh/", {"refresh": tokens["refresh"]}, format="json")
    assert refreshed.status_code == 200

    verified = api_client.post("/api/auth/token/verify/", {"token": tokens["access"]}, format="json")
    assert verified.status_code == 200


@pytest.mark.django_db
def test_bad_password_is_rejected(api_client, user):
    resp = api_client.post("/api/auth/token/", {"username": "u1", "password": "nope"}, format="json")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_profile_is_created_for_every_user(make_user):
    u = make_user("fresh")
    assert UserProfile.objects.filter(user=u).count() == 1
    u.save()
    assert UserProfile.objects.filter(user=u).count() == 1


@pytest.mark.django_db
def test_me_profile_get_groups_fields_by_part(auth_client):
    resp = auth_client.get("/api/auth/me/profile/")
    assert resp.status_code == 200
    parts = resp.json()["parts"]
    assert parts["organization"] == {"companyName": "Acme", "companyRole": "Manager", "departmentName": "Ops"}
    assert parts["tenure"]["yearsAtCompany"] == 4


@pytest.mark.django_db
def test_me_profile_patch_merges_parts(auth_client, user):
    resp = auth_client.patch(
        "/api/auth/me/profile/",
        {"parts": {"organization": {"departmentName": "Growth"}, "tenure": {"yearsInDept": 0}}},
        format="json",
    )
    assert resp.status_code == 200
    parts = resp.json()["parts"]
    assert parts["organization"]["departmentName"] == "Growth"
    assert parts["organization"]["companyRole"] == "Manager"
    assert parts["tenure"]["yearsInDept"] == 0
    assert parts["coreInfo"]["fullName"] == "Uma One"

    profile = UserProfile.objects.get(user=user)
    assert profile.department_name == "Growth"
    assert profile.years_at_company == 4


@pytest.mark.django_db
def test_me_profile_patch_rejects_unknown_part(auth_client):
    resp = auth_client.patch("/api/auth/me/profile/", {"parts": {"payroll": {"salary": 1}}}, format="json")
    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.django_db
def test_profile_edit_does_not_rewrite_past_interactions(auth_client):
    auth_client.post("/api/marketing/comments/budget", {"content": "Looks good"}, format="json")
    auth_client.patch(
        "/api/auth/me/profile/",
        {"parts": {"organization": {"departmentName": "Growth"}}},
        format="json",
    )
    auth_client.post("/api/marketing/comments/budget", {"content": "Still good"}, format="json")

    comments = auth_client.get("/api/marketing/comments/budget").json()["data"]["comments"]
    by_content = {c["interaction"]["content"]: c["userContext"]["department"] for c in comments}
    assert by_content == {"Looks good": "Ops", "Still good": "Growth"}


def test_reduce_part_layers_patches_without_mutating():
    pending = {}
    step1 = reduce_part(pending, "coreInfo", {"fullName": "A", "bio": "x"})
    step2 = reduce_part(step1, "coreInfo", {"fullName": "B"})
    assert pending == {}
    assert step1 == {"coreInfo": {"fullName": "A", "bio": "x"}}
    assert step2 == {"coreInfo": {"fullName": "B", "bio": "x"}}


def test_reduce_part_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        reduce_part({}, "tenure", {"yearsOnMars": 2})
    with pytest.raises(ValidationError):
        reduce_part({}, "hobbies", {})


def test_merge_parts_applies_only_pending_fields():
    base = {"full_name": "A", "department_name": "Ops", "years_in_role": 1}
    pending = collect_parts({"organization": {"departmentName": "Growth"}})
    merged = merge_parts(base, pending)
    assert merged == {"full_name": "A", "department_name": "Growth", "years_in_role": 1}
    assert base["department_name"] == "Ops"
