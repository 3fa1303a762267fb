"""
Common test fixtures for Django REST Framework API tests.

Provides fixtures for creating users with an organizational profile and
for authenticating a client with a JWT token obtained from
`/api/auth/token/`.
"""
import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from marketing.context import ActorContext
from users.models import UserProfile


def _obtain_token(client, username, password="pass12345"):
    resp = client.post(
        "/api/auth/token/",
        {"username": username, "password": password},
        format="json",
    )
    assert resp.status_code == 200
    return resp.json()["access"]


@pytest.fixture
def make_user(db):
    """Factory: create a user whose profile carries the given organizational fields."""

    def _make(username, password="pass12345", **profile_fields):
        user = User.objects.create_user(username=username, password=password, email=f"{username}@example.com")
        if profile_fields:
            UserProfile.objects.filter(user=user).update(**profile_fields)
        return user

    return _make


@pytest.fixture
def user(make_user):
    """Create a test user in the Ops department."""
    return make_user(
        "u1",
        full_name="Uma One",
        department_name="Ops",
        company_role="Manager",
        company_name="Acme",
        years_at_company=4,
        years_in_role=2,
        years_in_dept=3,
    )


@pytest.fixture
def other_user(make_user):
    return make_user("u2", full_name="Vic Two", department_name="Finance", company_role="Analyst")


@pytest.fixture
def actor_context(user):
    """Server-side actor context for `user`, as a view would build it."""
    return ActorContext(actor=user, profile=UserProfile.objects.get(user=user))


@pytest.fixture
def other_context(other_user):
    return ActorContext(actor=other_user, profile=UserProfile.objects.get(user=other_user))


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def access_token(api_client, user):
    return _obtain_token(api_client, "u1")


@pytest.fixture
def auth_client(api_client, access_token):
    """Authenticate the DRF test client using JWT tokens."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
    return api_client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {_obtain_token(client, 'u2')}")
    return client
