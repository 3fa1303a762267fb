"""
Request-scoped actor context.

Views build one `ActorContext` per request and pass it explicitly into
the store and resolvers; nothing below the view layer reads the request
or any ambient session state.
"""
from dataclasses import dataclass
from typing import Optional

from users.models import UserProfile

from . import snapshot


@dataclass(frozen=True)
class ActorContext:
    actor: object
    token: Optional[str] = None
    profile: Optional[UserProfile] = None

    @property
    def actor_id(self):
        return self.actor.pk

    @classmethod
    def from_request(cls, request) -> "ActorContext":
        profile = UserProfile.objects.filter(user=request.user).first()
        token = str(request.auth) if request.auth is not None else None
        return cls(actor=request.user, token=token, profile=profile)

    def snapshot(self) -> dict:
        return snapshot.build(self.actor, self.profile).as_dict()
