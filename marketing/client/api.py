# marketing/client/api.py
"""
Thin `requests` wrappers around the /marketing endpoints.

Every method takes the caller's `RequestContext` explicitly and returns an
`Ok` / `Err` result; transport failures and non-2xx responses never raise.
"""
import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

from .errors import ErrorKind
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("MARKETING_API_URL", "http://localhost:8000/api")
DEFAULT_TIMEOUT = float(os.getenv("MARKETING_API_TIMEOUT", "10"))


@dataclass(frozen=True)
class RequestContext:
    """Who is calling: the authenticated actor and their bearer token."""

    actor_id: Optional[int] = None
    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.actor_id is not None and bool(self.token)


def _json_or_none(resp):
    content_type = resp.headers.get("Content-Type", "") if resp.headers else ""
    if "application/json" not in content_type:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


class MarketingInteractionsApi:
    def __init__(self, base_url: Optional[str] = None, session=None, timeout: Optional[float] = None):
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._session = session
        self._local = threading.local()

    @property
    def session(self):
        """
        The injected session, or else one `requests.Session` per thread.

        Without an injected session, threads of the coordinator's fetch pool
        never share a `Session`.
        """
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def _request(self, ctx: RequestContext, method: str, path: str, payload: Optional[dict] = None) -> Result:
        if ctx is None or not ctx.token:
            return Err(ErrorKind.AUTH, "Authentication required")

        url = f"{self.base_url}{path}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {ctx.token}",
        }
        try:
            resp = self.session.request(method, url, json=payload, headers=headers, timeout=self.timeout)
        except requests.Timeout:
            logger.warning("[MARKETING-CLIENT] %s %s timed out after %ss", method, url, self.timeout)
            return Err(ErrorKind.NETWORK, f"Request timed out after {self.timeout:g}s")
        except requests.RequestException as e:
            logger.warning("[MARKETING-CLIENT] %s %s failed: %s", method, url, e)
            return Err(ErrorKind.NETWORK, str(e) or "Network error")

        body = _json_or_none(resp)
        if 200 <= resp.status_code < 300:
            if not isinstance(body, dict):
                logger.warning("[MARKETING-CLIENT] %s %s returned a non-object body", method, url)
                return Err(ErrorKind.SERVER, "Malformed response")
            if body.get("success") is False:
                return Err(ErrorKind.SERVER, body.get("message") or "Request failed", data=body.get("data"))
            return Ok(body.get("data"), message=body.get("message", ""))

        message = (body.get("message") if isinstance(body, dict) else None) or f"HTTP error! status: {resp.status_code}"
        logger.warning(
            "[MARKETING-CLIENT] %s %s returned status=%s message=%r",
            method, url, resp.status_code, message,
        )
        return Err(ErrorKind.from_status(resp.status_code), message)

    @staticmethod
    def _section_path(kind: str, section: str) -> str:
        return f"/marketing/{kind}/{quote(str(section), safe='')}"

    @staticmethod
    def _body(section: str, section_id: Optional[str], **fields) -> dict:
        body = {k: v for k, v in fields.items() if v is not None}
        body["section"] = section
        if section_id:
            body["sectionId"] = section_id
        return body

    # Comments
    def get_comments(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("comments", section))

    def add_comment(self, ctx: RequestContext, section: str, content: str, section_id: Optional[str] = None) -> Result:
        return self._request(
            ctx, "POST", self._section_path("comments", section),
            self._body(section, section_id, content=content),
        )

    # Questions
    def get_questions(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("questions", section))

    def add_question(self, ctx: RequestContext, section: str, content: str, section_id: Optional[str] = None) -> Result:
        return self._request(
            ctx, "POST", self._section_path("questions", section),
            self._body(section, section_id, content=content),
        )

    def answer_question(self, ctx: RequestContext, question_id, answer: str) -> Result:
        return self._request(ctx, "PUT", f"/marketing/questions/{quote(str(question_id), safe='')}/answer", {"answer": answer})

    # Likes
    def get_likes(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("likes", section))

    def toggle_like(self, ctx: RequestContext, section: str, reaction: Optional[str] = None, section_id: Optional[str] = None) -> Result:
        return self._request(
            ctx, "POST", self._section_path("likes", section),
            self._body(section, section_id, reaction=reaction),
        )

    # Approvals
    def get_approvals(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("approvals", section))

    def get_approval_status(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("approvals", section) + "/status")

    def submit_approval(self, ctx: RequestContext, section: str, status: str, comments: Optional[str] = None, section_id: Optional[str] = None) -> Result:
        return self._request(
            ctx, "POST", self._section_path("approvals", section),
            self._body(section, section_id, status=status, comments=comments),
        )

    # Sections
    def get_section(self, ctx: RequestContext, section: str) -> Result:
        return self._request(ctx, "GET", self._section_path("sections", section))
