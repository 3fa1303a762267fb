"""
Client-side coordinator for one marketing plan section.

Holds the cached view of the section (all four interaction kinds) and
funnels every write through the same sequence: send the mutation, wait for
it, then refetch the whole section so the cache reflects what the server
stored.  Only one mutation runs at a time; a second one is turned away
rather than queued.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from .api import MarketingInteractionsApi, RequestContext
from .errors import ErrorKind, NotAuthenticated
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

KINDS = ("comments", "questions", "likes", "approvals")

BUSY_MESSAGE = "Another submission is in progress"


def _empty_view() -> dict:
    return {kind: [] for kind in KINDS}


class MutationCoordinator:
    def __init__(
        self,
        section: str,
        context: RequestContext,
        api: Optional[MarketingInteractionsApi] = None,
        executor_factory: Optional[Callable] = None,
    ):
        self.section = section
        self.context = context
        self.api = api or MarketingInteractionsApi()
        self.executor_factory = executor_factory or (lambda: ThreadPoolExecutor(max_workers=len(KINDS)))

        self.data = _empty_view()
        self.error: Optional[str] = None
        self.errors: dict = {}
        self.loading = False
        self.is_submitting = False

        self._submit_lock = threading.Lock()
        self._state_lock = threading.Lock()
        # Bumped by cleanup(); results started under an older value are dropped.
        self._generation = 0

    # ---------- reads ----------
    def _getters(self):
        return {
            "comments": self.api.get_comments,
            "questions": self.api.get_questions,
            "likes": self.api.get_likes,
            "approvals": self.api.get_approvals,
        }

    def fetch_interactions(self) -> Result:
        """
        Fetch the four kinds concurrently.

        Kinds that succeed replace their slice of the cache; kinds that fail
        keep whatever was cached before and are reported in `errors`.
        """
        generation = self._generation
        self.loading = True
        try:
            with self.executor_factory() as pool:
                futures = {
                    kind: pool.submit(getter, self.context, self.section)
                    for kind, getter in self._getters().items()
                }
                results = {kind: future.result() for kind, future in futures.items()}
        finally:
            if generation == self._generation:
                self.loading = False

        with self._state_lock:
            if generation != self._generation:
                logger.debug("[MARKETING-CLIENT] Discarding fetch for section=%s after cleanup", self.section)
                return Err(ErrorKind.SERVER, "Discarded after cleanup")

            errors = {}
            for kind, result in results.items():
                if not result.ok:
                    errors[kind] = result.message
                elif not isinstance(result.data, dict):
                    results[kind] = Err(ErrorKind.SERVER, "Malformed response")
                    errors[kind] = "Malformed response"
                else:
                    self.data[kind] = result.data.get(kind, [])
            self.errors = errors

            if errors:
                first_kind = next(iter(errors))
                self.error = errors[first_kind]
                logger.warning(
                    "[MARKETING-CLIENT] Partial fetch for section=%s failed_kinds=%s",
                    self.section, sorted(errors),
                )
                return Err(results[first_kind].kind, self.error, data=self.data)

            self.error = None
            return Ok(self.data)

    # ---------- writes ----------
    def _mutate(self, call, *args, **kwargs) -> Result:
        if not self.context or not self.context.is_authenticated:
            raise NotAuthenticated()

        if not self._submit_lock.acquire(blocking=False):
            return Err(ErrorKind.CONFLICT, BUSY_MESSAGE)

        generation = self._generation
        self.is_submitting = True
        try:
            result = call(self.context, *args, **kwargs)
            if generation != self._generation:
                return result
            if not result.ok:
                self.error = result.message
                logger.info(
                    "[MARKETING-CLIENT] %s failed for section=%s kind=%s",
                    call.__name__, self.section, result.kind.value,
                )
                return result
            self.fetch_interactions()
            return result
        finally:
            self.is_submitting = False
            self._submit_lock.release()

    def add_comment(self, content: str, section_id: Optional[str] = None) -> Result:
        return self._mutate(self.api.add_comment, self.section, content, section_id=section_id)

    def add_question(self, content: str, section_id: Optional[str] = None) -> Result:
        return self._mutate(self.api.add_question, self.section, content, section_id=section_id)

    def answer_question(self, question_id, answer: str) -> Result:
        return self._mutate(self.api.answer_question, question_id, answer)

    def toggle_like(self, reaction: Optional[str] = None, section_id: Optional[str] = None) -> Result:
        return self._mutate(self.api.toggle_like, self.section, reaction=reaction, section_id=section_id)

    def submit_approval(self, status: str, comments: Optional[str] = None, section_id: Optional[str] = None) -> Result:
        return self._mutate(
            self.api.submit_approval, self.section, status, comments=comments, section_id=section_id,
        )

    def cleanup(self) -> None:
        with self._state_lock:
            self._generation += 1
            self.data = _empty_view()
            self.error = None
            self.errors = {}
            self.loading = False
