"""
Client-side state of the learning path panel.

States: IDLE -> LOADING -> {READY, FAILED}, and back to LOADING on every new
submission. Each submission gets a request token; only the response to the
latest token is applied, so an older, slower response can never overwrite a
newer one.
"""
import logging
import math
from enum import Enum
from typing import Awaitable, Iterable, Optional, Set

from learning_path_copilot.config import settings as config
from learning_path_copilot.path.schemas import LearningPath, LearningPathInput

logger = logging.getLogger(__name__)


class PathStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def compute_progress(step_ids: Iterable[str], completed: Iterable[str]) -> int:
    """
    Percentage of completed steps, rounded half up.

    Returns 0 when there are no steps. Completed ids that are not among the
    steps are not counted.
    """
    ids = set(step_ids)
    if not ids:
        return 0
    done = len(ids.intersection(completed))
    return int(math.floor(100 * done / len(ids) + 0.5))


def error_message(error: BaseException) -> str:
    """User-displayable text for a failed generation."""
    message = str(error).strip()
    return message or config.DEFAULT_ERROR_MESSAGE


class LearningPathViewState:
    """Current path, loading/error status and completed-step tracking."""

    def __init__(self):
        self.status = PathStatus.IDLE
        self.path: Optional[LearningPath] = None
        self.error: Optional[str] = None
        self.completed_steps: Set[str] = set()
        self._latest_token = 0

    @property
    def is_loading(self) -> bool:
        return self.status == PathStatus.LOADING

    @property
    def total_steps(self) -> int:
        return len(self.path.steps) if self.path else 0

    @property
    def completed_count(self) -> int:
        return len(self.completed_steps)

    @property
    def progress(self) -> int:
        """Derived on every access; never stored."""
        if not self.path:
            return 0
        return compute_progress(self.path.step_ids(), self.completed_steps)

    def begin_request(self) -> int:
        """
        Enter LOADING for a new submission.

        Error and completed steps are cleared immediately; the current path
        stays until a successful response replaces it.

        Returns:
            Token identifying this request
        """
        self._latest_token += 1
        self.status = PathStatus.LOADING
        self.error = None
        self.completed_steps = set()
        return self._latest_token

    def is_current(self, token: int) -> bool:
        return token == self._latest_token

    def resolve(self, token: int, path: LearningPath) -> bool:
        """
        Apply a successful response.

        Returns:
            False if the response belongs to a superseded request and was dropped
        """
        if not self.is_current(token):
            logger.info(f"Discarding stale learning path for request {token} (latest is {self._latest_token})")
            return False
        self.status = PathStatus.READY
        self.path = path
        self.error = None
        self.completed_steps = set()
        return True

    def reject(self, token: int, error: BaseException) -> bool:
        """
        Apply a failed response. The previous path, if any, is kept.

        Returns:
            False if the failure belongs to a superseded request and was dropped
        """
        if not self.is_current(token):
            logger.info(f"Discarding stale failure for request {token}: {error}")
            return False
        self.status = PathStatus.FAILED
        self.error = error_message(error)
        return True

    def submit(self, generator, path_input: LearningPathInput, lang) -> Awaitable[bool]:
        """
        Start one generation request.

        The state is LOADING as soon as this returns; awaiting the result
        settles the request into READY or FAILED. Generation failures never
        propagate out of the awaitable.

        Usage:
            pending = state.submit(generator, path_input, "en")
            # state.status is PathStatus.LOADING here
            applied = await pending

        Returns:
            Awaitable resolving to True if this request's outcome was applied
        """
        token = self.begin_request()
        return self._settle(token, generator.generate(path_input, lang))

    async def _settle(self, token: int, pending: Awaitable[LearningPath]) -> bool:
        try:
            path = await pending
        except Exception as e:
            logger.error(f"Learning path request {token} failed: {e}")
            return self.reject(token, e)
        return self.resolve(token, path)

    def toggle_step(self, step_id: str) -> None:
        """Flip completion of one step. Ids outside the current path are ignored."""
        if not self.path or step_id not in self.path.step_ids():
            logger.warning(f"Ignoring toggle for unknown step id {step_id!r}")
            return
        if step_id in self.completed_steps:
            self.completed_steps.discard(step_id)
        else:
            self.completed_steps.add(step_id)

    def sync_completed(self, step_ids: Iterable[str]) -> None:
        """
        Bring the completed set in line with a checkbox selection by toggling
        every step whose state differs.
        """
        for step_id in set(step_ids).symmetric_difference(self.completed_steps):
            self.toggle_step(step_id)

    def is_completed(self, step_id: str) -> bool:
        return step_id in self.completed_steps
