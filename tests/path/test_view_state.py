"""
Tests for path/view_state.py - Learning path state machine and progress
"""
import asyncio
import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from learning_path_copilot.core.errors import GenerationServiceError, MalformedPathError
from learning_path_copilot.path.generator import PathGenerator
from learning_path_copilot.path.schemas import LearningPath
from learning_path_copilot.path.view_state import (
    LearningPathViewState,
    PathStatus,
    compute_progress,
)


def make_generator(result=None, error=None):
    """Mock generator whose generate() resolves to result or raises error"""
    generator = MagicMock()
    generator.generate = AsyncMock(return_value=result, side_effect=error)
    return generator


class ControlledGenerator:
    """Generator whose calls resolve only when the test says so"""

    def __init__(self):
        self.pending = []

    async def generate(self, path_input, lang):
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


class TestComputeProgress:
    """Test progress metric"""

    def test_no_steps(self):
        assert compute_progress([], []) == 0

    def test_half(self):
        assert compute_progress(["s1", "s2"], ["s1"]) == 50

    def test_all(self):
        assert compute_progress(["s1", "s2", "s3"], ["s1", "s2", "s3"]) == 100

    def test_rounds_half_up(self):
        # 1/8 = 12.5%
        ids = [f"s{i}" for i in range(8)]
        assert compute_progress(ids, ["s0"]) == 13

    def test_thirds(self):
        assert compute_progress(["a", "b", "c"], ["a"]) == 33
        assert compute_progress(["a", "b", "c"], ["a", "b"]) == 67


class TestTransitions:
    """Test IDLE/LOADING/READY/FAILED transitions"""

    def test_initial_state(self):
        state = LearningPathViewState()

        assert state.status == PathStatus.IDLE
        assert state.path is None
        assert state.error is None
        assert state.completed_steps == set()
        assert state.progress == 0

    @pytest.mark.asyncio
    async def test_submit_enters_loading_synchronously(self, learning_path, path_input):
        state = LearningPathViewState()
        state.error = "old error"
        state.completed_steps = {"s1"}

        pending = state.submit(make_generator(result=learning_path), path_input, "en")

        assert state.status == PathStatus.LOADING
        assert state.is_loading
        assert state.error is None
        assert state.completed_steps == set()

        assert await pending is True

    @pytest.mark.asyncio
    async def test_success_enters_ready(self, learning_path, path_input):
        state = LearningPathViewState()

        await state.submit(make_generator(result=learning_path), path_input, "en")

        assert state.status == PathStatus.READY
        assert state.path == learning_path
        assert state.completed_steps == set()
        assert state.error is None

    @pytest.mark.asyncio
    async def test_failure_on_first_generation(self, path_input):
        state = LearningPathViewState()

        await state.submit(make_generator(error=ConnectionError("Network unreachable")), path_input, "en")

        assert state.status == PathStatus.FAILED
        assert state.error == "Network unreachable"
        assert state.path is None

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_path(self, learning_path, path_input):
        state = LearningPathViewState()
        await state.submit(make_generator(result=learning_path), path_input, "en")
        state.toggle_step("s1")

        await state.submit(make_generator(error=GenerationServiceError("quota exceeded")), path_input, "en")

        assert state.status == PathStatus.FAILED
        assert state.path == learning_path
        assert state.error == "quota exceeded"
        # Completion was cleared when the retry started
        assert state.completed_steps == set()

    @pytest.mark.asyncio
    async def test_failure_without_message_uses_default(self, path_input):
        state = LearningPathViewState()

        await state.submit(make_generator(error=RuntimeError()), path_input, "en")

        assert state.error == "System unavailable. Please retry shortly."

    @pytest.mark.asyncio
    async def test_malformed_output_fails(self, path_input):
        state = LearningPathViewState()

        await state.submit(make_generator(error=MalformedPathError("Learning path is incomplete")), path_input, "en")

        assert state.status == PathStatus.FAILED
        assert state.path is None

    @pytest.mark.asyncio
    async def test_new_path_resets_completion(self, learning_path, path_payload, path_input):
        state = LearningPathViewState()
        await state.submit(make_generator(result=learning_path), path_input, "en")
        state.toggle_step("s2")

        path_payload["summary"] = "A different plan"
        second = LearningPath.model_validate(path_payload)
        await state.submit(make_generator(result=second), path_input, "en")

        assert state.path == second
        assert state.completed_steps == set()

    @pytest.mark.asyncio
    async def test_data_structures_scenario(self, mock_llm, path_input):
        """One-step response yields READY with progress 0"""
        mock_llm.ainvoke.return_value.content = json.dumps({
            "summary": "Plan",
            "steps": [{
                "id": "s1",
                "title": "Arrays",
                "description": "Basics",
                "duration": "1 week",
                "academyName": "USTHB",
                "courseLink": "https://usthb.dz",
                "isUniversityModule": True,
            }],
            "forwardLookingSentence": "Keep going.",
        })
        generator = PathGenerator(llm_factory=MagicMock(return_value=mock_llm))
        state = LearningPathViewState()

        await state.submit(generator, path_input, "en")

        assert state.status == PathStatus.READY
        assert state.total_steps == 1
        assert state.progress == 0
        prompt = mock_llm.ainvoke.call_args[0][0][1].content
        for value in ("Learn Data Structures", "2024-12-01", "beginner", "5"):
            assert value in prompt


class TestStaleResponses:
    """Only the latest submission may change the state"""

    @pytest.mark.asyncio
    async def test_older_response_discarded(self, learning_path, path_payload, path_input):
        path_payload["summary"] = "Newest plan"
        newest = LearningPath.model_validate(path_payload)
        generator = ControlledGenerator()
        state = LearningPathViewState()

        first = asyncio.ensure_future(state.submit(generator, path_input, "en"))
        second = asyncio.ensure_future(state.submit(generator, path_input, "en"))
        await asyncio.sleep(0)

        # Newer request resolves first, then the older one arrives late
        generator.pending[1].set_result(newest)
        assert await second is True
        generator.pending[0].set_result(learning_path)
        assert await first is False

        assert state.status == PathStatus.READY
        assert state.path == newest

    @pytest.mark.asyncio
    async def test_stale_failure_discarded(self, learning_path, path_input):
        generator = ControlledGenerator()
        state = LearningPathViewState()

        first = asyncio.ensure_future(state.submit(generator, path_input, "en"))
        second = asyncio.ensure_future(state.submit(generator, path_input, "en"))
        await asyncio.sleep(0)

        generator.pending[1].set_result(learning_path)
        await second
        generator.pending[0].set_exception(ConnectionError("late failure"))
        await first

        assert state.status == PathStatus.READY
        assert state.error is None

    def test_tokens_increase(self):
        state = LearningPathViewState()
        first = state.begin_request()
        second = state.begin_request()

        assert second > first
        assert not state.is_current(first)
        assert state.is_current(second)


class TestToggle:
    """Test completed-step tracking"""

    @pytest.fixture
    def ready_state(self, learning_path):
        state = LearningPathViewState()
        token = state.begin_request()
        state.resolve(token, learning_path)
        return state

    def test_toggle_marks_and_unmarks(self, ready_state):
        ready_state.toggle_step("s1")
        assert ready_state.is_completed("s1")
        assert ready_state.progress == 33

        ready_state.toggle_step("s1")
        assert not ready_state.is_completed("s1")
        assert ready_state.progress == 0

    @pytest.mark.parametrize("step_id", ["s1", "s2", "s3", "unknown"])
    def test_toggle_is_involutive(self, ready_state, step_id):
        ready_state.toggle_step("s2")
        before = set(ready_state.completed_steps)

        ready_state.toggle_step(step_id)
        ready_state.toggle_step(step_id)

        assert ready_state.completed_steps == before

    def test_unknown_id_ignored(self, ready_state):
        ready_state.toggle_step("from-an-old-path")
        assert ready_state.completed_steps == set()

    def test_toggle_without_path_ignored(self):
        state = LearningPathViewState()
        state.toggle_step("s1")
        assert state.completed_steps == set()

    def test_progress_all_done(self, ready_state):
        for step_id in ["s1", "s2", "s3"]:
            ready_state.toggle_step(step_id)

        assert ready_state.progress == 100
        assert ready_state.completed_count == 3
        assert ready_state.total_steps == 3

    def test_sync_completed(self, ready_state):
        ready_state.toggle_step("s1")

        ready_state.sync_completed(["s2", "s3", "stale-id"])

        assert ready_state.completed_steps == {"s2", "s3"}
