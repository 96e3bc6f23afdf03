"""Tests for tool state decoding."""

import pytest

from opencode_events.core.tool_state import decode_tool_state, is_running
from opencode_events.models.tool_state import (
    ToolCompleted,
    ToolError,
    ToolPending,
    ToolRunning,
    ToolTime,
)
from opencode_events.utils.errors import ParseError, ParseErrorCode


class TestDecodeToolState:
    """Tests for decode_tool_state function."""

    def test_pending(self):
        """Test pending state with input and raw."""
        state = decode_tool_state({"status": "pending", "input": {"a": 1}, "raw": '{"a":'})
        assert isinstance(state, ToolPending)
        assert state.input == {"a": 1}
        assert state.raw == '{"a":'

    def test_pending_without_input(self):
        """Test absent pending input is treated as empty."""
        state = decode_tool_state({"status": "pending"})
        assert state.input == {}
        assert state.raw is None

    def test_running(self):
        """Test running state."""
        state = decode_tool_state(
            {"status": "running", "input": {"command": "ls"}, "time": {"start": 5}}
        )
        assert isinstance(state, ToolRunning)
        assert state.input == {"command": "ls"}
        assert state.time == ToolTime(start=5)

    def test_running_without_input(self):
        """Test running input is optional."""
        state = decode_tool_state({"status": "running", "time": {"start": 5}})
        assert state.input is None

    def test_running_requires_start_time(self):
        """Test running state without time is rejected."""
        with pytest.raises(ParseError) as exc_info:
            decode_tool_state({"status": "running", "input": {}})
        assert exc_info.value.code == ParseErrorCode.MISSING_FIELD
        assert exc_info.value.location.startswith("state")

    def test_completed(self):
        """Test completed state fields."""
        state = decode_tool_state(
            {
                "status": "completed",
                "output": "file1\nfile2\n",
                "title": "List files",
                "metadata": {"exit": 0, "truncated": False},
                "time": {"start": 10, "end": 25},
            }
        )
        assert isinstance(state, ToolCompleted)
        assert state.output == "file1\nfile2\n"
        assert state.title == "List files"
        assert state.metadata == {"exit": 0, "truncated": False}
        assert state.time.duration_ms == 15

    def test_completed_without_end_time(self):
        """Test completed end time is optional."""
        state = decode_tool_state({"status": "completed", "time": {"start": 10}})
        assert state.time.end is None
        assert state.time.duration_ms is None
        assert state.output is None
        assert state.title is None
        assert state.metadata is None

    def test_error(self):
        """Test error state."""
        state = decode_tool_state(
            {"status": "error", "error": "boom", "time": {"start": 1, "end": 2}}
        )
        assert isinstance(state, ToolError)
        assert state.error == "boom"

    def test_error_without_message(self):
        """Test error message is optional."""
        state = decode_tool_state({"status": "error", "time": {"start": 1, "end": 2}})
        assert state.error is None

    def test_unknown_status(self):
        """Test statuses outside the four lifecycle states are rejected."""
        with pytest.raises(ParseError) as exc_info:
            decode_tool_state({"status": "cancelled", "time": {"start": 1}})
        assert exc_info.value.code == ParseErrorCode.UNKNOWN_STATUS
        assert exc_info.value.location == "state"

    def test_missing_status(self):
        """Test state without status is rejected."""
        with pytest.raises(ParseError) as exc_info:
            decode_tool_state({"input": {}})
        assert exc_info.value.code == ParseErrorCode.MISSING_FIELD

    def test_non_object_state(self):
        """Test non-object state is rejected."""
        with pytest.raises(ParseError):
            decode_tool_state("running")


class TestIsRunning:
    """Tests for the is_running predicate."""

    def test_running_state(self):
        """Test running state reports in flight."""
        assert is_running(ToolRunning(time=ToolTime(start=1)))

    @pytest.mark.parametrize(
        "state",
        [
            ToolPending(),
            ToolCompleted(time=ToolTime(start=1, end=2)),
            ToolError(time=ToolTime(start=1, end=2)),
            None,
        ],
    )
    def test_other_states(self, state):
        """Test every other state, and no state, are not in flight."""
        assert not is_running(state)
