import pytest

from startkit.errors import ErrorCode, StartError
from startkit.state import State


class Recorder(State):
    def __init__(self):
        self.calls = []
        self.close_count = 0

    def on_handle(self, *args):
        self.calls.append(("handle", args))
        return "handled"

    def on_update(self, *args):
        self.calls.append(("update", args))
        return len(args)

    def on_close(self):
        self.close_count += 1


def test_handle_and_update_forward_arguments():
    state = Recorder()
    assert State.handle(state, "key", 3) == "handled"
    assert State.update(state, 0.5) == 1
    assert state.calls == [("handle", ("key", 3)), ("update", (0.5,))]


def test_base_state_reports_not_implemented():
    state = State()
    with pytest.raises(StartError) as info:
        state.handle()
    assert info.value.code is ErrorCode.NOT_IMPLEMENTED
    with pytest.raises(StartError) as info:
        state.update()
    assert info.value.code is ErrorCode.NOT_IMPLEMENTED


def test_close_runs_hook_once():
    state = Recorder()
    State.close(state)
    State.close(state)
    assert state.close_count == 1
    assert state.closed is True


def test_context_manager_closes():
    with Recorder() as state:
        assert State.update(state) == 0
    assert state.close_count == 1
    assert state.closed is True


def test_closed_state_rejects_calls():
    state = Recorder()
    State.close(state)
    with pytest.raises(StartError) as info:
        State.update(state)
    assert info.value.code is ErrorCode.NULL_POINTER
    assert state.calls == []