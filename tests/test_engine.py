"""Recorder, Stepper, Session, SessionStore and configuration."""

import pytest

from config import SPEED_PRESETS, VisualizerConfig
from engine import (
    InvalidArgumentError,
    Recorder,
    Session,
    SessionStore,
    Stepper,
    StepperState,
    UnknownOperationError,
    UnknownStructureError,
)
from operations import get_operation
from operations.step import StepKind
from structures import Reason, Stack


@pytest.fixture
def push_trace():
    # START, INSERT, DONE
    return Recorder().record(get_operation("stack", "push"), Stack(), value=5)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_recorder_freezes_trace(push_trace):
    assert push_trace.key == "stack.push"
    assert push_trace.params == {"value": 5}
    assert isinstance(push_trace.steps, tuple)
    assert push_trace.metrics.total_steps == len(push_trace) == 3
    assert push_trace.steps[-1].note == "Push complete."


def test_trace_params_are_read_only(push_trace):
    with pytest.raises(TypeError):
        push_trace.params["value"] = 6
    assert push_trace.export()["params"] == {"value": 5}


def test_recorder_keeps_last_trace():
    rec = Recorder()
    assert rec.last_trace is None
    trace = rec.record(get_operation("stack", "pop"), Stack())
    assert rec.last_trace is trace
    assert trace.steps[-1].kind is StepKind.DONE
    assert "empty" in trace.steps[-1].note


def test_export_is_plain_data(push_trace):
    data = push_trace.export()
    assert data["structure"] == "stack"
    assert data["result"] == {"success": True, "index": 0, "value": 5}
    assert [s["kind"] for s in data["steps"]] == ["start", "insert", "done"]
    assert data["metrics"]["total_steps"] == 3


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def test_stepper_starts_paused_on_first_step(push_trace):
    stepper = Stepper()
    assert stepper.state is StepperState.IDLE
    stepper.start(push_trace)
    assert stepper.state is StepperState.PAUSED
    assert stepper.current_idx == 0
    assert stepper.revealed == 1
    assert stepper.total_steps == 3


def test_stepper_forward_and_back(push_trace):
    stepper = Stepper()
    stepper.start(push_trace)
    assert stepper.next_step()
    assert stepper.next_step()
    assert stepper.is_finished
    assert not stepper.next_step()
    assert stepper.prev_step()
    assert stepper.state is StepperState.PAUSED
    stepper.rewind()
    assert stepper.current_idx == 0
    assert not stepper.prev_step()


def test_goto_only_reaches_revealed_steps(push_trace):
    stepper = Stepper()
    stepper.start(push_trace)
    assert not stepper.goto_step(2)
    stepper.jump_to_end()
    assert stepper.current_step.is_final
    assert stepper.is_finished
    assert stepper.goto_step(1)
    assert stepper.state is StepperState.PAUSED


def test_play_and_tick(push_trace):
    stepper = Stepper(speed="fast")
    stepper.start(push_trace)
    stepper.play()
    assert stepper.is_playing
    assert not stepper.tick(now=0.0)
    assert stepper.tick(now=1e9)
    assert stepper.current_idx == 1
    stepper.pause()
    assert not stepper.tick(now=2e9)
    stepper.toggle_play()
    assert stepper.is_playing


def test_play_ignored_when_idle_or_finished(push_trace):
    stepper = Stepper()
    stepper.play()
    assert stepper.state is StepperState.IDLE
    stepper.start(push_trace)
    stepper.jump_to_end()
    stepper.play()
    assert stepper.is_finished


def test_on_step_callback(push_trace):
    seen = []
    stepper = Stepper(on_step=seen.append)
    stepper.start(push_trace)
    stepper.next_step()
    assert [s.kind for s in seen] == [StepKind.START, StepKind.INSERT]


def test_reset_returns_to_idle(push_trace):
    stepper = Stepper()
    stepper.start(push_trace)
    stepper.reset()
    assert stepper.state is StepperState.IDLE
    assert stepper.trace is None
    assert stepper.current_step is None
    assert stepper.to_dict()["step"] is None


def test_speed_presets():
    stepper = Stepper()
    stepper.set_speed("turbo")
    assert stepper.speed == SPEED_PRESETS["turbo"]
    stepper.set_speed("unknown")
    assert stepper.speed == SPEED_PRESETS["medium"]
    stepper.set_speed_value(0)
    assert stepper.speed == 0.02


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
def test_session_seeds_examples(session):
    assert session.snapshot("stack")["items"] == [10, 20, 30]
    assert session.snapshot("queue")["items"] == [10, 20, 30]
    assert session.structure("bst").in_order() == [20, 30, 40, 50, 60, 70, 80]
    assert session.structure("graph").get_edges() == [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]
    assert session.structure("hash_table").get("apple") == "red fruit"
    assert session.snapshot("linked_list")["items"] == []


def test_session_without_examples(empty_session):
    assert empty_session.snapshot("stack")["items"] == []
    assert empty_session.structure("bst").node_count == 0


def test_execute_records_before_playback(session):
    trace = session.execute("stack", "pop")
    assert trace.result.value == 30
    # the mutation is already applied while playback sits on step 0
    assert session.structure("stack").to_list() == [10, 20]
    stepper = session.stepper("stack")
    assert stepper.current_idx == 0
    assert stepper.trace is trace


def test_new_execute_replaces_playback(session):
    session.execute("stack", "push", value=1)
    session.stepper("stack").jump_to_end()
    second = session.execute("stack", "peek")
    stepper = session.stepper("stack")
    assert stepper.trace is second
    assert stepper.state is StepperState.PAUSED
    # other structures are untouched
    assert session.stepper("queue").state is StepperState.IDLE


def test_execute_converts_params_and_defaults(session):
    assert session.execute("bst", "insert", value="45").result.success
    assert session.execute("bst", "traverse").result.value == session.structure("bst").in_order()
    trace = session.execute("graph", "traverse", start="A", mode="BFS")
    assert trace.params == {"start": "A", "mode": "bfs"}


def test_execute_domain_failure_is_a_result(session):
    trace = session.execute("hash_table", "delete", key="pear")
    assert trace.result.reason is Reason.NOT_FOUND


@pytest.mark.parametrize(
    "structure, operation, kwargs, error",
    [
        ("heap", "insert", {"value": 1}, UnknownStructureError),
        ("bst", "rotate", {}, UnknownOperationError),
        ("bst", "insert", {}, InvalidArgumentError),
        ("bst", "insert", {"value": "ten"}, InvalidArgumentError),
        ("bst", "insert", {"value": 1, "extra": 2}, InvalidArgumentError),
        ("bst", "insert", {"value": 1, "structure": "x"}, InvalidArgumentError),
        ("bst", "insert", {"value": 1, "operation": "delete"}, InvalidArgumentError),
        ("bst", "traverse", {"order": "levelorder"}, InvalidArgumentError),
    ],
)
def test_execute_rejects_bad_requests(session, structure, operation, kwargs, error):
    with pytest.raises(error):
        session.execute(structure, operation, **kwargs)


def test_invalid_argument_is_a_value_error(session):
    with pytest.raises(ValueError):
        session.execute("linked_list", "insert_at", value=1, position="middle")


def test_bst_capacity_comes_from_config():
    viz = Session(VisualizerConfig(max_nodes=7))
    trace = viz.execute("bst", "insert", value=99)
    assert trace.result.reason is Reason.CAPACITY
    assert viz.snapshot("bst")["node_count"] == 7


def test_reset_structure(session):
    session.execute("stack", "push", value=1)
    session.reset("stack", seed=False)
    assert session.snapshot("stack")["items"] == []
    assert session.stepper("stack").state is StepperState.IDLE
    session.reset("stack")
    assert session.snapshot("stack")["items"] == [10, 20, 30]
    with pytest.raises(UnknownStructureError):
        session.reset("heap")


def test_state_payload(session):
    state = session.state("hash_table")
    assert state["snapshot"]["bucket_count"] == 10
    assert len(state["snapshot"]["buckets"]) == 10
    assert state["playback"]["state"] == "idle"
    assert state["operations"] == ["insert", "get", "delete"]


def test_set_speed_applies_to_every_stepper(session):
    session.set_speed("slow")
    assert session.stepper("graph").speed == SPEED_PRESETS["slow"]
    assert session.stepper("stack").speed == SPEED_PRESETS["slow"]


def test_session_store():
    store = SessionStore(VisualizerConfig(seed_examples=False))
    first = store.get_or_create()
    assert store.get_or_create(first.id) is first
    assert first.id in store and len(store) == 1
    named = store.get_or_create("abc")
    assert named.id == "abc"
    assert store.dispose("abc")
    assert not store.dispose("abc")
    assert store.get("abc") is None


def test_session_store_evicts_least_recently_used():
    store = SessionStore(VisualizerConfig(seed_examples=False, max_sessions=2))
    store.get_or_create("a")
    store.get_or_create("b")
    store.get_or_create("a")
    store.get_or_create("c")
    assert len(store) == 2
    assert "a" in store and "c" in store
    assert "b" not in store
    # an evicted id comes back as a fresh session
    assert store.get_or_create("b").snapshot("stack")["items"] == []
    assert "a" not in store


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
def test_config_defaults():
    cfg = VisualizerConfig()
    assert (cfg.max_nodes, cfg.bucket_count, cfg.speed, cfg.seed_examples) == (15, 10, "medium", True)


@pytest.mark.parametrize(
    "kwargs", [{"max_nodes": 0}, {"bucket_count": -1}, {"speed": "warp"}, {"max_nodes": "15"}, {"max_sessions": 0}]
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        VisualizerConfig(**kwargs)


def test_config_from_env():
    cfg = VisualizerConfig.from_env(
        {
            "DSVIZ_MAX_NODES":     "7",
            "DSVIZ_BUCKET_COUNT":  "5",
            "DSVIZ_SPEED":         "Fast",
            "DSVIZ_SEED_EXAMPLES": "no",
            "DSVIZ_MAX_SESSIONS":  "8",
        }
    )
    assert cfg.to_dict() == {
        "max_nodes":     7,
        "bucket_count":  5,
        "speed":         "fast",
        "seed_examples": False,
        "max_sessions":  8,
    }
    assert VisualizerConfig.from_env({}) == VisualizerConfig()


@pytest.mark.parametrize(
    "env", [{"DSVIZ_MAX_NODES": "lots"}, {"DSVIZ_SEED_EXAMPLES": "maybe"}, {"DSVIZ_BUCKET_COUNT": "0"}, {"DSVIZ_MAX_SESSIONS": "-1"}]
)
def test_config_from_env_rejects(env):
    with pytest.raises(ValueError):
        VisualizerConfig.from_env(env)
