"""Flask JSON API, exercised through the test client."""

import pytest

from config import VisualizerConfig
from main import create_app


def test_structures_catalogue(client):
    resp = client.get("/api/structures")
    assert resp.status_code == 200
    names = [s["name"] for s in resp.get_json()["structures"]]
    assert names == ["linked_list", "stack", "queue", "bst", "hash_table", "graph"]
    bst = resp.get_json()["structures"][3]
    assert "insert" in [op["name"] for op in bst["operations"]]


def test_config_endpoint(client):
    assert client.get("/api/config").get_json()["max_nodes"] == 15


def test_state_of_seeded_structure(client):
    data = client.get("/api/bst").get_json()
    assert data["snapshot"]["node_count"] == 7
    assert data["playback"]["state"] == "idle"


def test_unknown_structure_is_404(client):
    resp = client.get("/api/heap")
    assert resp.status_code == 404
    assert "heap" in resp.get_json()["error"]


def test_run_returns_trace_and_keeps_state(client):
    resp = client.post("/api/bst/run/insert", json={"value": 45})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["trace"]["result"]["success"] is True
    assert data["trace"]["steps"][-1]["kind"] == "done"
    assert data["playback"]["state"] == "paused"
    assert data["playback"]["current_step"] == 0
    assert data["snapshot"]["node_count"] == 8
    # same client, same session
    assert client.get("/api/bst").get_json()["snapshot"]["node_count"] == 8


def test_sessions_are_per_client(app):
    first, second = app.test_client(), app.test_client()
    first.post("/api/stack/run/push", json={"value": 99})
    assert first.get("/api/stack").get_json()["snapshot"]["items"] == [10, 20, 30, 99]
    assert second.get("/api/stack").get_json()["snapshot"]["items"] == [10, 20, 30]


def test_hash_insert_reports_bucket(client):
    resp = client.post("/api/hash_table/run/insert", json={"key": "apple", "value": "red fruit"})
    assert resp.get_json()["trace"]["result"]["index"] == sum(ord(c) for c in "apple") % 10


def test_domain_failure_is_still_200(client):
    resp = client.post("/api/graph/run/add_edge", json={"a": "A", "b": "A"})
    assert resp.status_code == 200
    assert resp.get_json()["trace"]["result"] == {"success": False, "reason": "self_loop"}


@pytest.mark.parametrize(
    "path, body, status",
    [
        ("/api/bst/run/insert", {}, 400),
        ("/api/bst/run/insert", {"value": "abc"}, 400),
        ("/api/bst/run/insert", [1, 2], 400),
        ("/api/bst/run/insert", {"value": 5, "structure": "x"}, 400),
        ("/api/bst/run/insert", {"value": 5, "operation": "delete"}, 400),
        ("/api/bst/run/rotate", {}, 404),
        ("/api/heap/run/insert", {"value": 1}, 404),
    ],
)
def test_run_errors(client, path, body, status):
    resp = client.post(path, json=body)
    assert resp.status_code == status
    assert "error" in resp.get_json()


def test_step_before_run_is_400(client):
    assert client.post("/api/queue/step/next").status_code == 400


def test_playback_actions(client):
    total = len(client.post("/api/stack/run/pop").get_json()["trace"]["steps"])

    data = client.post("/api/stack/step/next").get_json()
    assert data["playback"]["current_step"] == 1

    data = client.post("/api/stack/step/end").get_json()
    assert data["playback"]["current_step"] == total - 1
    assert data["playback"]["state"] == "finished"
    assert client.post("/api/stack/step/next").status_code == 400

    data = client.post("/api/stack/step/rewind").get_json()
    assert data["playback"]["current_step"] == 0
    assert client.post("/api/stack/step/prev").status_code == 400

    data = client.post("/api/stack/step/goto", json={"index": 1}).get_json()
    assert data["playback"]["current_step"] == 1
    assert client.post("/api/stack/step/goto", json={"index": 99}).status_code == 400

    assert client.post("/api/stack/step/play").get_json()["playback"]["state"] == "playing"
    assert "moved" in client.post("/api/stack/step/tick").get_json()
    assert client.post("/api/stack/step/pause").get_json()["playback"]["state"] == "paused"
    assert client.post("/api/stack/step/explode").status_code == 404


def test_reset(client):
    client.post("/api/queue/run/dequeue")
    data = client.post("/api/queue/reset", json={"seed": False}).get_json()
    assert data["snapshot"]["items"] == []
    assert data["playback"]["state"] == "idle"
    data = client.post("/api/queue/reset").get_json()
    assert data["snapshot"]["items"] == [10, 20, 30]
    assert client.post("/api/queue/reset", json={"seed": "yes"}).status_code == 400


def test_speed(client):
    resp = client.post("/api/config/speed", json={"speed": "fast"})
    assert resp.get_json() == {"speed": "fast", "seconds_per_step": 0.3}
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


def test_app_honours_config():
    client = create_app(VisualizerConfig(seed_examples=False, bucket_count=4)).test_client()
    data = client.get("/api/hash_table").get_json()
    assert data["snapshot"]["bucket_count"] == 4
    assert data["snapshot"]["size"] == 0


def test_session_count_is_capped():
    app = create_app(VisualizerConfig(seed_examples=False, max_sessions=3))
    for _ in range(5):
        assert app.test_client().get("/api/stack").status_code == 200
    assert len(app.extensions["dsviz_sessions"]) == 3


def test_hash_insert_of_astral_key(client):
    resp = client.post("/api/hash_table/run/insert", json={"key": "\U0001F600", "value": "grin"})
    assert resp.get_json()["trace"]["result"]["index"] == 9
