"""
main.py — Data Structure Visualizer Flask App
==============================================
JSON API in front of the visualizer engines.  Every client gets its own
Session (one instance of each structure, one stepper per structure);
the renderer drives playback through the /step routes.

Routes:
  GET  /api/structures                     – operation catalogue
  GET  /api/config                         – active configuration
  POST /api/config/speed                   – playback speed preset
  GET  /api/<structure>                    – snapshot + playback state
  POST /api/<structure>/run/<operation>    – execute, returns the trace
  POST /api/<structure>/step/<action>      – next | prev | goto | rewind | end | play | pause | tick
  POST /api/<structure>/reset              – fresh instance (optionally seeded)

State management:
  Only the session id lives in the Flask cookie session.  The Session
  objects themselves sit in an in-memory SessionStore attached to the
  app, so traces never have to be serialised between requests.  The
  store keeps at most `max_sessions` of them; the least recently used
  one is dropped first.
"""

import logging
import secrets
from typing import Optional

from flask import Flask, current_app, jsonify, request, session

from config import SPEED_PRESETS, VisualizerConfig
from engine import (
    InvalidArgumentError,
    Session,
    SessionStore,
    UnknownOperationError,
    UnknownStructureError,
    VisualizerError,
)
from operations import STRUCTURES, list_operations

logger = logging.getLogger(__name__)

SESSION_KEY = "dsviz_session"


def create_app(config: Optional[VisualizerConfig] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = secrets.token_hex(32)

    cfg = config or VisualizerConfig.from_env()
    app.config["VISUALIZER"] = cfg
    app.extensions["dsviz_sessions"] = SessionStore(cfg)

    _register_error_handlers(app)
    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_session() -> Session:
    """Session for the current client, created on first use."""
    store: SessionStore = current_app.extensions["dsviz_sessions"]
    viz = store.get_or_create(session.get(SESSION_KEY))
    session[SESSION_KEY] = viz.id
    return viz


def request_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise InvalidArgumentError("Request body must be a JSON object")
    return body


def playback_payload(viz: Session, structure: str, **extra) -> dict:
    payload = {
        "structure": structure,
        "playback":  viz.stepper(structure).to_dict(),
        "snapshot":  viz.snapshot(structure),
    }
    payload.update(extra)
    return payload


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(VisualizerError)
    def handle_visualizer_error(exc: VisualizerError):
        status = 404 if isinstance(exc, (UnknownStructureError, UnknownOperationError)) else 400
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc)
        return jsonify({"error": str(exc)}), status


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    # -- catalogue / config ---------------------------------------------
    @app.route("/api/structures", methods=["GET"])
    def api_structures():
        return jsonify({
            "structures": [
                {"name": name, "operations": [info.to_dict() for info in list_operations(name)]}
                for name in STRUCTURES
            ]
        })

    @app.route("/api/config", methods=["GET"])
    def api_config():
        return jsonify(current_app.config["VISUALIZER"].to_dict())

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        speed = str(request_body().get("speed", "medium")).lower()
        if speed not in SPEED_PRESETS:
            return jsonify({"error": f"Unknown speed preset: {speed}"}), 400
        get_session().set_speed(speed)
        return jsonify({"speed": speed, "seconds_per_step": SPEED_PRESETS[speed]})

    # -- structure state ------------------------------------------------
    @app.route("/api/<structure>", methods=["GET"])
    def api_state(structure: str):
        return jsonify(get_session().state(structure))

    @app.route("/api/<structure>/reset", methods=["POST"])
    def api_reset(structure: str):
        viz = get_session()
        seed = request_body().get("seed")
        if seed is not None and not isinstance(seed, bool):
            return jsonify({"error": "seed must be true or false"}), 400
        viz.reset(structure, seed=seed)
        return jsonify(playback_payload(viz, structure))

    # -- run ------------------------------------------------------------
    @app.route("/api/<structure>/run/<operation>", methods=["POST"])
    def api_run(structure: str, operation: str):
        viz = get_session()
        trace = viz.execute(structure, operation, **request_body())
        return jsonify(playback_payload(viz, structure, trace=trace.export()))

    # -- playback -------------------------------------------------------
    @app.route("/api/<structure>/step/<action>", methods=["POST"])
    def api_step(structure: str, action: str):
        viz = get_session()
        stepper = viz.stepper(structure)

        if stepper.trace is None:
            return jsonify({"error": "Nothing to play; run an operation first"}), 400

        if action == "next":
            if not stepper.next_step():
                return jsonify({"error": "Already at last step"}), 400
        elif action == "prev":
            if not stepper.prev_step():
                return jsonify({"error": "Already at first step"}), 400
        elif action == "goto":
            idx = request_body().get("index", 0)
            if isinstance(idx, bool) or not isinstance(idx, int) or not stepper.goto_step(idx):
                return jsonify({"error": "Invalid step index"}), 400
        elif action == "rewind":
            stepper.rewind()
        elif action == "end":
            stepper.jump_to_end()
        elif action == "play":
            stepper.play()
        elif action == "pause":
            stepper.pause()
        elif action == "tick":
            moved = stepper.tick()
            return jsonify(playback_payload(viz, structure, moved=moved))
        else:
            return jsonify({"error": f"Unknown playback action: {action}"}), 404

        return jsonify(playback_payload(viz, structure))


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Data Structure Visualizer")
    print("  Starting Flask server...")
    print("  API at http://localhost:5000/api/structures")
    print("=" * 60)
    create_app().run(debug=True, host="0.0.0.0", port=5000)
