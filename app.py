from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from quadturn_core.commands import apply_command
from quadturn_core.config import Settings
from quadturn_core.snapshot import (
    command_from_json,
    json_to_state,
    snapshot,
    snapshot_to_json,
    state_to_json,
)
from quadturn_core.state import GameState, new_game

SETTINGS = Settings.from_env()

app = Flask(__name__)
logger = logging.getLogger("quadturn_core.app")


def _payload(s: GameState) -> Dict[str, Any]:
    return {"state": state_to_json(s), "snapshot": snapshot_to_json(snapshot(s))}


def _bad_request(message: str) -> Any:
    return jsonify({"ok": False, "error": {"kind": "bad_request", "message": message}}), 400


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    return jsonify({"ok": True, **_payload(new_game())})


@app.post("/api/snapshot")
def api_snapshot() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _bad_request("body must be an object")
    try:
        state = json_to_state(body.get("state"))
    except ValueError as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "snapshot": snapshot_to_json(snapshot(state))})


@app.post("/api/command")
def api_command() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _bad_request("body must be an object")
    try:
        state = json_to_state(body.get("state"))
        command = command_from_json(body.get("command"))
    except ValueError as e:
        return _bad_request(str(e))
    outcome = apply_command(state, command)
    if outcome.error is not None:
        logger.info("command rejected: %s", outcome.error.message)
    # Rejected actions are ordinary no-ops, so they still answer 200.
    return jsonify({
        "ok": outcome.ok,
        **_payload(outcome.state),
        "quit": outcome.quit,
        "error": outcome.error.to_json() if outcome.error is not None else None,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    from quadturn_core.log import configure_logging

    configure_logging(SETTINGS.log_level, SETTINGS.log_file)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.debug)
