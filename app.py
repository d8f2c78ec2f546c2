from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from dots_core.codec import json_int
from dots_core.config import check_dims, default_dims, env_flag
from game import (
    GameState,
    available_lines,
    initial_state,
    is_line_drawn,
    line_from_json,
    line_in_bounds,
    line_to_json,
    place_line_result,
    state_from_json,
    state_to_json,
)

app = Flask(__name__)


def _bad_request(error: str) -> Any:
    app.logger.warning("rejected %s %s: %s", request.method, request.path, error)
    return jsonify({"ok": False, "error": error}), 400


def _available_json(state: GameState) -> list:
    return [line_to_json(ln) for ln in available_lines(state)]


def _json_body() -> Optional[Dict[str, Any]]:
    # Missing or unparsable bodies count as empty; anything but an object is rejected.
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _dims_from_body(body: Dict[str, Any], fallback: Optional[GameState] = None) -> Tuple[int, int]:
    rows_in = body.get("rows")
    cols_in = body.get("cols")
    if fallback is not None:
        rows_in = fallback.rows if rows_in is None else rows_in
        cols_in = fallback.cols if cols_in is None else cols_in
    rows = json_int(rows_in, "rows") if rows_in is not None else None
    cols = json_int(cols_in, "cols") if cols_in is not None else None
    return check_dims(*default_dims(rows, cols))


def _state_and_line(body: Dict[str, Any]) -> Tuple[GameState, Any]:
    state = state_from_json(body.get("state"))
    line = line_from_json(body.get("line"))
    return state, line


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        rows, cols = _dims_from_body(body)
        state = initial_state(rows, cols)
    except (TypeError, ValueError) as e:
        return _bad_request(f"bad dimensions: {e}")
    return jsonify({"ok": True, "state": state_to_json(state), "available": _available_json(state)})


@app.post("/api/reset")
def api_reset() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        current = state_from_json(body["state"]) if body.get("state") is not None else None
        rows, cols = _dims_from_body(body, fallback=current)
        state = initial_state(rows, cols)
    except (TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "state": state_to_json(state), "available": _available_json(state)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state, line = _state_and_line(body)
    except ValueError as e:
        return _bad_request(str(e))
    if not line_in_bounds(state.rows, state.cols, line):
        return _bad_request(f"line off the grid: {line_to_json(line)}")
    result = place_line_result(state, line)
    return jsonify({
        "ok": True,
        "applied": result.applied,
        "boxesCompleted": result.boxes_completed,
        "state": state_to_json(result.state),
        "available": _available_json(result.state),
    })


@app.post("/api/drawn")
def api_drawn() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state, line = _state_and_line(body)
    except ValueError as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "drawn": is_line_drawn(state, line)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
