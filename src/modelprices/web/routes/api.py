from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _state():
    return current_app.extensions["table_state"]


@api_bp.route("/models")
def models():
    """Return the current page of the table plus its surrounding state."""
    return jsonify(_state().view().to_dict())


@api_bp.route("/refresh", methods=["POST"])
def refresh():
    """Refetch the catalog; 502 when the upstream fetch fails."""
    state = _state()
    refreshed = state.refresh(current_app.extensions["fetcher"])
    view = state.view()
    if not refreshed and view.error is not None:
        return jsonify({"error": view.error}), 502
    return jsonify({"refreshed": refreshed, "total": len(state.catalog)})


@api_bp.route("/keep/<path:model_id>", methods=["POST"])
def toggle_keep(model_id: str):
    try:
        record = _state().toggle_keep(model_id)
    except KeyError:
        return jsonify({"error": "not found"}), 404
    return jsonify({"id": record.id, "keep": record.keep})


@api_bp.route("/sort/<key>", methods=["POST"])
def sort(key: str):
    try:
        sort_state = _state().request_sort(key)
    except ValueError:
        return jsonify({"error": f"unknown sort key: {key}"}), 400
    return jsonify({"key": sort_state.key, "direction": str(sort_state.direction)})


@api_bp.route("/more", methods=["POST"])
def load_more():
    state = _state()
    limit = state.load_more()
    return jsonify({"limit": limit, "has_more": state.view().has_more})


@api_bp.route("/query", methods=["POST"])
def set_query():
    """Set the search text, provider filter and free-tier toggle."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400

    if "q" in data and not isinstance(data["q"], str):
        return jsonify({"error": "q must be a string"}), 400
    providers = data.get("providers")
    if "providers" in data and not (
        isinstance(providers, list) and all(isinstance(p, str) for p in providers)
    ):
        return jsonify({"error": "providers must be a list of strings"}), 400
    if "hide_free" in data and not isinstance(data["hide_free"], bool):
        return jsonify({"error": "hide_free must be a boolean"}), 400

    state = _state()
    if "q" in data:
        state.set_query(data["q"])
    if "providers" in data:
        wanted = set(providers)
        for provider in wanted ^ state.query.providers:
            state.toggle_provider(provider)
    if "hide_free" in data and data["hide_free"] != state.query.hide_free:
        state.toggle_hide_free()
    return jsonify(state.view().to_dict())
