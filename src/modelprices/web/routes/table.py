from __future__ import annotations

from flask import Blueprint, abort, current_app, redirect, render_template, request, url_for

from modelprices.columns import available_columns

table_bp = Blueprint("table", __name__)


def _state():
    return current_app.extensions["table_state"]


def _back():
    return redirect(url_for("table.index"))


@table_bp.route("/")
def index():
    """Pricing table page."""
    state = _state()
    view = state.view()
    if view.last_updated is None and view.error is None and not view.loading:
        # First visit: nothing fetched yet.
        state.refresh(current_app.extensions["fetcher"])
    if "q" in request.args:
        state.set_query(request.args["q"])
    view = state.view()

    config = current_app.extensions["config"]
    return render_template(
        "table.html",
        view=view,
        columns=available_columns(config.table),
        debounce_ms=round(config.debounce_seconds * 1000),
        descriptions_enabled=config.table.descriptions,
        page_size=config.page_size,
    )


@table_bp.route("/refresh", methods=["POST"])
def refresh():
    """Refetch the catalog."""
    _state().refresh(current_app.extensions["fetcher"])
    return _back()


@table_bp.route("/search", methods=["POST"])
def search():
    _state().set_query(request.form.get("q", ""))
    return _back()


@table_bp.route("/keep/<path:model_id>", methods=["POST"])
def toggle_keep(model_id: str):
    """Pin or unpin a model."""
    try:
        _state().toggle_keep(model_id)
    except KeyError:
        abort(404)
    return _back()


@table_bp.route("/providers/<provider>", methods=["POST"])
def toggle_provider(provider: str):
    _state().toggle_provider(provider)
    return _back()


@table_bp.route("/hide-free", methods=["POST"])
def toggle_hide_free():
    _state().toggle_hide_free()
    return _back()


@table_bp.route("/descriptions", methods=["POST"])
def toggle_descriptions():
    _state().toggle_descriptions()
    return _back()


@table_bp.route("/columns/<column_id>", methods=["POST"])
def toggle_column(column_id: str):
    try:
        _state().toggle_column(column_id)
    except KeyError:
        abort(404)
    return _back()


@table_bp.route("/sort/<key>", methods=["POST"])
def sort(key: str):
    """Sort by a column; re-selecting the same column flips direction."""
    try:
        _state().request_sort(key)
    except ValueError:
        abort(400)
    return _back()


@table_bp.route("/more", methods=["POST"])
def load_more():
    _state().load_more()
    return _back()


@table_bp.route("/clear", methods=["POST"])
def clear():
    """Reset search text, provider filter and the free-tier toggle."""
    _state().clear_filters()
    return _back()
