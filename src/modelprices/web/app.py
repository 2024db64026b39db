from __future__ import annotations

from flask import Flask

from modelprices.config import AppConfig
from modelprices.fetcher import CatalogFetcher
from modelprices.state import Fetcher, TableState


def create_app(
    config: AppConfig | None = None,
    state: TableState | None = None,
    fetcher: Fetcher | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or (state.config if state is not None else AppConfig())

    # Collaborators live on app.extensions for access in routes
    app.extensions["config"] = config
    app.extensions["table_state"] = state or TableState(config)
    app.extensions["fetcher"] = fetcher or CatalogFetcher(config)

    # Register blueprints
    from modelprices.web.routes.api import api_bp
    from modelprices.web.routes.table import table_bp

    app.register_blueprint(table_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
